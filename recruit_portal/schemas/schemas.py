"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field rules mirror the browser-side form schema so a request that
bypasses the form is held to the same standard.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from urllib.parse import urlparse


# ============================================================
# HELPERS
# ============================================================

LINK_LABELS = {
    "facebook_link": "Facebook",
    "linkedin_link": "LinkedIn",
    "github_link": "GitHub",
    "portfolio_link": "Portfolio",
}


def is_valid_url(value: str) -> bool:
    """Absolute http(s) URL with a host."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def check_link(value: Optional[str], field_name: str, required: bool) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value and not required:
        # Optional links may be submitted blank
        return None
    if not is_valid_url(value):
        raise ValueError(f"Invalid {LINK_LABELS[field_name]} URL")
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int

class AdminResponse(BaseModel):
    admin_id: int
    email: str


# ============================================================
# RECRUIT SCHEMAS
# ============================================================

class RecruitCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    student_id: str = Field(..., min_length=1, max_length=50)
    personal_email: EmailStr
    gsuite_email: EmailStr
    phone_number: str = Field(..., min_length=10, max_length=30)
    enrollment_semester: str = Field(..., min_length=1)
    residential_semester: str = Field(..., min_length=1)
    current_semester: str = Field(..., min_length=1)
    preferred_department: str = Field(..., min_length=1)
    preferred_department_2: str = Field(..., min_length=1)
    hobbies: Optional[str] = None
    about: str = Field(..., min_length=10)
    skills: Optional[str] = None
    facebook_link: str
    linkedin_link: Optional[str] = None
    github_link: Optional[str] = None
    portfolio_link: Optional[str] = None

    @field_validator("facebook_link")
    @classmethod
    def validate_required_link(cls, value, info):
        return check_link(value, info.field_name, required=True)

    @field_validator("linkedin_link", "github_link", "portfolio_link")
    @classmethod
    def validate_optional_link(cls, value, info):
        return check_link(value, info.field_name, required=False)

    @field_validator("hobbies", "skills")
    @classmethod
    def blank_to_none(cls, value):
        if value is not None and not value.strip():
            return None
        return value


class RecruitUpdate(BaseModel):
    """Partial update - only fields present in the request body are applied."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    student_id: Optional[str] = Field(None, min_length=1, max_length=50)
    personal_email: Optional[EmailStr] = None
    gsuite_email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, min_length=10, max_length=30)
    enrollment_semester: Optional[str] = Field(None, min_length=1)
    residential_semester: Optional[str] = Field(None, min_length=1)
    current_semester: Optional[str] = Field(None, min_length=1)
    preferred_department: Optional[str] = Field(None, min_length=1)
    preferred_department_2: Optional[str] = Field(None, min_length=1)
    hobbies: Optional[str] = None
    about: Optional[str] = Field(None, min_length=10)
    skills: Optional[str] = None
    facebook_link: Optional[str] = None
    linkedin_link: Optional[str] = None
    github_link: Optional[str] = None
    portfolio_link: Optional[str] = None

    @field_validator("facebook_link")
    @classmethod
    def validate_required_link(cls, value, info):
        return check_link(value, info.field_name, required=True)

    @field_validator("linkedin_link", "github_link", "portfolio_link")
    @classmethod
    def validate_optional_link(cls, value, info):
        return check_link(value, info.field_name, required=False)

    @field_validator("hobbies", "skills")
    @classmethod
    def blank_to_none(cls, value):
        if value is not None and not value.strip():
            return None
        return value


class RecruitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    student_id: str
    personal_email: str
    gsuite_email: str
    phone_number: str
    enrollment_semester: str
    residential_semester: str
    current_semester: str
    preferred_department: str
    preferred_department_2: str
    hobbies: Optional[str] = None
    about: str
    skills: Optional[str] = None
    facebook_link: str
    linkedin_link: Optional[str] = None
    github_link: Optional[str] = None
    portfolio_link: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ============================================================
# FORM OPTION SCHEMAS
# ============================================================

class DepartmentOption(BaseModel):
    value: str
    label: str
    name: str

class RecruitOptionsResponse(BaseModel):
    departments: List[DepartmentOption]
    semesters: List[str]
    default_current_semester: str


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    detail: str
