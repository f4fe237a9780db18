"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: SQLAlchemy tables (what is stored)
- Schemas: API contract (what client sends/receives)
"""

from recruit_portal.schemas.schemas import (
    LoginRequest,
    TokenResponse,
    AdminResponse,
    RecruitCreate,
    RecruitUpdate,
    RecruitResponse,
    RecruitOptionsResponse,
    MessageResponse,
    ErrorResponse,
)
