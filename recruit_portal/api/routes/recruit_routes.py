"""
Recruit Routes

POST /recruits - Submit an application (public)
GET /recruits/options - Department and semester choices (public)
GET /recruits - List all applications (admin)
GET /recruits/{recruit_id} - Get one application (admin)
PATCH /recruits/{recruit_id} - Partially update an application (admin)
DELETE /recruits/{recruit_id} - Delete an application (admin)
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from typing import List

from recruit_portal.core.auth import get_current_admin
from recruit_portal.core.options import DEFAULT_CURRENT_SEMESTER, SEMESTERS, department_options
from recruit_portal.services.recruit_service import RecruitService, get_recruit_service
from recruit_portal.schemas.schemas import (
    RecruitCreate, RecruitUpdate, RecruitResponse, RecruitOptionsResponse, ErrorResponse
)

router = APIRouter(prefix="/recruits", tags=["Recruits"])

UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Unauthorized"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recruit not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Student ID already exists"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}


@router.post(
    "",
    response_model=RecruitResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**CONFLICT, **BAD_REQUEST},
)
def create_recruit(
    data: RecruitCreate,
    background_tasks: BackgroundTasks,
    service: RecruitService = Depends(get_recruit_service),
):
    """
    Submit a recruitment application. No authentication required.

    A confirmation email is sent to the applicant afterwards; whether it
    arrives has no effect on this response.
    """
    return service.create(data, background_tasks)


@router.get("/options", response_model=RecruitOptionsResponse)
def recruit_options():
    """Choices for the department and semester fields of the form."""
    return RecruitOptionsResponse(
        departments=department_options(),
        semesters=SEMESTERS,
        default_current_semester=DEFAULT_CURRENT_SEMESTER,
    )


@router.get("", response_model=List[RecruitResponse], responses=UNAUTHORIZED)
def list_recruits(
    admin: dict = Depends(get_current_admin),
    service: RecruitService = Depends(get_recruit_service),
):
    """Get every submitted application."""
    return service.find_all()


@router.get("/{recruit_id}", response_model=RecruitResponse, responses={**UNAUTHORIZED, **NOT_FOUND})
def get_recruit(
    recruit_id: int,
    admin: dict = Depends(get_current_admin),
    service: RecruitService = Depends(get_recruit_service),
):
    """Get one application by ID."""
    return service.find_one(recruit_id)


@router.patch(
    "/{recruit_id}",
    response_model=RecruitResponse,
    responses={**UNAUTHORIZED, **NOT_FOUND, **CONFLICT, **BAD_REQUEST},
)
def update_recruit(
    recruit_id: int,
    data: RecruitUpdate,
    admin: dict = Depends(get_current_admin),
    service: RecruitService = Depends(get_recruit_service),
):
    """Update an application. Only provided fields are changed."""
    return service.update(recruit_id, data)


@router.delete(
    "/{recruit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
def delete_recruit(
    recruit_id: int,
    admin: dict = Depends(get_current_admin),
    service: RecruitService = Depends(get_recruit_service),
):
    """Delete an application permanently."""
    service.remove(recruit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
