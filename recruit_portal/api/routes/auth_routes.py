"""
Authentication Routes

POST /auth/login - Login and get JWT token
GET /auth/me - Get current admin from token
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from recruit_portal.db.database import get_db
from recruit_portal.core.auth import create_access_token, get_current_admin
from recruit_portal.core.config import get_settings
from recruit_portal.services.admin_service import authenticate_admin
from recruit_portal.services.notification_service import mask_email
from recruit_portal.schemas.schemas import LoginRequest, TokenResponse, AdminResponse, ErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse, responses={401: {"model": ErrorResponse}})
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    admin = authenticate_admin(db, request.email, request.password)
    if not admin:
        logger.warning("Failed login for %s", mask_email(request.email))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    expires = timedelta(minutes=settings.jwt_expire_minutes)
    token = create_access_token(data={"sub": str(admin.id), "email": admin.email}, expires_delta=expires)

    return TokenResponse(access_token=token, expires_in=int(expires.total_seconds()))


@router.get("/me", response_model=AdminResponse, responses={401: {"model": ErrorResponse}})
def get_me(admin: dict = Depends(get_current_admin)):
    """Get the admin the token was issued to."""
    return AdminResponse(**admin)
