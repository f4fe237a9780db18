"""
Admin Service - reviewer accounts for the dashboard.

Accounts are created from the environment on startup (ADMIN_EMAIL /
ADMIN_PASSWORD) or with scripts/create_admin.py.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from recruit_portal.core.auth import hash_password, verify_password
from recruit_portal.core.config import get_settings
from recruit_portal.db.database import get_db_session
from recruit_portal.models.admin import AdminUser

settings = get_settings()
logger = logging.getLogger(__name__)


def get_admin_by_email(db: Session, email: str) -> Optional[AdminUser]:
    return db.query(AdminUser).filter(AdminUser.email == email.lower()).first()


def create_admin(db: Session, email: str, password: str) -> AdminUser:
    """Add an admin account. Caller commits."""
    admin = AdminUser(email=email.lower(), password_hash=hash_password(password))
    db.add(admin)
    db.flush()
    return admin


def authenticate_admin(db: Session, email: str, password: str) -> Optional[AdminUser]:
    """Return the admin for a matching credential pair, else None."""
    admin = get_admin_by_email(db, email)
    if not admin or not admin.is_active:
        return None
    if not verify_password(password, admin.password_hash):
        return None
    return admin


def ensure_default_admin() -> Optional[int]:
    """
    Create the configured admin if it doesn't exist yet.
    Returns the admin id, or None when no admin is configured.
    """
    if not settings.admin_email or not settings.admin_password:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin seed")
        return None

    with get_db_session() as db:
        existing = get_admin_by_email(db, settings.admin_email)
        if existing:
            logger.info("Admin account already exists with ID: %s", existing.id)
            return existing.id
        admin = create_admin(db, settings.admin_email, settings.admin_password)
        logger.info("Created admin account with ID: %s", admin.id)
        return admin.id
