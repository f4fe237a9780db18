"""
Models module - SQLAlchemy ORM tables.

Tables:
- recruits: one row per submitted application
- admin_users: reviewers allowed to sign in to the dashboard
"""

from recruit_portal.models.admin import AdminUser
from recruit_portal.models.recruit import Recruit

__all__ = ["AdminUser", "Recruit"]
