from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from recruit_portal.db.database import Base


class AdminUser(Base):
    """Reviewer account for the dashboard. Passwords are stored as bcrypt hashes."""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
