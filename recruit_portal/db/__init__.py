"""
Database module - SQLAlchemy engine, sessions and declarative base.
"""
from recruit_portal.db.database import (
    Base,
    SessionLocal,
    engine,
    get_db,
    get_db_session,
    init_db,
    test_database_connection,
)

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "get_db_session",
    "init_db",
    "test_database_connection",
]
