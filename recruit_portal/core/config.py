"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (SQLite file by default, any SQLAlchemy URL works)
    database_url: str = "sqlite:///./database.sqlite"
    database_echo: bool = False

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Admin account seeded on startup (skipped when either is empty)
    admin_email: str = ""
    admin_password: str = ""

    # SMTP mail transport
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: str = ""
    smtp_pass: str = ""
    mail_from: str = "noreply@example.com"

    # Frontend
    public_api_url: str = ""
    cors_origins: List[str] = ["*"]

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def mail_configured(self) -> bool:
        """True when an SMTP host has been supplied."""
        return bool(self.smtp_host)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
