"""
Recruitment Portal
Application intake form plus an authenticated review dashboard.

Architecture:
- SQLAlchemy: recruits and admin accounts (SQLite by default, PostgreSQL via DATABASE_URL)
- FastAPI: public submission endpoint, JWT-protected review endpoints
- SMTP: best-effort confirmation email after each submission
"""

__version__ = "1.0.0"
