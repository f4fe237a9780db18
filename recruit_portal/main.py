"""
Recruitment Portal - Main Application

FastAPI backend with:
- SQLAlchemy storage for recruitment applications (SQLite or PostgreSQL)
- JWT authentication for the review dashboard
- Confirmation email on submission (SMTP, best effort)
- Static frontend served from /frontend/public

Run: uvicorn recruit_portal.main:app --reload
"""

import json
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, Response

from recruit_portal.api import api_router, install_error_handlers
from recruit_portal.core.config import get_settings
from recruit_portal.db.database import init_db
from recruit_portal.services.admin_service import ensure_default_admin

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")

# Pages of the frontend, keyed by URL path
PAGES = {
    "/": "index.html",
    "/success": "success.html",
    "/login": "login.html",
    "/dashboard": "dashboard.html",
}

# Create FastAPI app
app = FastAPI(
    title="Recruitment Portal",
    description="""
    Recruitment application intake and review.

    ## Features
    - **Recruits**: Public application form submission, admin listing/editing
    - **Authentication**: JWT bearer tokens for the review dashboard
    - **Notifications**: Confirmation email to each applicant
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# Include API routes
app.include_router(api_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create tables and the configured admin account."""
    init_db()
    ensure_default_admin()
    logger.info("Database initialized")


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from recruit_portal.db.database import test_database_connection

    return {
        "status": "healthy",
        "database": "connected" if test_database_connection() else "disconnected",
        "mail": "configured" if settings.mail_configured else "not configured",
    }


@app.get("/config.js", include_in_schema=False)
async def frontend_config():
    """Runtime settings for the browser (API base URL)."""
    config = {"apiUrl": settings.public_api_url.rstrip("/")}
    return Response(
        content=f"window.APP_CONFIG = {json.dumps(config)};\n",
        media_type="application/javascript",
    )


def _page_route(filename: str):
    async def serve_page():
        page_path = os.path.join(FRONTEND_DIR, filename)
        if os.path.exists(page_path):
            return FileResponse(page_path)
        return {"status": "healthy", "app": "Recruitment Portal", "message": "Frontend not found. API is running."}
    return serve_page


for path, filename in PAGES.items():
    app.add_api_route(path, _page_route(filename), methods=["GET"], tags=["Frontend"], include_in_schema=False)

# Serve static assets (scripts, styles)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")
