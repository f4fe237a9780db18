"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from recruit_portal.api.routes.auth_routes import router as auth_router
from recruit_portal.api.routes.recruit_routes import router as recruit_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(recruit_router)
