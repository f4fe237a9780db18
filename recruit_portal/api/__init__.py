"""
API module - FastAPI routers, endpoint definitions and error handlers.

Usage:
    from recruit_portal.api import api_router, install_error_handlers
    app.include_router(api_router)
    install_error_handlers(app)
"""

from recruit_portal.api.errors import install_error_handlers
from recruit_portal.api.routes import api_router

__all__ = ["api_router", "install_error_handlers"]
