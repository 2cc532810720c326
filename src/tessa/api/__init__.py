"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- register_api: Owner registration
- owner_api: Owner lookup and deletion
- users_api: User management for an authenticated owner
- system_api: Root and health endpoints
"""

from .register_api import register_api_router
from .owner_api import owner_api_router
from .users_api import users_api_router
from .system_api import system_api_router

__all__ = [
    "register_api_router",
    "owner_api_router",
    "users_api_router",
    "system_api_router",
]
