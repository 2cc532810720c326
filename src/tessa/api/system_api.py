"""
Root and health endpoints (no authentication).
"""

from fastapi import APIRouter, Depends, Request

from core.config import Settings
from core.database import get_database_health
from core.dependencies import get_settings_from_app
from schemas.common import HealthCheckResponse, WelcomeResponse

system_api_router = APIRouter(tags=["System"])


@system_api_router.get("/", response_model=WelcomeResponse)
def root(settings: Settings = Depends(get_settings_from_app)):
    return WelcomeResponse(
        message=f"Welcome to {settings.app_name}",
        data={"version": settings.app_version, "status": "running"},
    )


@system_api_router.get("/health", response_model=HealthCheckResponse)
def health_status(request: Request):
    database = get_database_health(getattr(request.app.state, "engine", None))
    return HealthCheckResponse(status=database["status"], database=database)
