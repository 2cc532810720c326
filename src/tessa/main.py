# main.py
from dotenv import load_dotenv
load_dotenv()
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import Depends, FastAPI
from sqlalchemy.engine import Engine
import uvicorn
import logging
from core.config import Settings, get_settings
from core.database import build_engine, build_session_factory, init_db
from core.error_handlers import register_error_handlers
from core.security import require_api_credentials
from integrations.identity_provider import FirebaseIdentityProvider, IdentityProviderClient
from api.register_api import register_api_router
from api.owner_api import owner_api_router
from api.users_api import users_api_router
from api.system_api import system_api_router

API_PREFIX = "/tessa/v1"

APP_LOGGERS = [
    "ACCOUNT_ORCHESTRATOR",
    "OWNER_SERVICE",
    "USER_SERVICE",
    "IDENTITY_PROVIDER",
    "CORE_CONFIG",
    "CORE_DATABASE",
    "API_ERRORS",
]


def configure_logging(settings: Settings) -> None:
    # Application loggers share uvicorn's handler when running under uvicorn
    uvicorn_logger = logging.getLogger("uvicorn")
    for logger_name in APP_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(settings.log_level.upper())
        if not logger.handlers and uvicorn_logger.handlers:
            logger.addHandler(uvicorn_logger.handlers[0])


def create_app(
    settings: Optional[Settings] = None,
    identity_provider: Optional[IdentityProviderClient] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """
    Build the application.

    Anything not passed in is created from the settings at startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)

        if app.state.engine is None:
            app.state.engine = build_engine(settings)
        app.state.session_factory = build_session_factory(app.state.engine)
        init_db(app.state.engine)

        if app.state.identity_provider is None:
            app.state.identity_provider = FirebaseIdentityProvider.from_settings(settings)

        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = None
    app.state.identity_provider = identity_provider

    register_error_handlers(app)

    guarded = [Depends(require_api_credentials)]
    app.include_router(register_api_router, prefix=API_PREFIX, dependencies=guarded)
    app.include_router(owner_api_router, prefix=API_PREFIX, dependencies=guarded)
    app.include_router(users_api_router, prefix=API_PREFIX, dependencies=guarded)
    app.include_router(system_api_router)

    return app


app = create_app()

if __name__ == "__main__":
    settings = get_settings()

    if settings.is_production:
        uvicorn.run("main:app", host="0.0.0.0", port=settings.port, workers=4)
    else:
        # reload=True is incompatible with workers > 1
        uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=True)
