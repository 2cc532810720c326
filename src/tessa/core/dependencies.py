from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import Settings
from core.exceptions import DatabaseException
from integrations.identity_provider import IdentityProviderClient
from orchestrators.account_orchestrator import AccountOrchestrator
from repositories.owner_repository import OwnerRepository
from repositories.user_repository import UserRepository
from services.owner_service import OwnerService
from services.user_service import UserService


# ============================================================================
# Application-wide Dependencies
# ============================================================================
# Settings, session factory and identity provider are built once at
# startup (see main.create_app) and kept on app.state.

def get_settings_from_app(request: Request) -> Settings:
    """
    Get the settings the application was created with.

    Example:
        @router.get("/config")
        def get_config(settings: Settings = Depends(get_settings_from_app)):
            return {"environment": settings.environment}
    """
    return request.app.state.settings


def get_identity_provider(request: Request) -> IdentityProviderClient:
    """Get the process-wide identity provider client."""
    return request.app.state.identity_provider


# ============================================================================
# Database Dependencies
# ============================================================================

def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        Session: SQLAlchemy database session, closed after the request

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise DatabaseException("Database not initialized")

    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# Service Dependencies
# ============================================================================

def get_owner_service(db: Session = Depends(get_db)) -> OwnerService:
    """
    Get OwnerService instance.

    Args:
        db: Database session (automatically injected)
    """
    return OwnerService(OwnerRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Get UserService instance.

    Args:
        db: Database session (automatically injected)
    """
    return UserService(UserRepository(db))


def get_account_orchestrator(
    owner_service: OwnerService = Depends(get_owner_service),
    user_service: UserService = Depends(get_user_service),
    identity_provider: IdentityProviderClient = Depends(get_identity_provider),
) -> AccountOrchestrator:
    """
    Get AccountOrchestrator instance.

    Both services share the request's database session.

    Example:
        @router.post("/register")
        def register(
            request: CreateOwnerRequest,
            orchestrator: AccountOrchestrator = Depends(get_account_orchestrator)
        ):
            return orchestrator.create_owner(request.name, request.email, request.password)
    """
    return AccountOrchestrator(owner_service, user_service, identity_provider)
