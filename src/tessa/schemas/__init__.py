"""
Pydantic schemas package.

This package contains all Pydantic models for request/response validation,
organized by domain:
- owner: Owner registration and responses
- user: User creation, role updates and responses
- common: Shared envelopes (success, error, health)

Usage:
    from schemas import CreateOwnerRequest, OwnerResponse, SuccessResponse
"""

from schemas.common import (
    SuccessResponse,
    ErrorResponse,
    WelcomeResponse,
    HealthCheckResponse,
)

from schemas.owner import (
    CreateOwnerRequest,
    OwnerResponse,
)

from schemas.user import (
    CreateUserRequest,
    UpdateUserRoleRequest,
    UserResponse,
    UserListResponse,
)

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "WelcomeResponse",
    "HealthCheckResponse",
    "CreateOwnerRequest",
    "OwnerResponse",
    "CreateUserRequest",
    "UpdateUserRoleRequest",
    "UserResponse",
    "UserListResponse",
]
