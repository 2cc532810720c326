"""
User Management API

Every route requires the caller's identity provider token; listing
returns the users of the calling owner.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import get_account_orchestrator, get_user_service
from core.security import get_current_uid
from orchestrators.account_orchestrator import AccountOrchestrator
from schemas.common import SuccessResponse
from schemas.user import (
    CreateUserRequest,
    UpdateUserRoleRequest,
    UserResponse,
    UserListResponse,
)
from services.user_service import UserService


users_api_router = APIRouter(
    prefix="/user",
    tags=["Users"],
    dependencies=[Depends(get_current_uid)],
)


@users_api_router.post(
    "",
    response_model=SuccessResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    request: CreateUserRequest,
    orchestrator: AccountOrchestrator = Depends(get_account_orchestrator),
):
    user = orchestrator.create_user(
        owner_id=str(request.owner_id),
        name=request.name,
        email=request.email,
        role=request.role,
        password=request.password,
    )
    return SuccessResponse(data=UserResponse.model_validate(user))


@users_api_router.get("", response_model=SuccessResponse[UserListResponse])
def list_users(
    caller_uid: str = Depends(get_current_uid),
    user_service: UserService = Depends(get_user_service),
):
    users = user_service.get_all_for_owner(caller_uid)
    return SuccessResponse(data=[UserResponse.model_validate(user) for user in users])


@users_api_router.get("/{user_id}", response_model=SuccessResponse[UserResponse])
def get_user(user_id: UUID, user_service: UserService = Depends(get_user_service)):
    user = user_service.get_by_id(str(user_id))
    return SuccessResponse(data=UserResponse.model_validate(user))


@users_api_router.patch("/{user_id}/role", response_model=SuccessResponse[UserResponse])
def update_user_role(
    user_id: UUID,
    request: UpdateUserRoleRequest,
    user_service: UserService = Depends(get_user_service),
):
    user = user_service.update_role(str(user_id), request.role)
    return SuccessResponse(data=UserResponse.model_validate(user))


@users_api_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: UUID,
    orchestrator: AccountOrchestrator = Depends(get_account_orchestrator),
):
    orchestrator.delete_user(str(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
