"""
Owner Management API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import get_account_orchestrator, get_owner_service
from orchestrators.account_orchestrator import AccountOrchestrator
from schemas.common import SuccessResponse
from schemas.owner import OwnerResponse
from services.owner_service import OwnerService


owner_api_router = APIRouter(
    prefix="/owner",
    tags=["Owners"]
)


@owner_api_router.get("/{owner_id}", response_model=SuccessResponse[OwnerResponse])
def get_owner(owner_id: UUID, owner_service: OwnerService = Depends(get_owner_service)):
    owner = owner_service.get_by_id(str(owner_id))
    return SuccessResponse(data=OwnerResponse.model_validate(owner))


@owner_api_router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner(
    owner_id: UUID,
    orchestrator: AccountOrchestrator = Depends(get_account_orchestrator),
):
    orchestrator.delete_owner(str(owner_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
