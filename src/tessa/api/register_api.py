"""
Owner Registration API
"""

from fastapi import APIRouter, Depends, status

from core.dependencies import get_account_orchestrator
from orchestrators.account_orchestrator import AccountOrchestrator
from schemas.common import SuccessResponse
from schemas.owner import CreateOwnerRequest, OwnerResponse


register_api_router = APIRouter(
    prefix="/register",
    tags=["Register"]
)


@register_api_router.post(
    "",
    response_model=SuccessResponse[OwnerResponse],
    status_code=status.HTTP_201_CREATED,
)
def register_owner(
    request: CreateOwnerRequest,
    orchestrator: AccountOrchestrator = Depends(get_account_orchestrator),
):
    """Register an owner account and its login identity."""
    owner = orchestrator.create_owner(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return SuccessResponse(data=OwnerResponse.model_validate(owner))
