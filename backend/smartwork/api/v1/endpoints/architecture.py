from __future__ import annotations

from fastapi import APIRouter, Depends

from smartwork.api.v1.schemas.inventory import ArchitectureRequest, ArchitectureResponse
from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.services.architecture_service import ArchitectureService, features_for_diagram  # noqa: TCH001
from smartwork.core.services.inventory_service import InventoryService  # noqa: TCH001
from smartwork.dependencies import get_architecture_service, get_current_user, get_inventory_service

router = APIRouter()


@router.post("", response_model=ArchitectureResponse)
async def generate_architecture(
    payload: ArchitectureRequest,
    current_user: AuthUser = Depends(get_current_user),
    inventory: InventoryService = Depends(get_inventory_service),
    service: ArchitectureService = Depends(get_architecture_service),
):
    """Mermaid diagram of the posted features, or of the caller's stored inventory."""
    features = payload.features
    if features is None:
        features = features_for_diagram(await inventory.list_items(current_user.id))
    return ArchitectureResponse(mermaid_code=await service.generate(features))
