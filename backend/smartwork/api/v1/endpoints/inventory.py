from __future__ import annotations

from fastapi import APIRouter, Depends

from smartwork.api.v1.schemas.history import SuccessResponse
from smartwork.api.v1.schemas.inventory import FeatureCreate, FeatureCreatedResponse, FeatureUpdate
from smartwork.core.models.inventory import FeatureInventoryItem
from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.services.inventory_service import InventoryService  # noqa: TCH001
from smartwork.dependencies import get_current_user, get_inventory_service, resolve_user_id

router = APIRouter()


@router.get("", response_model=list[FeatureInventoryItem])
async def list_features(
    current_user: AuthUser = Depends(get_current_user),
    service: InventoryService = Depends(get_inventory_service),
):
    return list(await service.list_items(current_user.id))


@router.post("", response_model=FeatureCreatedResponse)
async def create_feature(
    payload: FeatureCreate,
    current_user: AuthUser = Depends(get_current_user),
    service: InventoryService = Depends(get_inventory_service),
):
    owner = resolve_user_id(current_user, payload.user_id)
    item = await service.create_item(payload, user_id=owner)
    return FeatureCreatedResponse(id=item.id)


@router.put("/{item_id}", response_model=SuccessResponse)
async def update_feature(
    item_id: str,
    payload: FeatureUpdate,
    current_user: AuthUser = Depends(get_current_user),
    service: InventoryService = Depends(get_inventory_service),
):
    await service.update_item(item_id, payload, user_id=current_user.id)
    return SuccessResponse()


@router.delete("/{item_id}", response_model=SuccessResponse)
async def delete_feature(
    item_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: InventoryService = Depends(get_inventory_service),
):
    await service.delete_item(item_id, user_id=current_user.id)
    return SuccessResponse()
