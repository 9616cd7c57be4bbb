from __future__ import annotations

from fastapi import APIRouter, Depends

from smartwork.api.v1.schemas.history import SuccessResponse
from smartwork.api.v1.schemas.settings import SettingsUpdate
from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.services.settings_service import SettingsService  # noqa: TCH001
from smartwork.dependencies import get_current_user, get_settings_service

router = APIRouter()


@router.get("", response_model=dict[str, list[str]])
async def get_keyword_settings(
    current_user: AuthUser = Depends(get_current_user),
    service: SettingsService = Depends(get_settings_service),
):
    """Return the caller's category -> keywords map (empty when never saved)."""
    user_settings = await service.get_settings(current_user.id)
    return user_settings.category_keywords


@router.post("", response_model=SuccessResponse)
async def save_keyword_settings(
    payload: SettingsUpdate,
    current_user: AuthUser = Depends(get_current_user),
    service: SettingsService = Depends(get_settings_service),
):
    await service.replace_category_keywords(current_user.id, payload.sub_menus)
    return SuccessResponse()
