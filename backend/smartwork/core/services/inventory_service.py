from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartwork.core.errors import NotFoundError, ValidationError
from smartwork.core.models.base import utcnow
from smartwork.core.models.inventory import FeatureInventoryItem
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartwork.api.v1.schemas.inventory import FeatureCreate, FeatureUpdate
    from smartwork.core.repositories.inventory_repository import InventoryRepository

logger = get_logger(__name__)


class InventoryService:
    """CRUD for feature inventory items scoped to the owning user."""

    def __init__(self, repo: InventoryRepository) -> None:
        self._repo = repo

    async def list_items(self, user_id: str) -> Sequence[FeatureInventoryItem]:
        return await self._repo.list(user_id=user_id)

    async def create_item(self, create_dto: FeatureCreate, user_id: str) -> FeatureInventoryItem:
        now = utcnow()
        item = FeatureInventoryItem(
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **create_dto.model_dump(exclude={"user_id"}),
        )
        stored = await self._repo.create(item)
        logger.info("Created inventory item %s for user %s", stored.id, user_id)
        return stored

    async def update_item(self, item_id: str, update_dto: FeatureUpdate, user_id: str) -> FeatureInventoryItem:
        await self._get_owned(item_id, user_id)
        changes: dict[str, Any] = update_dto.model_dump(exclude_unset=True, exclude={"user_id"})
        # Every inventory column is non-null; the owner never changes
        for key, value in changes.items():
            if value is None:
                raise ValidationError(f"{FeatureInventoryItem.model_fields[key].alias or key} cannot be null")
        if "name" in changes:
            changes["name"] = changes["name"].strip()
            if not changes["name"]:
                raise ValidationError("name must be non-empty")
        changes["updated_at"] = utcnow()
        updated = await self._repo.update_fields(item_id, changes)
        if updated is None:
            raise NotFoundError("Item not found or unauthorized")
        return updated

    async def delete_item(self, item_id: str, user_id: str) -> None:
        await self._get_owned(item_id, user_id)
        if not await self._repo.delete(item_id):
            raise NotFoundError("Item not found or unauthorized")
        logger.info("Deleted inventory item %s for user %s", item_id, user_id)

    async def _get_owned(self, item_id: str, user_id: str) -> FeatureInventoryItem:
        item = await self._repo.get(item_id)
        if item is None or item.user_id != user_id:
            raise NotFoundError("Item not found or unauthorized")
        return item
