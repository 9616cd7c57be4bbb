from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartwork.core.models.inventory import FeatureInventoryItem


class InventoryRepository(ABC):
    """Storage for feature inventory items."""

    @abstractmethod
    async def create(self, item: FeatureInventoryItem) -> FeatureInventoryItem:  # pragma: no cover - interface only
        ...

    @abstractmethod
    async def get(self, item_id: str) -> FeatureInventoryItem | None:  # pragma: no cover
        ...

    @abstractmethod
    async def list(self, *, user_id: str) -> Sequence[FeatureInventoryItem]:  # pragma: no cover
        """Return the user's items, newest first."""

    @abstractmethod
    async def update_fields(self, item_id: str, changes: dict[str, Any]) -> FeatureInventoryItem | None:  # pragma: no cover
        ...

    @abstractmethod
    async def delete(self, item_id: str) -> bool:  # pragma: no cover
        ...
