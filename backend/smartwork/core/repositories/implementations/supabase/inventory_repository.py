from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartwork.config import settings
from smartwork.core.models.inventory import FeatureInventoryItem
from smartwork.core.repositories.implementations.supabase.base import SupabaseRepositoryMixin
from smartwork.core.repositories.inventory_repository import InventoryRepository

if TYPE_CHECKING:
    from collections.abc import Sequence

    from supabase import Client


class SupabaseInventoryRepository(SupabaseRepositoryMixin, InventoryRepository):
    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self.TABLE_NAME = table_name or settings.inventory_table

    async def create(self, item: FeatureInventoryItem) -> FeatureInventoryItem:
        row = self._model_to_row(item)
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME).insert(row).execute()
        )
        return self._row_to_item(self._first(resp.data) or row)

    async def get(self, item_id: str) -> FeatureInventoryItem | None:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        return self._row_to_item(items[0]) if items else None

    async def list(self, *, user_id: str) -> Sequence[FeatureInventoryItem]:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._row_to_item(i) for i in resp.data or []]

    async def update_fields(self, item_id: str, changes: dict[str, Any]) -> FeatureInventoryItem | None:
        sanitized = self._sanitize_changes(changes)
        if not sanitized:
            return await self.get(item_id)
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .update(sanitized)
            .eq("id", item_id)
            .execute()
        )
        items = resp.data or []
        return self._row_to_item(items[0]) if items else None

    async def delete(self, item_id: str) -> bool:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME).delete().eq("id", item_id).execute()
        )
        return len(resp.data or []) > 0

    @staticmethod
    def _row_to_item(row: dict[str, Any]) -> FeatureInventoryItem:
        return SupabaseRepositoryMixin._row_to_model(FeatureInventoryItem, row)
