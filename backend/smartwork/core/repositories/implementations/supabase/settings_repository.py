from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartwork.config import settings
from smartwork.core.models.base import utcnow
from smartwork.core.models.user_settings import UserSettings
from smartwork.core.repositories.implementations.supabase.base import SupabaseRepositoryMixin
from smartwork.core.repositories.settings_repository import SettingsRepository

if TYPE_CHECKING:
    from supabase import Client


class SupabaseSettingsRepository(SupabaseRepositoryMixin, SettingsRepository):
    """One row per user; `category_keywords` is a jsonb object."""

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self.TABLE_NAME = table_name or settings.settings_table

    async def get(self, user_id: str) -> UserSettings | None:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_settings(items[0])

    async def upsert(self, user_settings: UserSettings) -> UserSettings:
        row = self._model_to_row(user_settings)
        row["updated_at"] = utcnow().isoformat()
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .upsert(row, on_conflict="user_id")
            .execute()
        )
        return self._row_to_settings(self._first(resp.data) or row)

    @staticmethod
    def _row_to_settings(row: dict[str, Any]) -> UserSettings:
        return SupabaseRepositoryMixin._row_to_model(UserSettings, row)
