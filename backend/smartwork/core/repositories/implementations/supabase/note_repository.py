from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartwork.config import settings
from smartwork.core.models.note import Note
from smartwork.core.repositories.implementations.supabase.base import SupabaseRepositoryMixin
from smartwork.core.repositories.note_repository import NoteRepository
from smartwork.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from supabase import Client

    from smartwork.core.schemas.note_filters import NoteFilters


class SupabaseNoteRepository(SupabaseRepositoryMixin, NoteRepository):
    """Supabase implementation of the NoteRepository.

    Assumes a table (``history`` by default) whose columns match the `Note`
    field names; `labels`, `attachment_urls` and `comments` are json/array
    columns. Comments are embedded in the note record.
    """

    IMMUTABLE_FIELDS = frozenset({"id", "user_id", "created_at"})

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self.TABLE_NAME = table_name or settings.notes_table

    async def create(self, note: Note) -> Note:
        row = self._model_to_row(note)
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .insert(row)
            .execute()
        )
        return self._row_to_note(self._first(resp.data) or row)

    async def get(self, note_id: str) -> Note | None:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("id", note_id)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def list(self, *, user_id: str, filters: NoteFilters | None = None) -> Sequence[Note]:
        def _query():
            q = self._client.table(self.TABLE_NAME).select("*").eq("user_id", user_id)
            if filters is not None:
                if filters.status is not None:
                    q = q.eq("status", filters.status.value)
                if filters.category:
                    q = q.eq("category", filters.category)
                if filters.label:
                    q = q.contains("labels", [filters.label])
                if filters.sub_tag:
                    q = q.eq("sub_tag", filters.sub_tag)
            q = q.order("created_at", desc=True)
            if filters is not None and filters.limit:
                q = q.limit(filters.limit)
            return q.execute()

        resp = await self._run(_query)
        return [self._row_to_note(i) for i in resp.data or []]

    async def list_recent(self, *, user_id: str, limit: int) -> Sequence[Note]:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._row_to_note(i) for i in resp.data or []]

    async def update_fields(self, note_id: str, changes: dict[str, Any]) -> Note | None:
        sanitized = self._sanitize_changes(changes)
        if not sanitized:
            return await self.get(note_id)

        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .update(sanitized)
            .eq("id", note_id)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def delete(self, note_id: str) -> bool:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .delete()
            .eq("id", note_id)
            .execute()
        )
        return len(resp.data or []) > 0

    @staticmethod
    def _row_to_note(row: dict[str, Any]) -> Note:
        return SupabaseRepositoryMixin._row_to_model(Note, row)
