from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartwork.core.models.note import Note
    from smartwork.core.schemas.note_filters import NoteFilters


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Implementations
    perform I/O against the document store and therefore expose async
    methods. Listing methods return plain, finite query results ordered by
    creation time, newest first.
    """

    @abstractmethod
    async def create(self, note: Note) -> Note:  # pragma: no cover - interface only
        """Persist a new note and return the stored entity."""

    @abstractmethod
    async def get(self, note_id: str) -> Note | None:  # pragma: no cover
        """Fetch a note by id or return None if not found."""

    @abstractmethod
    async def list(self, *, user_id: str, filters: NoteFilters | None = None) -> Sequence[Note]:  # pragma: no cover
        """Return the user's notes matching `filters`, newest first."""

    @abstractmethod
    async def list_recent(self, *, user_id: str, limit: int) -> Sequence[Note]:  # pragma: no cover
        """Return at most `limit` of the user's most recently created notes."""

    @abstractmethod
    async def update_fields(self, note_id: str, changes: dict[str, Any]) -> Note | None:  # pragma: no cover
        """Partially update a note and return it, or None if missing."""

    @abstractmethod
    async def delete(self, note_id: str) -> bool:  # pragma: no cover
        """Delete a note by id. Return True if a record was removed."""
