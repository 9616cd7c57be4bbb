from __future__ import annotations

from typing import TYPE_CHECKING

from smartwork.utils.logging import get_logger
from smartwork.utils.text import normalize_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from smartwork.core.models.note import Note
    from smartwork.core.repositories.note_repository import NoteRepository

logger = get_logger(__name__)

# Only the most recent notes are compared; older entries are never flagged.
RECENT_WINDOW = 50

# A substring match needs the contained text to be longer than this.
CONTAINMENT_MIN_LENGTH = 20


def is_near_duplicate(normalized_new: str, normalized_old: str) -> bool:
    """Compare two already-normalized texts.

    Containment only counts when the contained text is longer than
    `CONTAINMENT_MIN_LENGTH`, so short fragments never match.
    """
    if normalized_new == normalized_old:
        return True
    if len(normalized_new) > CONTAINMENT_MIN_LENGTH and normalized_new in normalized_old:
        return True
    if len(normalized_old) > CONTAINMENT_MIN_LENGTH and normalized_old in normalized_new:
        return True
    return False


def find_duplicates(content: str | None, recent_notes: Iterable[Note]) -> list[Note]:
    """Return every note in `recent_notes` that nearly duplicates `content`.

    Order of `recent_notes` is preserved, so callers passing a newest-first
    window get the most recent match first. Blank candidates never match.
    """
    normalized_new = normalize_text(content)
    if not normalized_new:
        return []
    return [
        note for note in recent_notes
        if is_near_duplicate(normalized_new, normalize_text(note.content))
    ]


class DuplicateGuard:
    """Read-only check run before a note is saved."""

    def __init__(self, repo: NoteRepository, window: int = RECENT_WINDOW) -> None:
        self._repo = repo
        self._window = window

    async def check(self, *, user_id: str, content: str | None) -> list[Note]:
        if not normalize_text(content):
            return []
        recent = await self._repo.list_recent(user_id=user_id, limit=self._window)
        duplicates = find_duplicates(content, recent)
        logger.debug(
            "Duplicate check for user %s: %d of %d recent notes matched",
            user_id, len(duplicates), len(recent),
        )
        return duplicates
