from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartwork.core.errors import NotFoundError, ValidationError
from smartwork.core.models.base import utcnow
from smartwork.core.models.note import Comment, Note, NoteStatus, category_display_name
from smartwork.core.services.classifier import classify
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartwork.api.v1.schemas.history import NoteCreate, NoteUpdate
    from smartwork.core.repositories.note_repository import NoteRepository
    from smartwork.core.schemas.note_filters import NoteFilters
    from smartwork.core.services.settings_service import SettingsService

logger = get_logger(__name__)


class NoteService:
    """Service for managing a user's notes and their comments.

    Notes owned by another user are reported as missing.
    """

    UPDATABLE_FIELDS = frozenset({
        "category",
        "category_name",
        "content",
        "summary",
        "labels",
        "sub_tag",
        "status",
        "priority",
        "attachment_urls",
        "calendar_event_id",
    })

    NULLABLE_FIELDS = frozenset({"category_name", "summary", "sub_tag", "calendar_event_id"})

    def __init__(self, repo: NoteRepository, settings_service: SettingsService) -> None:
        self._repo = repo
        self._settings = settings_service

    async def create_note(self, create_dto: NoteCreate, user_id: str) -> Note:
        """Classify and store a new note for `user_id`."""
        content = (create_dto.content or "").strip()
        if not content:
            raise ValidationError("content must be provided and non-empty")

        labels = list(create_dto.labels)
        sub_tag = None
        if create_dto.auto_classify:
            snapshot = await self._settings.get_settings(user_id)
            result = classify(
                content,
                create_dto.category,
                snapshot.category_keywords,
                existing_labels=labels,
                summary=create_dto.summary,
            )
            labels = result.labels
            sub_tag = result.sub_tag
        elif create_dto.sub_tag:
            sub_tag = await self._checked_sub_tag(user_id, create_dto.category, create_dto.sub_tag)

        now = utcnow()
        note = Note(
            user_id=user_id,
            category=create_dto.category,
            category_name=create_dto.category_name or category_display_name(create_dto.category),
            content=content,
            summary=create_dto.summary,
            labels=labels,
            sub_tag=sub_tag,
            status=create_dto.status,
            priority=create_dto.priority,
            attachment_urls=list(create_dto.attachment_urls),
            calendar_event_id=create_dto.calendar_event_id,
            created_at=now,
            updated_at=now,
            completed_at=now if create_dto.status == NoteStatus.COMPLETED else None,
        )
        stored = await self._repo.create(note)
        logger.info("Created note %s for user %s in %s", stored.id, user_id, stored.category)
        return stored

    async def get_note(self, note_id: str, user_id: str) -> Note:
        note = await self._repo.get(note_id)
        if note is None or note.user_id != user_id:
            raise NotFoundError("Item not found")
        return note

    async def list_notes(self, user_id: str, filters: NoteFilters | None = None) -> Sequence[Note]:
        """List the user's notes, newest first."""
        return await self._repo.list(user_id=user_id, filters=filters)

    async def update_note(self, note_id: str, update_dto: NoteUpdate, user_id: str) -> Note:
        """Apply a partial update; content may change but never become empty.

        Moving to `completed` stamps `completed_at`; leaving it clears the stamp.
        """
        existing = await self.get_note(note_id, user_id)

        changes: dict[str, Any] = {}
        for key, value in update_dto.model_dump(exclude_unset=True).items():
            if key not in self.UPDATABLE_FIELDS:
                continue
            if value is None and key not in self.NULLABLE_FIELDS:
                raise ValidationError(f"{_wire_name(key)} cannot be null")
            if isinstance(value, str):
                value = value.strip()
            changes[key] = value

        if "content" in changes and not changes["content"]:
            raise ValidationError("content must be non-empty")
        if "category" in changes and not changes["category"]:
            raise ValidationError("category must be non-empty")
        if changes.get("sub_tag"):
            category = changes.get("category", existing.category)
            changes["sub_tag"] = await self._checked_sub_tag(user_id, category, changes["sub_tag"])
        elif "sub_tag" in changes:
            changes["sub_tag"] = None

        status = changes.get("status")
        if status is not None and status != existing.status:
            changes["completed_at"] = utcnow() if status == NoteStatus.COMPLETED else None

        changes["updated_at"] = utcnow()
        updated = await self._repo.update_fields(note_id, changes)
        if updated is None:
            raise NotFoundError("Item not found")
        return updated

    async def delete_note(self, note_id: str, user_id: str) -> None:
        await self.get_note(note_id, user_id)
        if not await self._repo.delete(note_id):
            raise NotFoundError("Item not found")
        logger.info("Deleted note %s for user %s", note_id, user_id)

    async def add_comment(self, note_id: str, user_id: str, content: str) -> Comment:
        note = await self._get_for_comments(note_id, user_id)
        comment = Comment(content=content, user_id=user_id)
        await self._save_comments(note_id, [*note.comments, comment])
        return comment

    async def update_comment(self, note_id: str, user_id: str, comment_id: str, content: str) -> Comment:
        note = await self._get_for_comments(note_id, user_id)
        comments = list(note.comments)
        for index, comment in enumerate(comments):
            if comment.id == comment_id:
                edited = comment.model_copy(update={"content": content, "updated_at": utcnow()})
                comments[index] = edited
                await self._save_comments(note_id, comments)
                return edited
        raise NotFoundError("Comment not found")

    async def delete_comment(self, note_id: str, user_id: str, comment_id: str) -> None:
        note = await self._get_for_comments(note_id, user_id)
        remaining = [c for c in note.comments if c.id != comment_id]
        if len(remaining) == len(note.comments):
            raise NotFoundError("Comment not found")
        await self._save_comments(note_id, remaining)

    async def _get_for_comments(self, note_id: str, user_id: str) -> Note:
        try:
            return await self.get_note(note_id, user_id)
        except NotFoundError:
            raise NotFoundError("History item not found") from None

    async def _save_comments(self, note_id: str, comments: list[Comment]) -> None:
        updated = await self._repo.update_fields(note_id, {"comments": comments})
        if updated is None:
            raise NotFoundError("History item not found")

    async def _checked_sub_tag(self, user_id: str, category: str, sub_tag: str) -> str:
        """A client-chosen subTag must be one of the category's configured keywords."""
        sub_tag = sub_tag.strip()
        snapshot = await self._settings.get_settings(user_id)
        if sub_tag not in snapshot.keywords_for(category):
            raise ValidationError(f"subTag '{sub_tag}' is not a configured keyword of {category}")
        return sub_tag


def _wire_name(field_name: str) -> str:
    field = Note.model_fields.get(field_name)
    return (field.alias if field is not None else None) or field_name
