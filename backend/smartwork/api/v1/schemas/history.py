from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from smartwork.core.models.base import AppBaseModel
from smartwork.core.models.note import (  # noqa: TCH001
    Comment,
    Note,
    NotePriority,
    NoteStatus,
    dedupe_labels,
)


class NoteCreate(AppBaseModel):
    user_id: str | None = Field(default=None, description="Legacy owner hint; must match the session user")
    category: str = Field(default="work", min_length=1, max_length=100)
    category_name: str | None = Field(default=None, max_length=100)
    content: str = Field(..., max_length=20000, description="Note body")
    summary: str | None = Field(default=None, max_length=5000)
    labels: list[str] = Field(default_factory=list)
    sub_tag: str | None = None
    status: NoteStatus = NoteStatus.PENDING
    priority: NotePriority = NotePriority.NORMAL
    attachment_urls: list[str] = Field(default_factory=list, alias="attachmentURLs")
    calendar_event_id: str | None = None
    auto_classify: bool = Field(default=True, description="Derive labels and subTag from the content")

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str]) -> list[str]:
        return dedupe_labels(v)

    @model_validator(mode="after")
    def validate_content(self) -> NoteCreate:
        content = self.content.strip()
        if not content:
            raise ValueError("content must be provided and non-empty")
        self.content = content
        if self.summary is not None and not self.summary.strip():
            self.summary = None
        return self


class NoteUpdate(AppBaseModel):
    category: str | None = Field(default=None, min_length=1, max_length=100)
    category_name: str | None = Field(default=None, max_length=100)
    content: str | None = Field(default=None, max_length=20000)
    summary: str | None = Field(default=None, max_length=5000)
    labels: list[str] | None = None
    sub_tag: str | None = None
    status: NoteStatus | None = None
    priority: NotePriority | None = None
    attachment_urls: list[str] | None = Field(default=None, alias="attachmentURLs")
    calendar_event_id: str | None = None

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return dedupe_labels(v)


class NoteCreatedResponse(Note):
    """Stored note plus the legacy `success` flag."""

    success: bool = True


class SuccessResponse(AppBaseModel):
    success: bool = True
    message: str | None = None


class DuplicateCheckRequest(AppBaseModel):
    content: str | None = None


class DuplicateCheckResponse(AppBaseModel):
    is_duplicate: bool
    duplicates: list[Note] = Field(default_factory=list)


class ClassifyRequest(AppBaseModel):
    category: str = Field(default="work", min_length=1, max_length=100)
    content: str = Field(..., max_length=20000)
    summary: str | None = None
    labels: list[str] = Field(default_factory=list)


class CommentCreate(AppBaseModel):
    content: str = Field(..., max_length=5000)
    user_id: str | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must be non-empty")
        return v.strip()


class CommentUpdate(AppBaseModel):
    comment_id: str = Field(..., min_length=1)
    content: str = Field(..., max_length=5000)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must be non-empty")
        return v.strip()


class CommentUpdated(AppBaseModel):
    success: bool = True
    comment_id: str
    content: str


class CommentDeleted(AppBaseModel):
    success: bool = True
    comment_id: str


__all__ = [
    "ClassifyRequest",
    "Comment",
    "CommentCreate",
    "CommentDeleted",
    "CommentUpdate",
    "CommentUpdated",
    "DuplicateCheckRequest",
    "DuplicateCheckResponse",
    "NoteCreate",
    "NoteCreatedResponse",
    "NoteUpdate",
    "SuccessResponse",
]
