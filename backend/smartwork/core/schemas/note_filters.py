from __future__ import annotations

from pydantic import Field

from smartwork.core.models.base import AppBaseModel
from smartwork.core.models.note import NoteStatus  # noqa: TCH001


class NoteFilters(AppBaseModel):
    """Optional equality filters for listing a user's notes."""

    status: NoteStatus | None = None
    category: str | None = None
    label: str | None = None
    sub_tag: str | None = None
    limit: int | None = Field(default=None, ge=1, le=1000)
