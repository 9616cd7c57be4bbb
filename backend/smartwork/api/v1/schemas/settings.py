from __future__ import annotations

from pydantic import Field

from smartwork.core.models.base import AppBaseModel


class SettingsUpdate(AppBaseModel):
    """Keyword lists keyed by category id; each listed category is replaced."""

    sub_menus: dict[str, list[str]] | None = Field(default=None, description="category id -> ordered keywords")
