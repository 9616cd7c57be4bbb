from __future__ import annotations

from pydantic import Field, field_validator

from smartwork.utils.text import unique_keywords

from .base import TimestampedModel


class UserSettings(TimestampedModel):
    """Per-user keyword configuration, keyed by category id.

    Keyword order matters: the first configured keyword found in a note
    becomes its subTag.
    """

    user_id: str
    category_keywords: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("category_keywords")
    @classmethod
    def normalize_keywords(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {
            category.strip(): unique_keywords(keywords)
            for category, keywords in (v or {}).items()
            if category and category.strip()
        }

    def keywords_for(self, category: str) -> list[str]:
        return list(self.category_keywords.get(category, []))

    def replace_categories(self, updates: dict[str, list[str]]) -> UserSettings:
        """Return a copy where each category in `updates` is fully replaced."""
        merged = dict(self.category_keywords)
        merged.update(updates)
        return UserSettings(
            user_id=self.user_id,
            category_keywords=merged,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
