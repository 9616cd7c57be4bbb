from __future__ import annotations

from typing import TYPE_CHECKING

from smartwork.core.errors import ValidationError
from smartwork.core.models.user_settings import UserSettings
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from smartwork.core.repositories.settings_repository import SettingsRepository

logger = get_logger(__name__)


class SettingsService:
    """Reads and replaces per-category keyword lists for a user."""

    def __init__(self, repo: SettingsRepository) -> None:
        self._repo = repo

    async def get_settings(self, user_id: str) -> UserSettings:
        """Return the user's settings, or an empty snapshot if none were saved."""
        stored = await self._repo.get(user_id)
        if stored is None:
            return UserSettings(user_id=user_id)
        return stored

    async def replace_category_keywords(
        self,
        user_id: str,
        category_keywords: dict[str, list[str]] | None,
    ) -> UserSettings:
        """Fully replace the keyword list of every category present in the payload.

        Categories absent from the payload keep their current keywords.
        """
        if category_keywords is None:
            raise ValidationError("subMenus is required")
        current = await self.get_settings(user_id)
        updated = current.replace_categories(category_keywords)
        saved = await self._repo.upsert(updated)
        logger.info(
            "Updated keyword settings for user %s (%d categories)",
            user_id, len(category_keywords),
        )
        return saved
