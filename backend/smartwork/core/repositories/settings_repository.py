from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartwork.core.models.user_settings import UserSettings


class SettingsRepository(ABC):
    """Storage for per-user keyword configuration."""

    @abstractmethod
    async def get(self, user_id: str) -> UserSettings | None:  # pragma: no cover - interface only
        """Return the stored settings or None when the user never saved any."""

    @abstractmethod
    async def upsert(self, user_settings: UserSettings) -> UserSettings:  # pragma: no cover
        """Insert or fully overwrite the user's settings record."""
