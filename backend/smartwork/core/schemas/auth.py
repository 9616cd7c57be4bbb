from __future__ import annotations

from smartwork.core.models.base import AppBaseModel


class AuthUser(AppBaseModel):
    """Session user resolved from the bearer token."""

    id: str
    email: str = ""
    role: str | None = None
