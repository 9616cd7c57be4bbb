from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from smartwork.core.errors import UnauthorizedError
from smartwork.core.repositories.implementations.supabase.inventory_repository import (
    SupabaseInventoryRepository,
)
from smartwork.core.repositories.implementations.supabase.note_repository import (
    SupabaseNoteRepository,
)
from smartwork.core.repositories.implementations.supabase.settings_repository import (
    SupabaseSettingsRepository,
)
from smartwork.core.schemas.auth import AuthUser
from smartwork.core.services.architecture_service import ArchitectureService
from smartwork.core.services.duplicate_guard import DuplicateGuard
from smartwork.core.services.inventory_service import InventoryService
from smartwork.core.services.news_service import NewsService, news_service
from smartwork.core.services.note_service import NoteService
from smartwork.core.services.settings_service import SettingsService
from smartwork.core.services.summary_service import SummaryService
from smartwork.db.base import create_request_supabase_client
from smartwork.utils.logging import get_logger

logger = get_logger(__name__)

# Use auto_error=False so a missing token maps to our own 401 payload
http_bearer = HTTPBearer(auto_error=False)

if TYPE_CHECKING:
    from supabase import Client

    from smartwork.core.repositories.inventory_repository import InventoryRepository
    from smartwork.core.repositories.note_repository import NoteRepository
    from smartwork.core.repositories.settings_repository import SettingsRepository


def _bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.lower().startswith("bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return None


def get_request_supabase_client(request: Request) -> Client:
    """Request-scoped Supabase client carrying the caller's JWT for RLS."""
    return create_request_supabase_client(_bearer_token(request))


def get_note_repository(client: Client = Depends(get_request_supabase_client)) -> NoteRepository:
    return SupabaseNoteRepository(client)


def get_settings_repository(client: Client = Depends(get_request_supabase_client)) -> SettingsRepository:
    return SupabaseSettingsRepository(client)


def get_inventory_repository(client: Client = Depends(get_request_supabase_client)) -> InventoryRepository:
    return SupabaseInventoryRepository(client)


def get_settings_service(repo: SettingsRepository = Depends(get_settings_repository)) -> SettingsService:
    return SettingsService(repo)


def get_note_service(
    repo: NoteRepository = Depends(get_note_repository),
    settings_service: SettingsService = Depends(get_settings_service),
) -> NoteService:
    """Request-scoped note service with its keyword settings source."""
    return NoteService(repo, settings_service)


def get_duplicate_guard(repo: NoteRepository = Depends(get_note_repository)) -> DuplicateGuard:
    return DuplicateGuard(repo)


def get_inventory_service(repo: InventoryRepository = Depends(get_inventory_repository)) -> InventoryService:
    return InventoryService(repo)


def get_summary_service() -> SummaryService:
    return SummaryService()


def get_architecture_service() -> ArchitectureService:
    return ArchitectureService()


def get_news_service() -> NewsService:
    return news_service


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(http_bearer),
) -> AuthUser:
    """Validate the bearer JWT with Supabase Auth and return the session user."""
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("Unauthorized")
    jwt = credentials.credentials
    if len(jwt.split(".")) != 3:
        raise UnauthorizedError("Invalid token format")

    supabase = create_request_supabase_client(jwt)
    try:
        resp = await asyncio.to_thread(lambda: supabase.auth.get_user(jwt))
    except Exception as err:
        logger.warning(
            "JWT validation failed",
            extra={"error_type": type(err).__name__, "jwt_length": len(jwt)},
        )
        raise UnauthorizedError("Token is invalid or expired") from err

    user = getattr(resp, "user", None)
    user_id = getattr(user, "id", None)
    if not user_id:
        raise UnauthorizedError("Invalid user data")
    return AuthUser(
        id=str(user_id),
        email=getattr(user, "email", None) or "",
        role=getattr(user, "role", None),
    )


def resolve_user_id(current_user: AuthUser, claimed_user_id: str | None) -> str:
    """Return the session user id, rejecting a client-supplied id for someone else."""
    if claimed_user_id and claimed_user_id != current_user.id:
        logger.warning(
            "Rejected request acting for another user",
            extra={"session_user": current_user.id},
        )
        raise UnauthorizedError("userId does not match the authenticated user")
    return current_user.id
