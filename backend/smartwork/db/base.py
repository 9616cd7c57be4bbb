from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from smartwork.config import settings
from smartwork.utils.logging import get_logger

logger = get_logger(__name__)


def _options() -> ClientOptions:
    # The API never keeps a Supabase session of its own; the caller's JWT is attached per request.
    return ClientOptions(auto_refresh_token=False, persist_session=False)


@lru_cache(maxsize=1)
def get_supabase_admin_client() -> Client:
    """Service-role client; bypasses row-level security, so only the readiness probe uses it."""
    if not settings.supabase_service_role_key:
        raise RuntimeError("supabase_service_role_key is required for admin client")
    logger.debug("Initializing Supabase admin client")
    return create_client(settings.supabase_url, settings.supabase_service_role_key, options=_options())


def create_request_supabase_client(bearer_token: str | None = None) -> Client:
    """Anon-key client for one request.

    With a user JWT the PostgREST bearer is set, so row-level security
    scopes every history, user_settings and features query to that user.
    """
    if not settings.supabase_anon_key:
        raise RuntimeError("supabase_anon_key is required for request client")
    client = create_client(settings.supabase_url, settings.supabase_anon_key, options=_options())
    if bearer_token:
        client.postgrest.auth(bearer_token)
    return client
