from __future__ import annotations

import asyncio

from fastapi import APIRouter

from smartwork import __version__
from smartwork.config import settings
from smartwork.db.base import create_request_supabase_client, get_supabase_admin_client
from smartwork.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def health_check():
    """Liveness probe."""
    return {"status": "healthy", "service": "smartwork-api", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """Report reachability of each backing table; always 200 so callers can read the details."""
    if settings.supabase_service_role_key:
        client = get_supabase_admin_client()
    else:
        client = create_request_supabase_client()

    tables = {}
    for table in (settings.notes_table, settings.settings_table, settings.inventory_table):
        try:
            await asyncio.to_thread(lambda: client.table(table).select("*").limit(1).execute())
            tables[table] = "connected"
        except Exception as e:
            logger.warning("Readiness check could not read %s: %s", table, e)
            tables[table] = f"error: {e}"

    return {
        "status": "ready" if all(v == "connected" for v in tables.values()) else "degraded",
        "tables": tables,
        "ai_service": "configured" if settings.openai_api_key else "environment",
        "api_prefix": settings.api_prefix,
    }
