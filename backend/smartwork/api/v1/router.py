from __future__ import annotations

from fastapi import APIRouter

from .endpoints import ai, architecture, health, history, inventory, news, settings

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
api_router.include_router(architecture.router, prefix="/architecture", tags=["inventory"])
api_router.include_router(ai.router, prefix="/ai", tags=["ai"])
api_router.include_router(news.router, prefix="/news", tags=["news"])
