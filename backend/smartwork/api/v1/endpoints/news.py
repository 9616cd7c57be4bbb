from __future__ import annotations

from fastapi import APIRouter, Depends

from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.schemas.news import NewsFeed
from smartwork.core.services.news_service import NewsService  # noqa: TCH001
from smartwork.dependencies import get_current_user, get_news_service

router = APIRouter()


@router.get("", response_model=NewsFeed)
async def get_news(
    category: str = "ALL",
    current_user: AuthUser = Depends(get_current_user),
    service: NewsService = Depends(get_news_service),
):
    """Latest headlines for ALL, TECH, BUSINESS, ENTERTAINMENT, SPORTS or a search term."""
    return await service.get_feed(category)
