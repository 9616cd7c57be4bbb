from __future__ import annotations

from smartwork.core.models.base import AppBaseModel


class NewsItem(AppBaseModel):
    title: str
    link: str
    pub_date: str = ""
    source: str = "Google News"


class NewsFeed(AppBaseModel):
    """Headline list for one category. `summary` is kept empty for now."""

    items: list[NewsItem]
    summary: str = ""
