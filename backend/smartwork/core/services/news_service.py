from __future__ import annotations

import time
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from smartwork.config import settings
from smartwork.core.errors import UpstreamError
from smartwork.core.schemas.news import NewsFeed, NewsItem
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

LOCALE_QUERY = "hl=ko&gl=KR&ceid=KR:ko"

TOPIC_SECTIONS = {
    "TECH": "TECHNOLOGY",
    "BUSINESS": "BUSINESS",
    "ENTERTAINMENT": "ENTERTAINMENT",
}

# SPORTS is restricted to baseball and basketball.
SPORTS_QUERY = "야구 OR 농구"


def build_feed_url(category: str, base_url: str | None = None) -> str:
    """Map a category (or free search text) to a Google News RSS URL."""
    base = (base_url or settings.news_rss_base_url).rstrip("/")
    key = (category or "ALL").strip()
    if key.upper() == "ALL":
        return f"{base}?{LOCALE_QUERY}"
    if key.upper() == "SPORTS":
        return f"{base}/search?q={quote(SPORTS_QUERY)}&{LOCALE_QUERY}"
    if key.upper() in TOPIC_SECTIONS:
        return f"{base}/headlines/section/topic/{TOPIC_SECTIONS[key.upper()]}?{LOCALE_QUERY}"
    return f"{base}/search?q={quote(key)}&{LOCALE_QUERY}"


def parse_feed(xml_text: str, max_items: int) -> list[NewsItem]:
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as err:
        raise UpstreamError(f"Invalid RSS payload: {err}") from err

    items: list[NewsItem] = []
    for node in root.iter("item"):
        items.append(
            NewsItem(
                title=(node.findtext("title") or "No Title").strip(),
                link=(node.findtext("link") or "#").strip(),
                pub_date=(node.findtext("pubDate") or "").strip(),
            )
        )
        if len(items) >= max_items:
            break
    return items


class NewsService:
    """Fetches headline lists and caches them per category.

    The cache lives in process memory for `ttl_seconds`; it is the only
    shared state in the API and is safe to lose on restart.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        ttl_seconds: int | None = None,
        max_items: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._http_client = http_client
        self._ttl = settings.news_cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._max_items = max_items or settings.news_max_items
        self._clock = clock
        self._cache: dict[str, tuple[float, NewsFeed]] = {}

    async def get_feed(self, category: str = "ALL") -> NewsFeed:
        key = (category or "ALL").strip() or "ALL"
        cached = self._cache.get(key)
        now = self._clock()
        if cached and now - cached[0] < self._ttl:
            return cached[1]

        url = build_feed_url(key)
        try:
            xml_text = await self._fetch(url)
        except httpx.HTTPError as err:
            logger.error("News fetch failed for %s: %s", key, err)
            raise UpstreamError("Failed to fetch news") from err

        feed = NewsFeed(items=parse_feed(xml_text, self._max_items))
        self._cache[key] = (now, feed)
        return feed

    def clear(self) -> None:
        self._cache.clear()

    async def _fetch(self, url: str) -> str:
        if self._http_client is not None:
            resp = await self._http_client.get(url)
            resp.raise_for_status()
            return resp.text
        async with httpx.AsyncClient(timeout=settings.news_timeout_seconds, follow_redirects=True) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.text


news_service = NewsService()
