"""
Tests for the AI summary and news services and their endpoints.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from urllib.parse import unquote

import httpx
import pytest

from smartwork.core.errors import UpstreamError, ValidationError
from smartwork.core.schemas.news import NewsFeed
from smartwork.core.schemas.summary import DetectedSchedule, SummaryResult
from smartwork.core.services.news_service import NewsService, build_feed_url, parse_feed
from smartwork.core.services.summary_service import (
    SummaryService,
    SummaryType,
    build_schedule_instructions,
)
from smartwork.dependencies import get_news_service, get_summary_service
from smartwork.main import app

RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel>
  <title>Google News</title>
  <item><title>First headline</title><link>https://news.example/1</link><pubDate>Fri, 16 Oct 2026 01:00:00 GMT</pubDate></item>
  <item><title>Second headline</title><link>https://news.example/2</link></item>
  <item><link>https://news.example/3</link></item>
</channel></rss>
"""


def _openai_client(*, create=None, parse=None):
    client = Mock()
    client.responses.create = create or AsyncMock()
    client.responses.parse = parse or AsyncMock()
    return client


class TestSummaryService:
    async def test_general_summary(self):
        create = AsyncMock(return_value=Mock(output_text="  배포 일정 확정함  "))
        service = SummaryService(client=_openai_client(create=create), model="test-model")

        result = await service.summarize("배포 일정 회의 결과 공유", SummaryType.GENERAL)

        assert result == SummaryResult(summary="배포 일정 확정함")
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["input"] == "배포 일정 회의 결과 공유"

    async def test_schedule_summary_returns_parsed_event(self):
        parsed = SummaryResult(
            summary="내일 10시 팀 회의",
            schedule=DetectedSchedule(title="팀 회의", start="2026-10-17T10:00:00", end="2026-10-17T11:00:00"),
        )
        parse = AsyncMock(return_value=Mock(output_parsed=parsed, output_text=""))
        service = SummaryService(client=_openai_client(parse=parse))

        result = await service.summarize("내일 10시 팀 회의", SummaryType.SCHEDULE)

        assert result.schedule.title == "팀 회의"
        assert parse.await_args.kwargs["text_format"] is SummaryResult

    async def test_schedule_summary_without_structured_output(self):
        parse = AsyncMock(return_value=Mock(output_parsed=None, output_text="일정 없음"))
        service = SummaryService(client=_openai_client(parse=parse))

        result = await service.summarize("그냥 메모", SummaryType.SCHEDULE)

        assert result == SummaryResult(summary="일정 없음", schedule=None)

    async def test_empty_text_is_rejected_without_calling_the_model(self):
        create = AsyncMock()
        service = SummaryService(client=_openai_client(create=create))

        with pytest.raises(ValidationError):
            await service.summarize("   ")
        create.assert_not_awaited()

    async def test_model_failure_becomes_upstream_error(self):
        create = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        service = SummaryService(client=_openai_client(create=create))

        with pytest.raises(UpstreamError, match="quota exceeded"):
            await service.summarize("text")

    def test_schedule_instructions_anchor_to_korean_time(self):
        # 20:00 UTC on Friday is already Saturday morning in Seoul
        instructions = build_schedule_instructions(datetime(2026, 10, 16, 20, 0, tzinfo=timezone.utc))

        assert "Current Date (KST): 2026-10-17 (토요일)" in instructions
        assert "Current Time: 05:00:00" in instructions


class TestSummaryEndpoint:
    def test_summary_endpoint(self, client):
        create = AsyncMock(return_value=Mock(output_text="요약임"))
        app.dependency_overrides[get_summary_service] = lambda: SummaryService(client=_openai_client(create=create))

        response = client.post("/api/ai/summary", json={"text": "긴 회의 내용", "type": "general"})

        assert response.status_code == 200
        assert response.json() == {"summary": "요약임"}

    def test_summary_failure_does_not_affect_note_creation(self, client):
        create = AsyncMock(side_effect=RuntimeError("model unavailable"))
        app.dependency_overrides[get_summary_service] = lambda: SummaryService(client=_openai_client(create=create))

        failed = client.post("/api/ai/summary", json={"text": "긴 회의 내용"})
        assert failed.status_code == 500
        assert failed.json() == {"success": False, "error": "model unavailable"}

        created = client.post("/api/history", json={"content": "긴 회의 내용"})
        assert created.status_code == 201

    def test_summary_requires_text(self, client):
        assert client.post("/api/ai/summary", json={"text": ""}).status_code == 400
        assert client.post("/api/ai/summary", json={}).status_code == 400


class TestNews:
    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("ALL", "https://news.google.com/rss?hl=ko&gl=KR&ceid=KR:ko"),
            ("TECH", "https://news.google.com/rss/headlines/section/topic/TECHNOLOGY?hl=ko&gl=KR&ceid=KR:ko"),
            ("business", "https://news.google.com/rss/headlines/section/topic/BUSINESS?hl=ko&gl=KR&ceid=KR:ko"),
        ],
    )
    def test_build_feed_url_sections(self, category, expected):
        assert build_feed_url(category, base_url="https://news.google.com/rss") == expected

    def test_build_feed_url_search(self):
        sports = build_feed_url("SPORTS", base_url="https://news.google.com/rss")
        assert "/search?q=" in sports
        assert "야구 OR 농구" in unquote(sports)

        custom = build_feed_url("반도체", base_url="https://news.google.com/rss")
        assert unquote(custom).startswith("https://news.google.com/rss/search?q=반도체&")

    def test_parse_feed_applies_defaults_and_limit(self):
        items = parse_feed(RSS, max_items=5)
        assert [i.title for i in items] == ["First headline", "Second headline", "No Title"]
        assert items[0].pub_date == "Fri, 16 Oct 2026 01:00:00 GMT"
        assert items[1].pub_date == ""

        assert len(parse_feed(RSS, max_items=2)) == 2

    def test_parse_feed_rejects_garbage(self):
        with pytest.raises(UpstreamError):
            parse_feed("<rss><channel>", max_items=5)

    async def test_feed_is_cached_per_category_until_ttl(self):
        calls = []
        now = [1000.0]

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(200, text=RSS, request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            service = NewsService(http_client=http_client, ttl_seconds=60, max_items=5, clock=lambda: now[0])

            first = await service.get_feed("TECH")
            again = await service.get_feed("TECH")
            assert again is first
            assert len(calls) == 1

            await service.get_feed("ALL")
            assert len(calls) == 2

            now[0] += 61
            await service.get_feed("TECH")
            assert len(calls) == 3

    async def test_fetch_failure_becomes_upstream_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            service = NewsService(http_client=http_client)
            with pytest.raises(UpstreamError, match="Failed to fetch news"):
                await service.get_feed("ALL")

    def test_news_endpoint(self, client):
        feed_service = Mock()
        feed_service.get_feed = AsyncMock(return_value=NewsFeed(items=parse_feed(RSS, max_items=1)))
        app.dependency_overrides[get_news_service] = lambda: feed_service

        response = client.get("/api/news", params={"category": "TECH"})

        assert response.status_code == 200
        assert response.json()["items"][0]["title"] == "First headline"
        assert response.json()["items"][0]["pubDate"] == "Fri, 16 Oct 2026 01:00:00 GMT"
        feed_service.get_feed.assert_awaited_once_with("TECH")
