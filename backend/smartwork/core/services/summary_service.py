from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from smartwork.config import settings
from smartwork.core.errors import UpstreamError, ValidationError
from smartwork.core.schemas.summary import SummaryResult
from smartwork.utils.logging import get_logger
from smartwork.utils.openai_client import get_openai_client

if TYPE_CHECKING:
    from openai import AsyncOpenAI

logger = get_logger(__name__)

KST = ZoneInfo("Asia/Seoul")
WEEKDAYS_KO = ("월", "화", "수", "목", "금", "토", "일")


class SummaryType(str, Enum):
    GENERAL = "general"
    SCHEDULE = "schedule"


GENERAL_INSTRUCTIONS = (
    "다음 업무 관련 내용을 3줄 이내로 핵심만 요약해줘. "
    "필요한 조치 사항이 있다면 포함하고, 어투는 '~함', '~임'체로 한국어로 작성해줘."
)


def build_schedule_instructions(now: datetime) -> str:
    """Prompt for summary + event extraction, anchored to the current KST time."""
    local = now.astimezone(KST)
    today = local.date().isoformat()
    return (
        "Context:\n"
        f"- Current Date (KST): {today} ({WEEKDAYS_KO[local.weekday()]}요일)\n"
        f"- Current Time: {local.strftime('%H:%M:%S')}\n\n"
        "Task:\n"
        "1. Summarize the input into a concise summary in Korean.\n"
        "2. Extract schedule/event information for a calendar entry.\n"
        f"   - '오늘' is {today}; '내일' is the day after {today}.\n"
        "   - Convert mentioned times to ISO format YYYY-MM-DDTHH:mm:00 (24h).\n"
        "   - Use the remaining text as the title; if there is none, use '새로운 일정'.\n"
        "3. If no date or time is mentioned, set schedule to null."
    )


class SummaryService:
    """Generates AI summaries through the OpenAI Responses API.

    Failures surface as `UpstreamError`; callers that only want the summary
    as an optional hint (classification) must treat it as best effort.
    """

    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None) -> None:
        self._client = client
        self._model = model or settings.summary_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    async def summarize(
        self,
        text: str,
        summary_type: SummaryType = SummaryType.GENERAL,
        now: datetime | None = None,
    ) -> SummaryResult:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Text is required")

        logger.info("Requesting %s summary (%d chars)", summary_type.value, len(text))
        try:
            if summary_type == SummaryType.SCHEDULE:
                response = await self.client.responses.parse(
                    model=self._model,
                    input=[
                        {"role": "system", "content": build_schedule_instructions(now or datetime.now(KST))},
                        {"role": "user", "content": text},
                    ],
                    text_format=SummaryResult,
                    max_output_tokens=settings.summary_max_output_tokens,
                )
                result = response.output_parsed
                if result is None:
                    # Model answered without structured output; keep its text as the summary
                    return SummaryResult(summary=(response.output_text or "").strip(), schedule=None)
                return result

            response = await self.client.responses.create(
                model=self._model,
                instructions=GENERAL_INSTRUCTIONS,
                input=text,
                max_output_tokens=settings.summary_max_output_tokens,
            )
        except Exception as err:
            logger.error("Summary request failed: %s", err)
            raise UpstreamError(str(err) or "AI summary failed") from err

        return SummaryResult(summary=(response.output_text or "").strip())
