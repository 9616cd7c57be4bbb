from __future__ import annotations

from pydantic import Field

from smartwork.core.models.base import AppBaseModel


class DetectedSchedule(AppBaseModel):
    """Calendar event extracted from free text (local Korean time, ISO 8601)."""

    title: str = Field(description="Event title; '새로운 일정' when nothing better is available")
    start: str = Field(description="Start as YYYY-MM-DDTHH:mm:00")
    end: str = Field(description="End as YYYY-MM-DDTHH:mm:00")
    location: str | None = None


class SummaryResult(AppBaseModel):
    """Validated summary output; `schedule` is only filled for schedule requests."""

    summary: str
    schedule: DetectedSchedule | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "summary": "내일 10시 팀 회의 예정임",
                    "schedule": {
                        "title": "팀 회의",
                        "start": "2026-10-17T10:00:00",
                        "end": "2026-10-17T11:00:00",
                        "location": None,
                    },
                }
            ]
        }
    }
