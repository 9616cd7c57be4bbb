from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from enum import Enum
from uuid import uuid4

from pydantic import Field, field_validator

from .base import TimestampedModel


def new_id() -> str:
    return uuid4().hex


class NoteStatus(str, Enum):
    """Workflow state of a note."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class NotePriority(str, Enum):
    NORMAL = "normal"
    HIGH = "high"


class Label(str, Enum):
    """Built-in label vocabulary. Keyword labels are plain strings."""

    ISSUE = "issue"
    IDEA = "idea"
    UPDATE = "update"
    GENERAL = "general"


# Default categories offered to new users; users may add their own ids.
DEFAULT_CATEGORIES: dict[str, str] = {
    "work": "업무 일지",
    "dev": "개발 노트",
    "meeting": "회의/일정",
    "issue": "이슈/버그",
    "idea": "아이디어",
}


def category_display_name(category: str) -> str:
    return DEFAULT_CATEGORIES.get(category, category)


def dedupe_labels(values: list[str] | None) -> list[str]:
    labels: list[str] = []
    for value in values or []:
        if not isinstance(value, str):
            continue
        label = value.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


class Comment(TimestampedModel):
    """Comment attached to a note."""

    id: str = Field(default_factory=new_id)
    content: str = Field(min_length=1, max_length=5000)
    user_id: str


class Note(TimestampedModel):
    """Work-log entry ("history item") owned by a single user."""

    id: str = Field(default_factory=new_id, description="Unique note identifier")
    user_id: str = Field(description="Owner of the note")

    category: str = Field(default="work", min_length=1, max_length=100)
    category_name: str | None = None

    content: str = Field(min_length=1, max_length=20000)
    summary: str | None = None

    labels: list[str] = Field(default_factory=list)
    sub_tag: str | None = None

    status: NoteStatus = NoteStatus.PENDING
    priority: NotePriority = NotePriority.NORMAL

    comments: list[Comment] = Field(default_factory=list)
    attachment_urls: list[str] = Field(default_factory=list, alias="attachmentURLs")
    calendar_event_id: str | None = None

    completed_at: datetime | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("content must be non-empty")
        return stripped

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str]) -> list[str]:
        return dedupe_labels(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": uuid4().hex,
                    "userId": "user-123",
                    "category": "dev",
                    "content": "에러 발생: React 컴포넌트에서 API 호출 실패",
                    "labels": ["issue", "React", "API"],
                    "subTag": "React",
                    "status": "pending",
                    "priority": "normal",
                }
            ]
        }
    }
