from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator

from .base import AppBaseModel, TimestampedModel
from .note import new_id


class FeatureStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    MAINTENANCE = "maintenance"
    DEPRECATED = "deprecated"


class FeatureType(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    EXTERNAL = "external"
    SPREADSHEET = "spreadsheet"
    OTHER = "other"


class FeaturePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class KeyFunction(AppBaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = ""


class FeatureInventoryItem(TimestampedModel):
    """Description of a feature in one of the user's external projects.

    `type` groups features in the architecture diagram; `progress` is a
    percentage the client keeps at 100 for completed features.
    """

    id: str = Field(default_factory=new_id)
    user_id: str
    name: str = Field(min_length=1, max_length=200)
    file_name: str = ""
    description: str = ""
    status: FeatureStatus = FeatureStatus.IN_PROGRESS
    type: FeatureType = FeatureType.OTHER
    priority: FeaturePriority = FeaturePriority.MEDIUM
    progress: int = Field(default=0, ge=0, le=100)
    sheet_names: list[str] = Field(default_factory=list)
    key_functions: list[KeyFunction] = Field(default_factory=list)
    trigger_info: str = ""
    tech_stack: list[str] = Field(default_factory=list)
    related_document_ids: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("name must be non-empty")
        return stripped
