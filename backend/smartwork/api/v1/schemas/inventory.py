from __future__ import annotations

from typing import Any

from pydantic import Field

from smartwork.core.models.base import AppBaseModel
from smartwork.core.models.inventory import (  # noqa: TCH001
    FeaturePriority,
    FeatureStatus,
    FeatureType,
    KeyFunction,
)


class FeatureCreate(AppBaseModel):
    user_id: str | None = Field(default=None, description="Legacy owner hint; must match the session user")
    name: str = Field(..., min_length=1, max_length=200)
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


class FeatureUpdate(AppBaseModel):
    user_id: str | None = None
    name: str | None = Field(default=None, max_length=200)
    file_name: str | None = None
    description: str | None = None
    status: FeatureStatus | None = None
    type: FeatureType | None = None
    priority: FeaturePriority | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    sheet_names: list[str] | None = None
    key_functions: list[KeyFunction] | None = None
    trigger_info: str | None = None
    tech_stack: list[str] | None = None
    related_document_ids: list[str] | None = None


class FeatureCreatedResponse(AppBaseModel):
    success: bool = True
    id: str


class ArchitectureRequest(AppBaseModel):
    """Features to diagram; the caller's stored inventory is used when omitted."""

    features: list[dict[str, Any]] | None = None


class ArchitectureResponse(AppBaseModel):
    mermaid_code: str
