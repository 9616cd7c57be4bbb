from __future__ import annotations

from pydantic import Field

from smartwork.core.models.base import AppBaseModel
from smartwork.core.services.summary_service import SummaryType  # noqa: TCH001


class SummaryRequest(AppBaseModel):
    text: str = Field(..., max_length=20000)
    type: SummaryType = SummaryType.GENERAL
