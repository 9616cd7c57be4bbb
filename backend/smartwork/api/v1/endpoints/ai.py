from __future__ import annotations

from fastapi import APIRouter, Depends

from smartwork.api.v1.schemas.ai import SummaryRequest
from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.schemas.summary import SummaryResult
from smartwork.core.services.summary_service import SummaryService  # noqa: TCH001
from smartwork.dependencies import get_current_user, get_summary_service

router = APIRouter()


@router.post("/summary", response_model=SummaryResult, response_model_exclude_none=True)
async def summarize(
    payload: SummaryRequest,
    current_user: AuthUser = Depends(get_current_user),
    service: SummaryService = Depends(get_summary_service),
):
    """Summarize free text; `schedule` requests also extract a calendar event.

    The summary is advisory. Note creation never depends on this call.
    """
    return await service.summarize(payload.text, payload.type)
