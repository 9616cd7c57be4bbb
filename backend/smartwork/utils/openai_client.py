from __future__ import annotations

from functools import lru_cache

from openai import AsyncOpenAI

from smartwork.config import settings
from smartwork.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_openai_client() -> AsyncOpenAI:
    """Shared client for the summary endpoint.

    Summaries are advisory, so the SDK's own retries are disabled and a
    slow model fails after `summary_timeout_seconds`. The key comes from
    `APP_OPENAI_API_KEY`, or `OPENAI_API_KEY` when that is unset.
    """
    options = {"timeout": settings.summary_timeout_seconds, "max_retries": 0}
    if settings.openai_api_key:
        options["api_key"] = settings.openai_api_key
    logger.debug("Creating OpenAI client (model=%s)", settings.summary_model)
    return AsyncOpenAI(**options)
