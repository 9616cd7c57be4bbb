from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from smartwork.config import settings
from smartwork.core.errors import UpstreamError, ValidationError
from smartwork.utils.logging import get_logger
from smartwork.utils.openai_client import get_openai_client

if TYPE_CHECKING:
    from collections.abc import Iterable

    from openai import AsyncOpenAI

    from smartwork.core.models.inventory import FeatureInventoryItem

logger = get_logger(__name__)

ARCHITECTURE_INSTRUCTIONS = """You are a senior system architect.
Given a list of features/components of a software project, write Mermaid.js code that visualizes the system architecture.

1. Prefer a "graph TD" flowchart; use a classDiagram only when it clearly fits better.
2. Group features by their 'type' (frontend, backend, database, external, spreadsheet) using subgraphs.
3. Label nodes with the feature 'name' and its 'techStack'.
4. Infer relationships from descriptions (a feature mentioning Google Calendar links to that external service).
5. Return ONLY the raw Mermaid code, without markdown fences.
6. Keep it simple and readable."""

# Keys sent to the model; ids, owners and timestamps add nothing to the diagram.
DIAGRAM_FIELDS = ("name", "type", "status", "description", "techStack", "sheetNames", "triggerInfo")

_FENCE = re.compile(r"```(?:mermaid)?")


def features_for_diagram(items: Iterable[FeatureInventoryItem]) -> list[dict[str, Any]]:
    return [
        {k: v for k, v in item.model_dump(mode="json", by_alias=True).items() if k in DIAGRAM_FIELDS}
        for item in items
    ]


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text or "").strip()


class ArchitectureService:
    """Draws a Mermaid architecture diagram of the user's feature inventory."""

    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None) -> None:
        self._client = client
        self._model = model or settings.summary_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    async def generate(self, features: list[dict[str, Any]]) -> str:
        if not features:
            raise ValidationError("Invalid features data")

        logger.info("Requesting architecture diagram for %d features", len(features))
        try:
            response = await self.client.responses.create(
                model=self._model,
                instructions=ARCHITECTURE_INSTRUCTIONS,
                input="SYSTEM FEATURES:\n" + json.dumps(features, ensure_ascii=False, indent=2, default=str),
                max_output_tokens=settings.architecture_max_output_tokens,
            )
        except Exception as err:
            logger.error("Architecture generation failed: %s", err)
            raise UpstreamError("Failed to generate architecture") from err

        code = strip_code_fences(response.output_text)
        if not code:
            raise UpstreamError("Failed to generate architecture")
        return code
