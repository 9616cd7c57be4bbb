from __future__ import annotations

import asyncio
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import BaseModel

from smartwork.core.errors import UpstreamError
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SupabaseRepositoryMixin:
    """Shared helpers for PostgREST-backed repositories.

    The supabase client is synchronous, so every call is pushed to a worker
    thread. Client failures are re-raised as `UpstreamError` with the
    original message.
    """

    TABLE_NAME: str = ""
    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "user_id", "created_at"})

    async def _run(self, func: Callable[[], Any]) -> Any:
        try:
            return await asyncio.to_thread(func)
        except Exception as err:
            logger.error("Supabase call on %s failed: %s", self.TABLE_NAME, err)
            raise UpstreamError(str(err)) from err

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}

    @staticmethod
    def _model_to_row(model: BaseModel) -> dict[str, Any]:
        # JSON mode turns datetimes/enums/nested models into PostgREST-safe values
        return model.model_dump(mode="json", by_alias=False)

    @staticmethod
    def _row_to_model(model_cls: type[ModelT], row: dict[str, Any]) -> ModelT:
        """Validate a row, ignoring unknown columns.

        NULL in a column whose field has a non-null default reads as that
        default, so rows written by older clients still load.
        """
        data: dict[str, Any] = {}
        for key, value in row.items():
            field = model_cls.model_fields.get(key)
            if field is None:
                continue
            if value is None and not field.is_required() and field.default is not None:
                continue
            data[key] = value
        return model_cls.model_validate(data)

    def _sanitize_changes(self, changes: dict[str, Any]) -> dict[str, Any]:
        sanitized: dict[str, Any] = {}
        for key, value in (changes or {}).items():
            if key in self.IMMUTABLE_FIELDS:
                continue
            sanitized[key] = _to_json_value(value)
        return sanitized


def _to_json_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=False)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_json_value(v) for k, v in value.items()}
    return value
