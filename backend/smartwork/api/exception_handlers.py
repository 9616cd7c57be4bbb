from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from smartwork.core.errors import SmartWorkError
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger(__name__)


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


async def smartwork_error_handler(request: Request, exc: SmartWorkError) -> JSONResponse:
    """Map domain errors to their HTTP status; upstream messages pass through as-is."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations are client errors (400), not 422."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg"),
        }
        for error in exc.errors()
    ]
    logger.info("Validation error on %s: %s", request.url.path, errors)
    message = errors[0]["message"] if errors else "Request validation failed"
    return _error_response(status.HTTP_400_BAD_REQUEST, message, errors=errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SmartWorkError, smartwork_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
