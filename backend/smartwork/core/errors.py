from __future__ import annotations


class SmartWorkError(Exception):
    """Base class for domain errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SmartWorkError):
    """A required field is missing or invalid."""

    status_code = 400


class UnauthorizedError(SmartWorkError):
    """Missing session or a caller acting on behalf of another user."""

    status_code = 401


class NotFoundError(SmartWorkError):
    """The referenced note, comment or inventory item does not exist."""

    status_code = 404


class UpstreamError(SmartWorkError):
    """The document store or a third-party API failed."""

    status_code = 500
