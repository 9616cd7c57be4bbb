from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from smartwork.config import settings
from smartwork.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.types import ASGIApp

logger = get_logger(__name__)

CSP_POLICY = (
    "default-src 'self'; "
    "script-src 'self'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data: https:; "
    "connect-src 'self' https://*.supabase.co; "
    "frame-ancestors 'none';"
)


class SecurityMiddleware(BaseHTTPMiddleware):
    """Adds security headers and logs rejected API calls."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = CSP_POLICY

        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"

        # Notes are personal; never let intermediaries cache API payloads
        if request.url.path.startswith(settings.api_prefix):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
            response.headers["Pragma"] = "no-cache"

            if response.status_code == 401:
                client_ip = request.client.host if request.client else "unknown"
                logger.info(
                    "Unauthorized API call",
                    extra={
                        "path": request.url.path,
                        "method": request.method,
                        "ip": client_ip,
                        "user_agent": request.headers.get("user-agent", "unknown")[:100],
                    }
                )

        return response
