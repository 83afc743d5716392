"""HTTP middleware: security headers + access logging."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency for every request at DEBUG."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - started) * 1000
        logger.debug("%s %s -> %d (%.1f ms)", request.method, request.url.path,
                     response.status_code, elapsed_ms)
        return response
