"""
Response hardening and request correlation for the homepage.

Every response gets the baseline headers below; HTML pages also get a
content security policy that only allows same-origin forms, styles and
scripts. Each request is tagged with an ID that is echoed back and bound
into the structlog context for the lifetime of the request.
"""

import secrets
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from homepage.config import Settings

REQUEST_ID_HEADER = "X-Request-ID"

BASELINE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

HTML_CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data: https:",
        "form-action 'self'",
        "frame-ancestors 'none'",
    ]
)

LOCAL_ORIGINS = ["http://localhost:8080", "http://127.0.0.1:8080"]


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers.update(BASELINE_HEADERS)
        if response.headers.get("content-type", "").startswith("text/html"):
            response.headers["Content-Security-Policy"] = HTML_CONTENT_SECURITY_POLICY

        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's request ID or mint a 16 hex character one."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(8)
        request.state.request_id = request_id

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "method", "path")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def get_cors_origins(settings: Settings) -> list[str]:
    """Configured origins; outside production the local dev server is added."""
    if settings.environment == "production":
        return settings.cors_origins
    return sorted(set(settings.cors_origins + LOCAL_ORIGINS))
