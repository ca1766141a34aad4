"""JSON error responses for failures that never reach a rendered page."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from homepage.kernel.errors import HomepageError

logger = structlog.get_logger()

# Typed errors that escape a route; anything unlisted is a server fault.
_STATUS_BY_ERROR: dict[str, int] = {
    "workload.invalid_parameter": 400,
    "message.empty": 400,
    "relay.transport_error": 502,
}


def error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    detail: Any,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the `{detail, code, request_id}` body every JSON error shares."""
    content: dict[str, Any] = {"detail": detail, "code": code}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        content["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers.

    The demo and contact routes recover their own errors and answer with a
    rendered page, so these only cover framework failures (unknown route,
    wrong method, oversized body) and errors that escape a route.
    """

    @app.exception_handler(StarletteHTTPException)
    async def _on_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(
            request,
            status_code=exc.status_code,
            code=f"http.{exc.status_code}",
            detail=exc.detail,
            headers=dict(exc.headers or {}),
        )

    @app.exception_handler(RequestValidationError)
    async def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(
            request,
            status_code=422,
            code="http.validation_error",
            detail=exc.errors(),
        )

    @app.exception_handler(HomepageError)
    async def _on_homepage_error(request: Request, exc: HomepageError) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(exc.code, 500)
        logger.warning("Typed error escaped route", code=exc.code, status_code=status_code, meta=exc.meta)
        return error_response(request, status_code=status_code, code=exc.code, detail=exc.message)

    @app.exception_handler(Exception)
    async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", error_type=type(exc).__name__)
        return error_response(
            request,
            status_code=500,
            code="internal.unhandled",
            detail="Internal Server Error",
        )
