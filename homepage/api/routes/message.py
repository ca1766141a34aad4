"""Contact form endpoint (POST /message)."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.datastructures import FormData
from starlette.types import Message

from homepage.api.dependencies import get_app_settings, get_templates, render_page
from homepage.config import Settings
from homepage.notifications.webhook import relay_message
from homepage.rendering import TemplateRegistry, relay_payload

logger = structlog.get_logger()

router = APIRouter()

MAX_MESSAGE_BODY_BYTES = 20 * 1024


async def _read_limited_form(request: Request) -> FormData:
    """Buffer at most `MAX_MESSAGE_BODY_BYTES` of the body, then parse it as a form."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > MAX_MESSAGE_BODY_BYTES:
        raise HTTPException(status_code=413, detail="Payload Too Large")

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > MAX_MESSAGE_BODY_BYTES:
            logger.info("Contact form body over limit", received=received)
            raise HTTPException(status_code=413, detail="Payload Too Large")
        chunks.append(chunk)
    body = b"".join(chunks)

    async def _replay() -> Message:
        return {"type": "http.request", "body": body, "more_body": False}

    return await Request(request.scope, receive=_replay).form()


@router.post("/message", response_class=HTMLResponse)
async def send_message(
    request: Request,
    templates: TemplateRegistry = Depends(get_templates),
    settings: Settings = Depends(get_app_settings),
):
    """
    Relay a contact form message to the chat webhook.

    Always answers 200 with the index page: a confirmation on success, or an
    error with the submitted text echoed back into the form.
    """
    form = await _read_limited_form(request)
    message = form.get("message")
    if not isinstance(message, str):
        message = None

    outcome = await relay_message(
        message,
        settings.slack.webhook,
        timeout=settings.slack.timeout_seconds,
    )
    return render_page(templates, relay_payload(outcome))
