"""Contact form relay to a Slack-style incoming webhook."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
import structlog

from homepage.kernel.errors import EmptyMessageError, RelayTransportError
from homepage.monitoring import get_metrics
from homepage.workloads.types import WorkloadOutcome

logger = structlog.get_logger()

CHANNEL_MARKER = "<!channel>"
MESSAGE_SOURCE = "homepage"
DELIVERED_MESSAGE = "Message received, expect a response within 24 hours"
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class ContactMessage:
    body: str

    @classmethod
    def parse(cls, raw: str | None) -> ContactMessage:
        body = (raw or "").strip()
        if not body:
            raise EmptyMessageError()
        return cls(body=body)

    def webhook_payload(self) -> dict[str, str]:
        return {"text": f"{CHANNEL_MARKER} {MESSAGE_SOURCE}: {self.body}"}


async def _post_webhook(
    client: httpx.AsyncClient,
    webhook_url: str,
    payload: dict[str, str],
) -> httpx.Response:
    try:
        response = await client.post(webhook_url, json=payload)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise RelayTransportError(meta={"error": str(e), "error_type": type(e).__name__}) from e

    if not response.is_success:
        raise RelayTransportError(
            meta={"status_code": response.status_code, "body": response.text[:200]},
        )
    return response


async def relay_message(
    message: str | None,
    webhook_url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> WorkloadOutcome:
    """Forward a contact message to the webhook, exactly once.

    Returns an error outcome (and makes no call) for an empty message, and an
    error outcome echoing the submitted text when delivery fails. There is no
    retry, so a resubmitted form may notify twice.
    """
    metrics = get_metrics()

    try:
        contact = ContactMessage.parse(message)
    except EmptyMessageError as e:
        logger.info("Contact message rejected", code=e.code)
        metrics.track_relay("empty")
        return WorkloadOutcome.validation_error(e.message, echo="")

    payload = contact.webhook_payload()
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned_client:
                await _post_webhook(owned_client, webhook_url, payload)
        else:
            await _post_webhook(client, webhook_url, payload)
    except RelayTransportError as e:
        logger.warning("Contact message relay failed", code=e.code, meta=e.meta)
        metrics.track_relay("failed")
        return WorkloadOutcome.validation_error(e.message, echo=message)

    logger.info("Contact message relayed", length=len(contact.body))
    metrics.track_relay("delivered")
    return WorkloadOutcome.success(DELIVERED_MESSAGE)
