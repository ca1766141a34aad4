"""Page rendering: template registry and outcome-to-fields mapping."""

from homepage.rendering.payloads import (
    INDEX_TEMPLATE,
    RenderPayload,
    outcome_payload,
    relay_payload,
)
from homepage.rendering.templates import TemplateRegistry

__all__ = [
    "INDEX_TEMPLATE",
    "RenderPayload",
    "TemplateRegistry",
    "outcome_payload",
    "relay_payload",
]
