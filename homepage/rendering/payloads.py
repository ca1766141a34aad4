"""Mapping of outcomes onto template fields."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from homepage.workloads.types import WorkloadKind, WorkloadOutcome

INDEX_TEMPLATE = "index"

SUCCESS_FIELD = "success-msg"
ERROR_FIELD = "error-msg"
ECHO_FIELD = "msg"


@dataclass(frozen=True)
class RenderPayload:
    template_name: str = INDEX_TEMPLATE
    fields: Mapping[str, str] = field(default_factory=dict)


def outcome_payload(kind: WorkloadKind, outcome: WorkloadOutcome) -> RenderPayload:
    """Fields for a workload demo: `<kind>-success-msg` or `<kind>-error-msg`."""
    suffix = SUCCESS_FIELD if outcome.ok else ERROR_FIELD
    return RenderPayload(INDEX_TEMPLATE, {f"{kind.value}-{suffix}": outcome.message})


def relay_payload(outcome: WorkloadOutcome) -> RenderPayload:
    """Fields for the contact form.

    Errors echo the submitted text under `msg` so the form can be refilled;
    success deliberately does not.
    """
    if outcome.ok:
        return RenderPayload(INDEX_TEMPLATE, {SUCCESS_FIELD: outcome.message})
    return RenderPayload(
        INDEX_TEMPLATE,
        {ECHO_FIELD: outcome.echo or "", ERROR_FIELD: outcome.message},
    )
