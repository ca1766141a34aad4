import pytest

from homepage.rendering import INDEX_TEMPLATE, RenderPayload, outcome_payload, relay_payload
from homepage.workloads.types import WorkloadKind, WorkloadOutcome

pytestmark = pytest.mark.unit


def test_default_payload_targets_index_with_no_fields():
    payload = RenderPayload()
    assert payload.template_name == INDEX_TEMPLATE == "index"
    assert payload.fields == {}


@pytest.mark.parametrize("kind", list(WorkloadKind))
def test_workload_success_fields(kind):
    payload = outcome_payload(kind, WorkloadOutcome.success("ok"))
    assert payload == RenderPayload("index", {f"{kind.value}-success-msg": "ok"})


@pytest.mark.parametrize("kind", list(WorkloadKind))
def test_workload_error_fields(kind):
    payload = outcome_payload(kind, WorkloadOutcome.validation_error("bad"))
    assert payload == RenderPayload("index", {f"{kind.value}-error-msg": "bad"})


def test_relay_success_does_not_echo():
    payload = relay_payload(WorkloadOutcome.success("Message received"))
    assert payload.fields == {"success-msg": "Message received"}


def test_relay_error_echoes_message():
    payload = relay_payload(WorkloadOutcome.validation_error("try again", echo="Hello"))
    assert payload.fields == {"msg": "Hello", "error-msg": "try again"}


def test_relay_error_without_echo_uses_empty_message():
    payload = relay_payload(WorkloadOutcome.validation_error("write something"))
    assert payload.fields == {"msg": "", "error-msg": "write something"}
