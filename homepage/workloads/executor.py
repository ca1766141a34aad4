"""
Synthetic Workload Executor

Runs the two demo workloads for an already validated magnitude:
- hash: CPU-bound SHA-512 over freshly generated random strings
- sleep: suspends the request for a number of milliseconds

The executor has no failure modes of its own; invalid input never reaches it
because `run_workload` rejects it in the validator first.
"""

from __future__ import annotations

import asyncio
import hashlib
import random
import string
import time

import structlog

from homepage.kernel.errors import ParameterValidationError
from homepage.monitoring import get_metrics
from homepage.workloads.types import WorkloadKind, WorkloadOutcome, WorkloadRequest
from homepage.workloads.validation import ValidatedMagnitude, validate_magnitude

logger = structlog.get_logger()

HASH_INPUT_LENGTH = 64
_ALPHANUMERIC = string.ascii_letters + string.digits


def _random_alphanumeric(length: int = HASH_INPUT_LENGTH) -> str:
    return "".join(random.choices(_ALPHANUMERIC, k=length))


def hash_workload(amount: int) -> int:
    """Hash `amount` random strings with SHA-512 and return the count.

    Digests are computed and dropped; only the work itself matters.
    """
    completed = 0
    for _ in range(amount):
        hashlib.sha512(_random_alphanumeric().encode("ascii")).hexdigest()
        completed += 1
    return completed


async def sleep_workload(length_ms: int) -> int:
    """Suspend the calling task for at least `length_ms` milliseconds."""
    # The event loop may wake a timer up to one clock tick early.
    deadline = time.monotonic() + length_ms / 1000
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return length_ms
        await asyncio.sleep(remaining)


def success_message(kind: WorkloadKind, magnitude: int) -> str:
    return f"Successfully {kind.verb} {magnitude} {kind.unit}"


async def execute(kind: WorkloadKind, magnitude: ValidatedMagnitude) -> WorkloadOutcome:
    """Run one workload to completion and describe it.

    The hash loop runs in a worker thread so the event loop stays free while
    it burns CPU; it is not cancellable once started.
    """
    if kind is WorkloadKind.HASH:
        done = await asyncio.to_thread(hash_workload, magnitude.value)
    else:
        done = await sleep_workload(magnitude.value)
    return WorkloadOutcome.success(success_message(kind, done))


async def run_workload(request: WorkloadRequest) -> WorkloadOutcome:
    """Validate the raw parameter, then execute the workload.

    A rejected parameter short-circuits into an error outcome and the
    executor is never called.
    """
    kind = request.kind
    metrics = get_metrics()

    try:
        magnitude = validate_magnitude(request.raw_parameter, label=kind.label)
    except ParameterValidationError as e:
        logger.info(
            "Workload parameter rejected",
            kind=kind.value,
            parameter=kind.parameter,
            code=e.code,
            meta=e.meta,
        )
        metrics.track_workload(kind.value, "rejected")
        return WorkloadOutcome.validation_error(e.message)

    start = time.perf_counter()
    outcome = await execute(kind, magnitude)
    duration = time.perf_counter() - start

    logger.info(
        "Workload completed",
        kind=kind.value,
        magnitude=magnitude.value,
        duration_ms=round(duration * 1000, 2),
    )
    metrics.track_workload(kind.value, "success", duration)
    return outcome
