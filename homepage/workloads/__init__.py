"""Bounded synthetic workloads behind the /hash and /sleep demos."""

from homepage.workloads.executor import execute, hash_workload, run_workload, sleep_workload
from homepage.workloads.types import (
    OutcomeStatus,
    WorkloadKind,
    WorkloadOutcome,
    WorkloadRequest,
)
from homepage.workloads.validation import (
    DEFAULT_MAGNITUDE,
    MAX_MAGNITUDE,
    ValidatedMagnitude,
    validate_magnitude,
)

__all__ = [
    "DEFAULT_MAGNITUDE",
    "MAX_MAGNITUDE",
    "OutcomeStatus",
    "ValidatedMagnitude",
    "WorkloadKind",
    "WorkloadOutcome",
    "WorkloadRequest",
    "execute",
    "hash_workload",
    "run_workload",
    "sleep_workload",
    "validate_magnitude",
]
