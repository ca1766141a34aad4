"""Types shared by the workload demos and the contact relay."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WorkloadKind(str, Enum):
    """Synthetic workloads offered by the demo endpoints."""

    HASH = "hash"
    SLEEP = "sleep"

    @property
    def parameter(self) -> str:
        """Query parameter carrying the workload size."""
        return _PARAMETERS[self]

    @property
    def label(self) -> str:
        return self.parameter.capitalize()

    @property
    def verb(self) -> str:
        return _VERBS[self]

    @property
    def unit(self) -> str:
        return _UNITS[self]


_PARAMETERS = {WorkloadKind.HASH: "amount", WorkloadKind.SLEEP: "length"}
_VERBS = {WorkloadKind.HASH: "hashed", WorkloadKind.SLEEP: "slept"}
_UNITS = {WorkloadKind.HASH: "times", WorkloadKind.SLEEP: "milliseconds"}


@dataclass(frozen=True)
class WorkloadRequest:
    kind: WorkloadKind
    raw_parameter: str | None = None


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"


@dataclass(frozen=True)
class WorkloadOutcome:
    """Result of one request: either a success or a user-facing error.

    `echo` is only set on errors from the contact relay and carries the text
    the visitor should find back in the form.
    """

    status: OutcomeStatus
    message: str
    echo: str | None = None

    @classmethod
    def success(cls, message: str) -> WorkloadOutcome:
        return cls(status=OutcomeStatus.SUCCESS, message=message)

    @classmethod
    def validation_error(cls, message: str, *, echo: str | None = None) -> WorkloadOutcome:
        return cls(status=OutcomeStatus.VALIDATION_ERROR, message=message, echo=echo)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS
