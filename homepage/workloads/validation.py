"""Bounds checking for the numeric parameters of the demo workloads."""

from __future__ import annotations

import re
from dataclasses import dataclass

from homepage.kernel.errors import ParameterValidationError

MAX_MAGNITUDE = 10_000
DEFAULT_MAGNITUDE = 1_000

# Unsigned base-10 integer, optionally with a leading plus sign.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_LOGGED_RAW_CHARS = 32


def bounded_range_message(label: str, bound: int) -> str:
    return f"{label} must be a positive integer between 0 and {bound:,}"


@dataclass(frozen=True)
class ValidatedMagnitude:
    """A workload size already checked against its inclusive bound."""

    value: int
    bound: int = MAX_MAGNITUDE

    def __post_init__(self) -> None:
        if not 0 <= self.value <= self.bound:
            raise ValueError(f"magnitude {self.value} outside 0..{self.bound}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def validate_magnitude(
    raw: str | None,
    *,
    label: str = "Amount",
    bound: int = MAX_MAGNITUDE,
    default: int = DEFAULT_MAGNITUDE,
) -> ValidatedMagnitude:
    """Parse an untyped request parameter into a `ValidatedMagnitude`.

    A missing parameter falls back to `default`. Anything that is not an
    unsigned integer, or that exceeds `bound`, raises
    `ParameterValidationError` with the same message, so callers cannot tell
    "not a number" from "too big" (both edges of the range are inclusive).
    """
    if raw is None:
        return ValidatedMagnitude(value=default, bound=bound)

    if not _UNSIGNED_RE.fullmatch(raw):
        raise ParameterValidationError(
            message=bounded_range_message(label, bound),
            meta={"raw": raw[:_LOGGED_RAW_CHARS], "reason": "not_an_integer"},
        )

    # Digit count is checked first; int() refuses very long digit strings.
    digits = raw.lstrip("+").lstrip("0")
    if len(digits) > len(str(bound)) or int(digits or "0") > bound:
        raise ParameterValidationError(
            message=bounded_range_message(label, bound),
            meta={"raw": raw[:_LOGGED_RAW_CHARS], "reason": "out_of_range"},
        )

    return ValidatedMagnitude(value=int(digits or "0"), bound=bound)
