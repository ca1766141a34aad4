"""API route modules."""

from . import (
    health,
    message,
    pages,
    workloads,
)

__all__ = [
    "health",
    "message",
    "pages",
    "workloads",
]
