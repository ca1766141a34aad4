"""API middleware modules."""

from .security import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    get_cors_origins,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "get_cors_origins",
]
