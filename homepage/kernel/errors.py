from __future__ import annotations

import re
from typing import Any


_ERROR_CODE_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")


class HomepageError(Exception):
    """Base typed error for the homepage service.

    Every error carries:
    - a stable dotted `code` for logs and metrics;
    - a human-readable `message` that is safe to show on the page;
    - an optional `meta` payload with debugging context.
    """

    def __init__(
        self,
        *,
        code: str,
        message: str,
        meta: dict[str, Any] | None = None,
    ) -> None:
        if not _ERROR_CODE_RE.fullmatch(code):
            raise ValueError(
                "Invalid error code. Expected dot-separated lowercase tokens, "
                f"got: {code!r}"
            )
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = dict(meta or {})


class ParameterValidationError(HomepageError):
    def __init__(
        self,
        *,
        message: str,
        code: str = "workload.invalid_parameter",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, meta=meta)


class EmptyMessageError(HomepageError):
    def __init__(
        self,
        *,
        message: str = "Don't forget to write a message",
        code: str = "message.empty",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, meta=meta)


class RelayTransportError(HomepageError):
    def __init__(
        self,
        *,
        message: str = "An error occurred while sending, try again in a little bit",
        code: str = "relay.transport_error",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, meta=meta)


class TemplateRenderError(HomepageError):
    def __init__(
        self,
        *,
        message: str = "Template rendering failed",
        code: str = "template.render_error",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, meta=meta)
