"""Jinja2 template registry for the rendered pages.

Templates are compiled once at startup and looked up by name afterwards. A
template that cannot be found at startup aborts the process; a failure while
rendering a request never does and degrades to a body describing the error.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, select_autoescape

from homepage.kernel.errors import TemplateRenderError

logger = structlog.get_logger()

DEFAULT_TEMPLATES: Mapping[str, str] = MappingProxyType({"index": "index.html"})


class TemplateRegistry:
    """Read-only mapping of template names to compiled Jinja2 templates.

    Templates receive the payload as a single `fields` mapping, since field
    names such as `hash-success-msg` are not valid template identifiers.
    """

    def __init__(self, templates: Mapping[str, Template]) -> None:
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def from_directory(
        cls,
        template_dir: Path | str,
        names: Mapping[str, str] = DEFAULT_TEMPLATES,
    ) -> TemplateRegistry:
        """Compile each `name -> filename` entry found in `template_dir`.

        Raises:
            jinja2.TemplateNotFound: a listed file does not exist.
            jinja2.TemplateSyntaxError: a listed file does not compile.
        """
        env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
        )
        templates = {name: env.get_template(filename) for name, filename in names.items()}
        logger.info(
            "Templates registered",
            template_dir=str(template_dir),
            templates=sorted(templates),
        )
        return cls(templates)

    @property
    def names(self) -> list[str]:
        return sorted(self._templates)

    def _lookup(self, name: str) -> Template:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateRenderError(
                message=f"Template not found: {name!r}",
                meta={"template": name},
            ) from None

    def render(self, name: str, fields: Mapping[str, str] | None = None) -> str:
        """Render `name` with `fields`; never raises.

        Returns the error text as the body when the template is unknown or
        the engine fails.
        """
        try:
            return self._lookup(name).render(fields=dict(fields or {}))
        except TemplateRenderError as e:
            logger.error("Template render failed", template=name, code=e.code, error=e.message)
            return e.message
        except TemplateError as e:
            logger.error("Template render failed", template=name, error=str(e))
            return f"Error rendering template {name!r}: {e}"
