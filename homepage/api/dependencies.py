"""Request dependencies for the process-wide, read-only collaborators.

Settings and the template registry are built once in `create_app` and stored
on `app.state`; handlers reach them only through these dependencies.
"""

from fastapi import Request
from fastapi.responses import HTMLResponse

from homepage.config import Settings
from homepage.rendering import RenderPayload, TemplateRegistry


def get_templates(request: Request) -> TemplateRegistry:
    return request.app.state.templates


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def render_page(templates: TemplateRegistry, payload: RenderPayload) -> HTMLResponse:
    """Render a payload as a 200 HTML page, whatever the outcome."""
    return HTMLResponse(templates.render(payload.template_name, payload.fields))
