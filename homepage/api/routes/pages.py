"""Landing page and the static marketing pages."""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from homepage.api.dependencies import get_app_settings, get_templates, render_page
from homepage.config import Settings
from homepage.rendering import RenderPayload, TemplateRegistry

router = APIRouter()

STATIC_PAGES = (
    "expandable",
    "scalable",
    "highly-available",
    "full-stack",
    "full-service",
    "cloud",
)


@router.get("/", response_class=HTMLResponse)
async def index(templates: TemplateRegistry = Depends(get_templates)):
    return render_page(templates, RenderPayload())


def _static_page(page: str):
    async def serve(settings: Settings = Depends(get_app_settings)) -> FileResponse:
        path = Path(settings.static_dir) / f"{page}.html"
        if not path.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(path, media_type="text/html")

    serve.__name__ = f"{page.replace('-', '_')}_page"
    return serve


for _page in STATIC_PAGES:
    router.add_api_route(
        f"/{_page}",
        _static_page(_page),
        methods=["GET"],
        include_in_schema=False,
    )
