"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from homepage import __version__
from homepage.api.dependencies import get_templates
from homepage.rendering import TemplateRegistry

router = APIRouter()

# Track startup time
_startup_time = datetime.now(timezone.utc)


@router.get("/health")
async def health_check(templates: TemplateRegistry = Depends(get_templates)):
    """
    Basic health check endpoint.
    Returns 200 if the service is running.
    """
    now = datetime.now(timezone.utc)
    return {
        "status": "healthy",
        "service": "homepage",
        "version": __version__,
        "templates": templates.names,
        "timestamp": now.isoformat(),
        "uptime_seconds": (now - _startup_time).total_seconds(),
    }


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.
    Returns 200 if the process is alive.
    """
    return {"status": "alive"}
