"""
Homepage - FastAPI Application

Serves the personal homepage:
- Landing page rendered from the index template, plus static marketing pages
- Synthetic workload demos (/hash, /sleep)
- Contact form relayed to a chat webhook (/message)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app

from homepage import __version__
from homepage.api.middleware import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    get_cors_origins,
)
from homepage.api.routes import health, message, pages, workloads
from homepage.config import Settings, get_settings
from homepage.kernel.http.errors import register_exception_handlers
from homepage.monitoring import get_metrics
from homepage.rendering import TemplateRegistry

# Map log level string to logging constant
_LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging."""
    level = _LOG_LEVEL_MAP.get(settings.log_level.lower(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings

    logger.info(
        "Starting homepage",
        version=__version__,
        environment=settings.environment,
        host=settings.host,
        port=settings.port,
        templates=app.state.templates.names,
    )

    yield

    logger.info("Shutting down homepage")


def create_app(
    settings: Settings | None = None,
    templates: TemplateRegistry | None = None,
) -> FastAPI:
    """Build the application.

    Settings and the template registry are resolved here, once; a missing
    template or webhook setting fails startup.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)
    if templates is None:
        templates = TemplateRegistry.from_directory(settings.templates_dir)

    app = FastAPI(
        title="Homepage",
        description="Personal homepage with synthetic workload demos and a contact relay",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.templates = templates

    register_exception_handlers(app)

    # Middleware order matters - first added = last executed
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(settings),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # Prometheus metrics endpoint
    get_metrics()
    app.mount("/metrics", make_asgi_app())

    # Stylesheets; only mount when present to avoid startup errors
    css_dir = Path(settings.static_dir) / "css"
    if css_dir.is_dir():
        app.mount("/css", StaticFiles(directory=str(css_dir)), name="css")
    else:
        logger.warning("Stylesheet directory not found", css_dir=str(css_dir))

    app.include_router(health.router, tags=["Health"])
    app.include_router(workloads.router, tags=["Workloads"])
    app.include_router(message.router, tags=["Contact"])
    app.include_router(pages.router, tags=["Pages"])

    return app
