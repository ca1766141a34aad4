"""
Test Configuration and Fixtures

Shared fixtures for the homepage test suite: settings, template registry,
application, clients, and a recording stand-in for the chat webhook.
"""

import os
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from tests.support.webhook import WEBHOOK_URL, WebhookRecorder

# Set test environment variables before importing app modules.
os.environ.setdefault("APPCFG_ENVIRONMENT", "test")
os.environ.setdefault("APPCFG_LOG_LEVEL", "WARNING")
os.environ.setdefault("APPCFG_SLACK__WEBHOOK", "https://hooks.example.test/services/T000/B000/env")
# Keep developer config files out of the test run.
os.environ.setdefault("APPCFG_CONFIG_DIR", os.path.join(os.path.dirname(__file__), "_no_config"))


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "api: API endpoint tests")
    config.addinivalue_line("markers", "slow: Slow tests (>1s)")


def pytest_collection_modifyitems(config, items):
    """
    Auto-assign tier markers so we can run `pytest -m unit` or `pytest -m api`.

    Convention:
    - tests/api/** => api
    - everything else => unit
    """
    for item in items:
        path = str(getattr(item, "fspath", ""))
        if item.get_closest_marker("api") or item.get_closest_marker("unit"):
            continue
        if "/tests/api/" in path or "\\tests\\api\\" in path:
            item.add_marker(pytest.mark.api)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def settings():
    from homepage.config import Settings, SlackSettings

    return Settings(
        environment="test",
        log_level="WARNING",
        slack=SlackSettings(webhook=WEBHOOK_URL),
    )


@pytest.fixture
def templates(settings):
    from tests.support.templates import RecordingTemplateRegistry

    return RecordingTemplateRegistry.from_directory(settings.templates_dir)


@pytest.fixture
def app(settings, templates):
    from homepage.api.main import create_app

    return create_app(settings=settings, templates=templates)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# WEBHOOK FIXTURES
# =============================================================================


@pytest.fixture
def webhook(monkeypatch):
    """
    Route every `httpx.AsyncClient` the relay opens through a recorder.

    Use with the synchronous `client` fixture only, since the patch replaces
    `httpx.AsyncClient` process-wide.
    """
    recorder = WebhookRecorder()
    real_async_client = httpx.AsyncClient

    def _client_factory(*args, **kwargs):
        kwargs["transport"] = recorder.transport()
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", _client_factory)
    return recorder
