"""Root conftest: shared test configuration and the HTTP client fixture.

Invariants:
    - Every test gets a fresh app built by create_app() from explicit Settings
    - .env files are ignored so a developer's local config cannot leak into tests
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Human-readable logs when running the suite
os.environ.setdefault("LOG_FORMAT", "text")

from sort_service.config import Settings  # noqa: E402
from sort_service.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Async test client over the ASGI app (no network)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
