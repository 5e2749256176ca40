"""Integration test fixtures.

Builds the application in-process with the test settings, runs its
lifespan so the analysis services are loaded, and drives it through an
httpx ASGI transport.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY

from ecolojia.core.config import Settings
from ecolojia.core.config.settings import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
)
from ecolojia.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration

API_PREFIX = "/api/v1/ecolojia"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with CORS enabled and metrics disabled."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(
            name="ecolojia-test",
            version="0.0.1-test",
            debug=True,
        ),
        api=ApiSettings(
            cors_origins=["http://localhost:3000"],
        ),
        logging=LoggingSettings(
            level="WARNING",
            format="text",
        ),
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client against an app whose lifespan has started."""
    async with (
        app.router.lifespan_context(app),
        AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac,
    ):
        yield ac


@pytest.fixture(autouse=True)
def reset_prometheus_registry() -> Generator[None]:
    """Unregister collectors added by apps built during a test.

    Each create_app call with metrics enabled registers the HTTP metrics
    again in the global registry.
    """
    collectors_before = set(REGISTRY._names_to_collectors.keys())

    yield

    collectors_to_remove = []
    for name, collector in list(REGISTRY._names_to_collectors.items()):
        if name not in collectors_before:
            collectors_to_remove.append(collector)

    for collector in collectors_to_remove:
        with contextlib.suppress(Exception):
            REGISTRY.unregister(collector)
