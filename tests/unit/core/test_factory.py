"""Unit tests for application factory.

Tests cover:
- create_app function
- Middleware setup
- Router setup
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from ecolojia.core.config import Settings
from ecolojia.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from ecolojia.factory import create_app


pytestmark = pytest.mark.unit


def _build(settings: Settings) -> FastAPI:
    with patch("ecolojia.factory.setup_metrics"):
        return create_app(settings)


class TestCreateApp:
    """Tests for create_app function."""

    def test_creates_fastapi_instance(self) -> None:
        """Should create a FastAPI instance from settings."""
        settings = Settings(APP_ENV="test")

        app = _build(settings)

        assert isinstance(app, FastAPI)
        assert app.title == settings.app.name
        assert app.version == settings.app.version

    def test_stores_settings_in_state(self) -> None:
        """Should store settings in app state."""
        settings = Settings(APP_ENV="test")

        assert _build(settings).state.settings is settings

    def test_docs_enabled_outside_production(self) -> None:
        """Should expose docs in non-production environments."""
        app = _build(Settings(APP_ENV="local"))

        assert app.docs_url == "/docs"
        assert app.openapi_url == "/openapi.json"

    def test_disables_docs_in_production(self) -> None:
        """Should disable docs endpoints in production."""
        app = _build(Settings(APP_ENV="production"))

        assert app.docs_url is None
        assert app.redoc_url is None
        assert app.openapi_url is None

    def test_passes_settings_to_metrics(self) -> None:
        """Should configure metrics with the same settings."""
        settings = Settings(APP_ENV="test")

        with patch("ecolojia.factory.setup_metrics") as mock_metrics:
            app = create_app(settings)

        mock_metrics.assert_called_once_with(app, settings)


class TestMiddleware:
    """Tests for the middleware stack."""

    def test_stack_order(self) -> None:
        """Should run request ID first, then timing, then logging."""
        app = _build(Settings(APP_ENV="test", api={"cors_origins": []}))

        classes = [m.cls for m in app.user_middleware]

        assert classes[:3] == [RequestIDMiddleware, TimingMiddleware, LoggingMiddleware]
        assert CORSMiddleware not in classes

    def test_cors_when_origins_configured(self) -> None:
        """Should add CORS only when origins are configured."""
        app = _build(
            Settings(APP_ENV="test", api={"cors_origins": ["http://localhost:3000"]})
        )

        assert CORSMiddleware in [m.cls for m in app.user_middleware]

    def test_slow_threshold_from_settings(self) -> None:
        """Should configure the timing threshold from observability settings."""
        app = _build(
            Settings(APP_ENV="test", observability={"slow_request_threshold": 2.5})
        )

        timing = next(m for m in app.user_middleware if m.cls is TimingMiddleware)
        assert timing.kwargs["slow_threshold"] == 2.5


class TestRouters:
    """Tests for router setup."""

    def test_routes_mounted_under_prefix(self) -> None:
        """Should mount the analysis and probe routes under the v1 prefix."""
        app = _build(Settings(APP_ENV="test"))

        paths = {route.path for route in app.routes}

        assert "/api/v1/ecolojia/cosmetics/analyze" in paths
        assert "/api/v1/ecolojia/detergents/analyze" in paths
        assert "/api/v1/ecolojia/health" in paths
        assert "/api/v1/ecolojia/ready" in paths

    def test_custom_prefix(self) -> None:
        """Should honour a configured prefix."""
        app = _build(Settings(APP_ENV="test", api={"v1_prefix": "/v1"}))

        assert "/v1/cosmetics/analyze" in {route.path for route in app.routes}

    def test_root_endpoint(self) -> None:
        """Should describe the service at the root path."""
        app = _build(Settings(APP_ENV="test"))

        response = TestClient(app).get("/")

        assert response.status_code == 200
        assert response.json() == {
            "service": "Ecolojia Scoring Service",
            "version": "0.1.0",
            "docs": "/docs",
        }
