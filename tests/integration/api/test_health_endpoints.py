"""Integration tests for health API endpoints.

Tests cover:
- Health check endpoint
- Readiness check endpoint with analysis service status
- Root endpoint and CORS
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from fastapi import FastAPI
    from httpx import AsyncClient


pytestmark = pytest.mark.integration


class TestHealthEndpoint:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Should return healthy status."""
        response = await client.get("/api/v1/ecolojia/health")

        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert "version" in data
        assert "timestamp" in data


class TestReadinessEndpoint:
    """Tests for GET /ready."""

    @pytest.mark.asyncio
    async def test_ready_with_services(self, client: AsyncClient) -> None:
        """Should be ready once both services are loaded."""
        response = await client.get("/api/v1/ecolojia/ready")

        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ready"
        assert data["services"] == {"cosmetic": "healthy", "detergent": "healthy"}

    @pytest.mark.asyncio
    async def test_degraded_without_service(
        self, app: FastAPI, client: AsyncClient
    ) -> None:
        """Should return 503 when a service is missing."""
        app.state.detergent_service = None

        response = await client.get("/api/v1/ecolojia/ready")

        assert response.status_code == 503

        data = response.json()
        assert data["status"] == "degraded"
        assert data["services"] == {"cosmetic": "healthy", "detergent": "unhealthy"}


class TestRootEndpoint:
    """Tests for GET /."""

    @pytest.mark.asyncio
    async def test_root_returns_service_info(self, client: AsyncClient) -> None:
        """Should return basic service information."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "service": "ecolojia-test",
            "version": "0.0.1-test",
            "docs": "/docs",
        }

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient) -> None:
        """Should render 404 in the error body format."""
        response = await client.get("/api/v1/ecolojia/unknown")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_ERROR"


class TestCors:
    """Tests for the CORS configuration."""

    @pytest.mark.asyncio
    async def test_preflight_allowed_origin(self, client: AsyncClient) -> None:
        """Should allow the configured origin."""
        response = await client.options(
            "/api/v1/ecolojia/cosmetics/analyze",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"] == "http://localhost:3000"
        )
