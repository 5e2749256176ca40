"""Unit tests for logging middleware.

Tests cover:
- Request/response logging
- Probe path exclusion
- Client IP resolution
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ecolojia.core.middleware.logging import LoggingMiddleware, client_ip


pytestmark = pytest.mark.unit


def _request(path: str, headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.method = "POST"
    request.url.path = path
    request.headers = headers or {}
    request.client.host = "10.0.0.5"
    return request


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_logs_request_and_response(self) -> None:
        """Should log start and completion with the status code."""
        middleware = LoggingMiddleware(MagicMock())
        response = MagicMock(status_code=200)
        call_next = AsyncMock(return_value=response)

        with (
            patch("ecolojia.core.middleware.logging.bind_context") as mock_bind,
            patch("ecolojia.core.middleware.logging.logger") as mock_logger,
        ):
            result = await middleware.dispatch(
                _request("/api/v1/ecolojia/detergents/analyze"), call_next
            )

        assert result is response
        mock_bind.assert_called_once_with(
            method="POST",
            path="/api/v1/ecolojia/detergents/analyze",
            client_ip="10.0.0.5",
        )
        messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert messages == ["Request started", "Request completed"]
        assert mock_logger.info.call_args.kwargs == {"status_code": 200}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/api/v1/ecolojia/health",
            "/api/v1/ecolojia/ready",
            "/api/v1/ecolojia/metrics",
            "/favicon.ico",
        ],
    )
    async def test_skips_probe_paths(self, path: str) -> None:
        """Should not log probes, metrics scrapes or favicon requests."""
        middleware = LoggingMiddleware(MagicMock())
        call_next = AsyncMock(return_value=MagicMock(status_code=200))

        with patch("ecolojia.core.middleware.logging.logger") as mock_logger:
            await middleware.dispatch(_request(path), call_next)

        mock_logger.info.assert_not_called()
        call_next.assert_called_once()

    @pytest.mark.asyncio
    async def test_custom_exclusions(self) -> None:
        """Should honour custom excluded suffixes."""
        middleware = LoggingMiddleware(MagicMock(), exclude_suffixes=("/ping",))
        call_next = AsyncMock(return_value=MagicMock(status_code=200))

        with patch("ecolojia.core.middleware.logging.logger") as mock_logger:
            await middleware.dispatch(_request("/ping"), call_next)

        mock_logger.info.assert_not_called()


class TestClientIp:
    """Tests for client_ip."""

    def test_forwarded_for(self) -> None:
        """Should use the first X-Forwarded-For address."""
        request = _request("/", {"x-forwarded-for": "203.0.113.7, 10.0.0.1"})

        assert client_ip(request) == "203.0.113.7"

    def test_real_ip(self) -> None:
        """Should fall back to X-Real-IP."""
        request = _request("/", {"x-real-ip": "198.51.100.2"})

        assert client_ip(request) == "198.51.100.2"

    def test_client_host(self) -> None:
        """Should fall back to the socket peer."""
        assert client_ip(_request("/")) == "10.0.0.5"

    def test_unknown(self) -> None:
        """Should return unknown without any address."""
        request = _request("/")
        request.client = None

        assert client_ip(request) == "unknown"
