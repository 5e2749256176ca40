"""Unit tests for request ID middleware.

Tests cover:
- Request ID validation and generation
- Request ID propagation from headers
- Response header addition
- Logging context binding
"""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ecolojia.core.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    resolve_request_id,
)


pytestmark = pytest.mark.unit


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    request.state = MagicMock()
    return request


def _response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


class TestResolveRequestId:
    """Tests for resolve_request_id."""

    @pytest.mark.parametrize(
        "incoming",
        ["abc-123", "gateway.req:42_x", "A" * 128],
    )
    def test_keeps_valid_id(self, incoming: str) -> None:
        """Should propagate a well-formed ID."""
        assert resolve_request_id(incoming) == incoming

    @pytest.mark.parametrize(
        "incoming",
        [None, "", "has space", "new\nline", "A" * 129, "<script>"],
    )
    def test_replaces_invalid_id(self, incoming: str | None) -> None:
        """Should generate a UUID for a missing or unsafe ID."""
        result = resolve_request_id(incoming)

        assert result != incoming
        assert uuid.UUID(result).version == 4


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    def test_init_default_header(self) -> None:
        """Should use default header name."""
        middleware = RequestIDMiddleware(MagicMock())

        assert middleware.header_name == REQUEST_ID_HEADER == "X-Request-ID"

    @pytest.mark.asyncio
    async def test_generates_request_id_when_missing(self) -> None:
        """Should generate new UUID when no request ID header present."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request()
        call_next = AsyncMock(return_value=_response())

        with (
            patch("ecolojia.core.middleware.request_id.clear_context"),
            patch("ecolojia.core.middleware.request_id.bind_context"),
        ):
            result = await middleware.dispatch(request, call_next)

        assert result.headers["X-Request-ID"] == request.state.request_id
        assert uuid.UUID(request.state.request_id)

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self) -> None:
        """Should use existing request ID from header."""
        middleware = RequestIDMiddleware(MagicMock())
        existing_id = "existing-request-id-123"
        request = _request({"X-Request-ID": existing_id})
        call_next = AsyncMock(return_value=_response())

        with (
            patch("ecolojia.core.middleware.request_id.clear_context"),
            patch("ecolojia.core.middleware.request_id.bind_context") as mock_bind,
        ):
            result = await middleware.dispatch(request, call_next)

        assert request.state.request_id == existing_id
        assert result.headers["X-Request-ID"] == existing_id
        mock_bind.assert_called_once_with(request_id=existing_id)

    @pytest.mark.asyncio
    async def test_clears_context_before_binding(self) -> None:
        """Should clear logging context at request start."""
        middleware = RequestIDMiddleware(MagicMock())
        manager = MagicMock()
        call_next = AsyncMock(return_value=_response())

        with (
            patch(
                "ecolojia.core.middleware.request_id.clear_context",
                manager.clear,
            ),
            patch(
                "ecolojia.core.middleware.request_id.bind_context",
                manager.bind,
            ),
        ):
            await middleware.dispatch(_request(), call_next)

        assert [call[0] for call in manager.mock_calls] == ["clear", "bind"]
        call_next.assert_called_once()

    @pytest.mark.asyncio
    async def test_custom_header_name_used(self) -> None:
        """Should use custom header name for both request and response."""
        middleware = RequestIDMiddleware(MagicMock(), header_name="X-Trace-ID")
        request = _request({"X-Trace-ID": "trace-123"})
        call_next = AsyncMock(return_value=_response())

        with (
            patch("ecolojia.core.middleware.request_id.clear_context"),
            patch("ecolojia.core.middleware.request_id.bind_context"),
        ):
            result = await middleware.dispatch(request, call_next)

        assert result.headers["X-Trace-ID"] == "trace-123"
