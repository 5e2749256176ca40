"""Unit tests for API dependencies.

Tests cover:
- Service lookup on app state
- 503 when a service is not initialized
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from ecolojia.api.dependencies import get_cosmetic_service, get_detergent_service


pytestmark = pytest.mark.unit


def _request(**state: object) -> MagicMock:
    request = MagicMock()
    request.app.state = SimpleNamespace(**state)
    return request


class TestServiceDependencies:
    """Tests for get_cosmetic_service and get_detergent_service."""

    @pytest.mark.asyncio
    async def test_returns_services(self) -> None:
        """Should return the services stored on app state."""
        cosmetic, detergent = MagicMock(), MagicMock()
        request = _request(cosmetic_service=cosmetic, detergent_service=detergent)

        assert await get_cosmetic_service(request) is cosmetic
        assert await get_detergent_service(request) is detergent

    @pytest.mark.asyncio
    async def test_cosmetic_unavailable(self) -> None:
        """Should raise 503 when the cosmetic service is missing."""
        with pytest.raises(HTTPException) as exc_info:
            await get_cosmetic_service(_request())

        assert exc_info.value.status_code == 503
        assert exc_info.value.detail == "Cosmetic analysis service not available"

    @pytest.mark.asyncio
    async def test_detergent_unavailable_after_shutdown(self) -> None:
        """Should raise 503 once shutdown has released the service."""
        with pytest.raises(HTTPException) as exc_info:
            await get_detergent_service(_request(detergent_service=None))

        assert exc_info.value.status_code == 503
