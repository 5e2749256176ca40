"""Health check schemas.

Liveness and readiness probe bodies.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from ecolojia.schemas.base import APIResponse
from ecolojia.schemas.enums import HealthStatus, ReadinessStatus


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Service health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(APIResponse):
    """Readiness probe response with the state of each analysis service."""

    status: ReadinessStatus = Field(..., description="Overall readiness")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str = Field(..., description="Service version")
    services: dict[str, HealthStatus] = Field(
        default_factory=dict,
        description="Analysis service name to status",
    )
