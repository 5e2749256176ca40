"""Health check endpoints.

Liveness and readiness probes for Kubernetes and load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from ecolojia.core.config import Settings, get_settings
from ecolojia.schemas.enums import HealthStatus, ReadinessStatus
from ecolojia.schemas.health import HealthResponse, ReadinessResponse


router = APIRouter(tags=["Health"])

_SERVICES = {
    "cosmetic": "cosmetic_service",
    "detergent": "detergent_service",
}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Readiness check verifying both analysis services are loaded.",
    responses={503: {"description": "An analysis service is not initialized"}},
)
async def readiness_check(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReadinessResponse:
    """Check if the service is ready to handle analyses."""
    services = {
        name: (
            HealthStatus.HEALTHY
            if getattr(request.app.state, attribute, None) is not None
            else HealthStatus.UNHEALTHY
        )
        for name, attribute in _SERVICES.items()
    }
    ready = all(value == HealthStatus.HEALTHY for value in services.values())
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status=ReadinessStatus.READY if ready else ReadinessStatus.DEGRADED,
        version=settings.app.version,
        services=services,
    )
