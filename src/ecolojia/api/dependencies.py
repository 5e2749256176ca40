"""FastAPI dependencies for service access.

The analysis services are built during application startup and stored in
``app.state``; these dependencies hand them to the route handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from ecolojia.services.cosmetic import CosmeticAnalysisService
    from ecolojia.services.detergent import DetergentAnalysisService


async def get_cosmetic_service(request: Request) -> CosmeticAnalysisService:
    """Get the cosmetic analysis service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: CosmeticAnalysisService | None = getattr(
        request.app.state, "cosmetic_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cosmetic analysis service not available",
        )
    return service


async def get_detergent_service(request: Request) -> DetergentAnalysisService:
    """Get the detergent analysis service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: DetergentAnalysisService | None = getattr(
        request.app.state, "detergent_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Detergent analysis service not available",
        )
    return service
