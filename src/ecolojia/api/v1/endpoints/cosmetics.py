"""Cosmetic analysis endpoint.

Provides:
- POST /cosmetics/analyze scoring a cosmetic from its INCI list
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from ecolojia.api.dependencies import get_cosmetic_service
from ecolojia.core.exceptions import BadRequestError, InternalAnalysisError
from ecolojia.observability.logging import get_logger
from ecolojia.schemas.cosmetic import (
    CosmeticAnalysisData,
    CosmeticAnalysisRequest,
    CosmeticAnalysisResponse,
)
from ecolojia.services.cosmetic import CosmeticAnalysisService  # noqa: TC001
from ecolojia.services.scoring import (
    AnalysisComputationError,
    AnalysisValidationError,
)


logger = get_logger(__name__)

router = APIRouter(tags=["Cosmetics"])


@router.post(
    "/cosmetics/analyze",
    response_model=CosmeticAnalysisResponse,
    summary="Score a cosmetic product",
    description=(
        "Scores a cosmetic from its ingredient list on safety (endocrine "
        "disruptors and irritants), efficacy (beneficial actives), allergens "
        "and formulation. Ingredients may be sent in ingredients, composition, "
        "inciList or inci, as text or as a list."
    ),
    responses={
        400: {
            "description": "No usable ingredient list",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Ingredients list is required",
                        "code": "MISSING_INGREDIENTS",
                        "requestId": "5b0f6c1e-2d7a-4a53-9a4e-9b7c3f0f2a11",
                    }
                }
            },
        },
        500: {
            "description": "Analysis failed",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Cosmetic analysis failed",
                        "code": "COSMETIC_ANALYSIS_ERROR",
                    }
                }
            },
        },
        503: {"description": "Cosmetic analysis service unavailable"},
    },
)
async def analyze_cosmetic(
    request: CosmeticAnalysisRequest,
    service: Annotated[CosmeticAnalysisService, Depends(get_cosmetic_service)],
) -> CosmeticAnalysisResponse:
    """Analyze a cosmetic product.

    Args:
        request: Product body with its ingredients.
        service: Cosmetic analysis service.

    Returns:
        The analysis wrapped in the success envelope.

    Raises:
        BadRequestError: If no ingredient list can be extracted.
        InternalAnalysisError: If the analysis itself fails.
    """
    try:
        result = service.analyze_payload(request.to_payload())
    except AnalysisValidationError as e:
        logger.warning("Rejected cosmetic analysis", code=e.code)
        raise BadRequestError(e.code, e.message) from e
    except AnalysisComputationError as e:
        raise InternalAnalysisError(
            "COSMETIC_ANALYSIS_ERROR",
            "Cosmetic analysis failed",
        ) from e

    data = CosmeticAnalysisData.model_validate(
        {
            **result.model_dump(by_alias=False),
            "product_name": request.display_name,
            "timestamp": datetime.now(UTC),
        }
    )
    return CosmeticAnalysisResponse(data=data)
