"""Detergent analysis endpoint.

Provides:
- POST /detergents/analyze scoring a household detergent
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from ecolojia.api.dependencies import get_detergent_service
from ecolojia.core.exceptions import BadRequestError, InternalAnalysisError
from ecolojia.observability.logging import get_logger
from ecolojia.schemas.detergent import (
    DetergentAnalysisData,
    DetergentAnalysisRequest,
    DetergentAnalysisResponse,
)
from ecolojia.services.detergent import DetergentAnalysisService  # noqa: TC001
from ecolojia.services.scoring import (
    AnalysisComputationError,
    AnalysisValidationError,
)


logger = get_logger(__name__)

router = APIRouter(tags=["Detergents"])


@router.post(
    "/detergents/analyze",
    response_model=DetergentAnalysisResponse,
    summary="Score a detergent",
    description=(
        "Scores a household detergent on ecotoxicity, biodegradability, skin "
        "irritation and environmental footprint. Eco-labels are read from "
        "certifications and from the product name. Ingredients may be sent in "
        "ingredients, composition, inciList or inci, as text or as a list."
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
                        "error": "Detergent analysis failed",
                        "code": "DETERGENT_ANALYSIS_ERROR",
                    }
                }
            },
        },
        503: {"description": "Detergent analysis service unavailable"},
    },
)
async def analyze_detergent(
    request: DetergentAnalysisRequest,
    service: Annotated[DetergentAnalysisService, Depends(get_detergent_service)],
) -> DetergentAnalysisResponse:
    """Analyze a detergent.

    Args:
        request: Product body with its ingredients.
        service: Detergent analysis service.

    Returns:
        The analysis wrapped in the success envelope.

    Raises:
        BadRequestError: If no ingredient list can be extracted.
        InternalAnalysisError: If the analysis itself fails.
    """
    try:
        result = service.analyze_payload(request.to_payload())
    except AnalysisValidationError as e:
        logger.warning("Rejected detergent analysis", code=e.code)
        raise BadRequestError(e.code, e.message) from e
    except AnalysisComputationError as e:
        raise InternalAnalysisError(
            "DETERGENT_ANALYSIS_ERROR",
            "Detergent analysis failed",
        ) from e

    data = DetergentAnalysisData.model_validate(
        {
            **result.model_dump(by_alias=False),
            "product_name": request.display_name,
            "timestamp": datetime.now(UTC),
        }
    )
    return DetergentAnalysisResponse(data=data)
