"""Pydantic schemas for request/response validation.

This module exports the schema classes of the Ecolojia scoring API.
"""

# Shared analysis models
from ecolojia.schemas.analysis import (
    AnalysisMeta,
    AnalysisResult,
    Alternative,
    ProductAnalysisRequest,
    SubScore,
)

# Base classes
from ecolojia.schemas.base import AnalysisModel, APIRequest, APIResponse

# Cosmetic schemas
from ecolojia.schemas.cosmetic import (
    CosmeticAnalysisData,
    CosmeticAnalysisRequest,
    CosmeticAnalysisResponse,
    CosmeticAnalysisResult,
)

# Detergent schemas
from ecolojia.schemas.detergent import (
    DetergentAnalysisData,
    DetergentAnalysisRequest,
    DetergentAnalysisResponse,
    DetergentAnalysisResult,
)

# Enums
from ecolojia.schemas.enums import (
    ConfidenceLabel,
    CosmeticProductType,
    DetergentProductType,
    HealthStatus,
    Level,
    ProductCategory,
    ReadinessStatus,
)

# Health schemas
from ecolojia.schemas.health import HealthResponse, ReadinessResponse


__all__ = [
    "APIRequest",
    "APIResponse",
    "Alternative",
    "AnalysisMeta",
    "AnalysisModel",
    "AnalysisResult",
    "ConfidenceLabel",
    "CosmeticAnalysisData",
    "CosmeticAnalysisRequest",
    "CosmeticAnalysisResponse",
    "CosmeticAnalysisResult",
    "CosmeticProductType",
    "DetergentAnalysisData",
    "DetergentAnalysisRequest",
    "DetergentAnalysisResponse",
    "DetergentAnalysisResult",
    "DetergentProductType",
    "HealthResponse",
    "HealthStatus",
    "Level",
    "ProductAnalysisRequest",
    "ReadinessResponse",
    "ReadinessStatus",
    "SubScore",
]
