"""Detergent analysis schemas.

This module contains the per-analyzer results of a detergent analysis,
detected issues, certifications, insights and the HTTP bodies.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecolojia.schemas.analysis import AnalysisResult, ProductAnalysisRequest
from ecolojia.schemas.base import AnalysisModel, APIResponse
from ecolojia.schemas.enums import (
    Complexity,
    Credibility,
    DetergentProductType,
    IrritationLevel,
    IssueSeverity,
    Level,
    SkinSafety,
    Sustainability,
    ToxicityLevel,
)


# =============================================================================
# Analyzer Results
# =============================================================================


class HazardPenalty(AnalysisModel):
    """Points removed from ecotoxicity by one hazardous ingredient."""

    ingredient: str
    penalty: int = Field(..., ge=0)
    toxicity: ToxicityLevel | None = None
    source: str


class EcotoxicityAnalysis(AnalysisModel):
    """Toxicity of the formula for aquatic life."""

    score: int = Field(..., ge=0, le=100)
    overall_risk: Level
    risk_ratio: float = Field(..., ge=0.0)
    penalties: list[HazardPenalty] = Field(default_factory=list)
    issues: list[str] = Field(default_factory=list)


class BiodegradabilityAnalysis(AnalysisModel):
    """Share of biodegradable ingredients and the resulting score."""

    score: int = Field(..., ge=0, le=100)
    biodegradable_ratio: float = Field(..., ge=0.0, le=1.0)
    biodegradable: list[str] = Field(default_factory=list)
    non_biodegradable: list[str] = Field(default_factory=list)


class IrritantLevelMatch(AnalysisModel):
    """Irritating ingredient with its irritation level."""

    ingredient: str
    level: IrritationLevel


class IrritationAnalysis(AnalysisModel):
    """Skin irritation and allergen assessment."""

    score: int = Field(..., ge=0, le=100)
    skin_safety: SkinSafety
    allergens: list[str] = Field(default_factory=list)
    irritants: list[IrritantLevelMatch] = Field(default_factory=list)
    gentle_ingredients: list[str] = Field(default_factory=list)


class CertificationMatch(AnalysisModel):
    """Eco-certification detected on the product."""

    name: str
    bonus: int = Field(..., ge=0)
    credibility: Credibility


class EnvironmentalAnalysis(AnalysisModel):
    """Overall environmental footprint (water excluded)."""

    score: int = Field(..., ge=0, le=100)
    ingredient_count: int = Field(..., ge=0)
    complexity: Complexity
    natural_ratio: float = Field(..., ge=0.0, le=1.0)
    synthetic_ratio: float = Field(..., ge=0.0, le=1.0)
    environmental_hazards: list[str] = Field(default_factory=list)
    eco_ingredients: list[str] = Field(default_factory=list)
    certification_bonus: int = Field(default=0, ge=0)
    sustainability: Sustainability


# =============================================================================
# Recommendations
# =============================================================================


class DetectedIssue(AnalysisModel):
    """Serious problem raised by a single ingredient."""

    severity: IssueSeverity
    ingredient: str
    issue: str
    source: str


class Insight(AnalysisModel):
    """Explanatory note attached to a detergent result."""

    kind: str
    title: str
    content: str
    scientific_backing: str
    source: str


# =============================================================================
# Result
# =============================================================================


class DetergentAnalysisResult(AnalysisResult):
    """Complete detergent analysis."""

    product_type: DetergentProductType
    ecotoxicity_analysis: EcotoxicityAnalysis
    biodegradability_analysis: BiodegradabilityAnalysis
    irritation_analysis: IrritationAnalysis
    environmental_analysis: EnvironmentalAnalysis
    detected_issues: list[DetectedIssue] = Field(default_factory=list)
    certifications_detected: list[CertificationMatch] = Field(default_factory=list)
    insights: list[Insight] = Field(default_factory=list)
    methodology: str


# =============================================================================
# HTTP
# =============================================================================


class DetergentAnalysisRequest(ProductAnalysisRequest):
    """Body of ``POST /detergents/analyze``."""

    product_type: DetergentProductType | None = Field(
        default=None,
        description="Skip product type detection",
    )


class DetergentAnalysisData(DetergentAnalysisResult):
    """Detergent result decorated for the HTTP response."""

    product_name: str | None = None
    timestamp: datetime
    source: str = "detergent_analysis"


class DetergentAnalysisResponse(APIResponse):
    """Success envelope for a detergent analysis."""

    success: bool = True
    data: DetergentAnalysisData
