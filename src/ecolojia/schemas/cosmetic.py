"""Cosmetic analysis schemas.

This module contains the per-analyzer results of a cosmetic analysis, the
complete result and the HTTP request/response bodies.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecolojia.schemas.analysis import AnalysisResult, ProductAnalysisRequest
from ecolojia.schemas.base import AnalysisModel, APIResponse
from ecolojia.schemas.enums import (
    Complexity,
    CosmeticProductType,
    Level,
    Sustainability,
)


# =============================================================================
# Risk
# =============================================================================


class HazardMatch(AnalysisModel):
    """Endocrine disruptor found in the ingredient list."""

    name: str
    risk_level: Level
    effect: str
    source: str


class IrritantMatch(AnalysisModel):
    """Sensitive-skin irritant found in the ingredient list."""

    name: str
    effect: str
    recommendation: str


class RiskAnalysis(AnalysisModel):
    """Endocrine disruptor and irritant assessment."""

    risk_score: int = Field(..., ge=0, le=100)
    overall_risk: Level = Field(..., description="Tier from the risk ratio")
    risk_ratio: float = Field(
        ...,
        ge=0.0,
        description="Penalty points per 100 ingredients",
    )
    penalty_points: int = Field(..., ge=0)
    endocrine_disruptors: list[HazardMatch] = Field(default_factory=list)
    irritants: list[IrritantMatch] = Field(default_factory=list)


# =============================================================================
# Benefits
# =============================================================================


class ActiveIngredientMatch(AnalysisModel):
    """Beneficial active found in the ingredient list."""

    name: str
    benefit: str
    evidence_level: Level


class BenefitCategoryMatch(AnalysisModel):
    """Benefit family with the actives that provide it."""

    category: str
    ingredients: list[str]


class BenefitAnalysis(AnalysisModel):
    """Beneficial actives assessment."""

    benefit_score: int = Field(..., ge=0, le=100)
    active_ingredients: list[ActiveIngredientMatch] = Field(default_factory=list)
    benefit_categories: list[BenefitCategoryMatch] = Field(default_factory=list)


# =============================================================================
# Allergens
# =============================================================================


class AllergenMatch(AnalysisModel):
    """Fragrance allergen found in the ingredient list."""

    name: str
    prevalence: Level
    source: str


class AllergenAnalysis(AnalysisModel):
    """Allergen assessment."""

    allergen_score: int = Field(..., ge=0, le=100)
    total_allergens: int = Field(..., ge=0)
    allergen_risk: Level
    allergens: list[AllergenMatch] = Field(default_factory=list)
    sensitive_skin_warning: bool = False


# =============================================================================
# Formulation
# =============================================================================


class FormulationAnalysis(AnalysisModel):
    """Complexity and naturalness of the formula (water excluded)."""

    formulation_score: int = Field(..., ge=0, le=100)
    ingredient_count: int = Field(..., ge=0)
    complexity: Complexity
    natural_ratio: float = Field(..., ge=0.0, le=1.0)
    synthetic_ratio: float = Field(..., ge=0.0, le=1.0)
    sustainability: Sustainability


# =============================================================================
# Result
# =============================================================================


class CosmeticAnalysisResult(AnalysisResult):
    """Complete cosmetic analysis."""

    product_type: CosmeticProductType
    risk_analysis: RiskAnalysis
    benefit_analysis: BenefitAnalysis
    allergen_analysis: AllergenAnalysis
    formulation_analysis: FormulationAnalysis


# =============================================================================
# HTTP
# =============================================================================


class CosmeticAnalysisRequest(ProductAnalysisRequest):
    """Body of ``POST /cosmetics/analyze``."""

    category: str | None = Field(default=None, max_length=200)
    brand: str | None = Field(default=None, max_length=200)
    product_type: CosmeticProductType | None = Field(
        default=None,
        description="Skip product type detection",
    )


class CosmeticAnalysisData(CosmeticAnalysisResult):
    """Cosmetic result decorated for the HTTP response."""

    product_name: str | None = None
    timestamp: datetime
    source: str = "cosmetic_analysis"


class CosmeticAnalysisResponse(APIResponse):
    """Success envelope for a cosmetic analysis."""

    success: bool = True
    data: CosmeticAnalysisData
