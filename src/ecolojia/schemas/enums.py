"""Enumeration types for Ecolojia schemas.

This module contains all enum definitions used across the analysis
results and the API schemas.
"""

from __future__ import annotations

from enum import StrEnum


class ProductCategory(StrEnum):
    """Product families the engine knows how to score."""

    FOOD = "food"
    COSMETIC = "cosmetic"
    DETERGENT = "detergent"


class Level(StrEnum):
    """Three-tier level used for risk, prevalence and evidence."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ToxicityLevel(StrEnum):
    """Toxicity rating of a detergent hazard."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class IrritationLevel(StrEnum):
    """Skin irritation rating of a detergent hazard."""

    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ConfidenceLabel(StrEnum):
    """Human readable confidence band."""

    VERY_RELIABLE = "Très fiable"
    RELIABLE = "Fiable"
    MODERATE = "Modérément fiable"
    UNRELIABLE = "Peu fiable"


class Complexity(StrEnum):
    """Formulation complexity derived from the ingredient count."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class Sustainability(StrEnum):
    """Formulation/environmental quality band."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


class SkinSafety(StrEnum):
    """Detergent skin safety band derived from the irritation score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class IssueSeverity(StrEnum):
    """Severity of a detected detergent issue."""

    CRITICAL = "critical"
    HIGH = "high"


class Credibility(StrEnum):
    """Credibility of an eco-certification."""

    MEDIUM = "medium"
    HIGH = "high"


class CosmeticProductType(StrEnum):
    """Cosmetic product families."""

    SKINCARE = "skincare"
    HAIRCARE = "haircare"
    MAKEUP = "makeup"
    GENERAL = "general"


class DetergentProductType(StrEnum):
    """Household detergent families."""

    LAUNDRY = "laundry"
    DISHWASHING = "dishwashing"
    ALL_PURPOSE = "all_purpose"
    SOAP = "soap"
    GENERAL = "general"


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ReadinessStatus(StrEnum):
    """Readiness probe status values."""

    READY = "ready"
    DEGRADED = "degraded"
