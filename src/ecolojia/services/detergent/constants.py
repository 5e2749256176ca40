"""Constants for detergent analysis."""

from __future__ import annotations

from typing import Final

from ecolojia.schemas.enums import IrritationLevel


# =============================================================================
# Biodegradability
# =============================================================================

NON_BIODEGRADABLE_PENALTY: Final[int] = 20
# Eco ingredient bonus is divided by this before being added
BIODEGRADABLE_BONUS_DIVISOR: Final[int] = 2
# Ratio used when no ingredient has a known biodegradability
UNKNOWN_BIODEGRADABLE_RATIO: Final[float] = 0.5


# =============================================================================
# Irritation
# =============================================================================

ALLERGEN_PENALTY: Final[int] = 15
IRRITATION_PENALTIES: Final[dict[IrritationLevel, int]] = {
    IrritationLevel.SEVERE: 25,
    IrritationLevel.MODERATE: 15,
    IrritationLevel.MILD: 5,
    IrritationLevel.NONE: 0,
}
GENTLE_BONUS: Final[int] = 5

SKIN_SAFETY_EXCELLENT: Final[int] = 80
SKIN_SAFETY_GOOD: Final[int] = 60
SKIN_SAFETY_MODERATE: Final[int] = 40


# =============================================================================
# Environmental
# =============================================================================

ENVIRONMENTAL_HAZARD_PENALTY: Final[int] = 20
ECO_BONUS_DIVISOR: Final[int] = 3
CERTIFICATION_BONUS_DIVISOR: Final[int] = 2
CERTIFICATION_BONUS_CAP: Final[int] = 25


# =============================================================================
# Recommendations
# =============================================================================

ALTERNATIVE_DIY_SCORE: Final[int] = 80
ALTERNATIVE_ECO_SCORE: Final[int] = 60

INSIGHT_HEALTH_ALERT_SCORE: Final[int] = 40
INSIGHT_IMPROVEMENT_SCORE: Final[int] = 70
INSIGHT_BIODEGRADABILITY_SCORE: Final[int] = 60

MODULES_ACTIVE: Final[tuple[str, ...]] = (
    "ecotoxicity",
    "biodegradability",
    "irritation",
    "environmental",
)
