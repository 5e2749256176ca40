"""Constants for cosmetic analysis."""

from __future__ import annotations

from typing import Final

from ecolojia.schemas.enums import Level


# Penalty points per endocrine disruptor, by risk level
DISRUPTOR_PENALTIES: Final[dict[Level, int]] = {
    Level.HIGH: 15,
    Level.MEDIUM: 8,
    Level.LOW: 3,
}
IRRITANT_PENALTY: Final[int] = 5

# Bonus points per beneficial active, by evidence level
BENEFIT_BONUSES: Final[dict[Level, int]] = {
    Level.HIGH: 10,
    Level.MEDIUM: 6,
    Level.LOW: 3,
}

# Penalty points per allergen, by prevalence
ALLERGEN_PENALTIES: Final[dict[Level, int]] = {
    Level.HIGH: 12,
    Level.MEDIUM: 8,
    Level.LOW: 4,
}
ALLERGEN_HIGH_COUNT: Final[int] = 3
ALLERGEN_MEDIUM_COUNT: Final[int] = 2
# Warn sensitive skin from this many high-prevalence allergens
SENSITIVE_SKIN_HIGH_PREVALENCE: Final[int] = 2

# Alternatives
HYPOALLERGENIC_ALLERGEN_COUNT: Final[int] = 2
ORGANIC_NATURAL_RATIO: Final[float] = 0.3

MODULES_ACTIVE: Final[tuple[str, ...]] = (
    "risk",
    "benefits",
    "allergens",
    "formulation",
)
