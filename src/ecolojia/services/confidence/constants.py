"""Constants for confidence calculation."""

from __future__ import annotations

from typing import Final


# =============================================================================
# Shared Signals
# =============================================================================

BASE_CONFIDENCE: Final[float] = 0.2
COMPOSITION_BONUS: Final[float] = 0.1

# (minimum ingredient count, bonus); first matching row wins
INGREDIENT_COUNT_BONUSES: Final[tuple[tuple[int, float], ...]] = (
    (5, 0.1),
    (3, 0.07),
    (1, 0.04),
)

NAME_MIN_LENGTH: Final[int] = 3
NAME_BONUS: Final[float] = 0.05
NAME_KEYWORD_BONUS: Final[float] = 0.025
NAME_KEYWORD_CAP: Final[float] = 0.05

RECOGNITION_WEIGHT: Final[float] = 0.3

# Ceiling when not a single ingredient matched the reference tables
UNRECOGNIZED_CAP: Final[float] = 0.35


# =============================================================================
# Category Signals
# =============================================================================

COSMETIC_FULL_LIST_MIN: Final[int] = 5
COSMETIC_FULL_LIST_BONUS: Final[float] = 0.05
COSMETIC_TYPE_BONUS: Final[float] = 0.05
COSMETIC_BRAND_BONUS: Final[float] = 0.05
COSMETIC_CERTIFICATION_BONUS: Final[float] = 0.025
COSMETIC_CERTIFICATION_CAP: Final[float] = 0.05

DETERGENT_TYPE_BONUS: Final[float] = 0.05
DETERGENT_ECOLABEL_BONUS: Final[float] = 0.05
DETERGENT_ECOLABEL_CAP: Final[float] = 0.1

FOOD_NUTRITION_BONUS: Final[float] = 0.1


# =============================================================================
# Publication and Labels
# =============================================================================

PUBLISHABLE_THRESHOLD: Final[float] = 0.4

LABEL_VERY_RELIABLE: Final[float] = 0.8
LABEL_RELIABLE: Final[float] = 0.6
LABEL_MODERATE: Final[float] = 0.4
