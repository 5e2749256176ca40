"""Constants for score aggregation."""

from __future__ import annotations

from typing import Final


# Score bounds
MIN_SCORE: Final[int] = 0
MAX_SCORE: Final[int] = 100

# Risk ratio thresholds (penalty points per 100 ingredients)
RISK_RATIO_HIGH: Final[float] = 20.0
RISK_RATIO_MEDIUM: Final[float] = 10.0

# Allowed drift when checking that a weight vector sums to 1
WEIGHT_SUM_TOLERANCE: Final[float] = 1e-6

# Component weights
COSMETIC_WEIGHTS: Final[dict[str, float]] = {
    "safety": 0.4,
    "efficacy": 0.3,
    "allergens": 0.2,
    "formulation": 0.1,
}
DETERGENT_WEIGHTS: Final[dict[str, float]] = {
    "ecotoxicity": 0.30,
    "biodegradability": 0.25,
    "irritation": 0.25,
    "environmental": 0.20,
}

# Complexity adjustment on the water-free ingredient count
COMPLEXITY_HIGH_COUNT: Final[int] = 25
COMPLEXITY_MEDIUM_COUNT: Final[int] = 15
COMPLEXITY_LOW_COUNT: Final[int] = 10
COMPLEXITY_HIGH_PENALTY: Final[int] = -15
COMPLEXITY_MEDIUM_PENALTY: Final[int] = -8
COMPLEXITY_LOW_BONUS: Final[int] = 5
NATURAL_RATIO_WEIGHT: Final[int] = 20

# Complexity label thresholds
COMPLEX_LABEL_COUNT: Final[int] = 30
MODERATE_LABEL_COUNT: Final[int] = 15

# Sustainability label thresholds
SUSTAINABILITY_EXCELLENT: Final[int] = 80
SUSTAINABILITY_GOOD: Final[int] = 60
