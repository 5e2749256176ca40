"""Confidence calculation shared by every product category.

Confidence measures how much data backed a score, not how good the product
is. One function computes it; the differences between food, cosmetics and
detergents live in ``ConfidenceProfile`` objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ecolojia.schemas.enums import ConfidenceLabel, ProductCategory
from ecolojia.services.confidence.constants import (
    BASE_CONFIDENCE,
    COMPOSITION_BONUS,
    COSMETIC_BRAND_BONUS,
    COSMETIC_CERTIFICATION_BONUS,
    COSMETIC_CERTIFICATION_CAP,
    COSMETIC_FULL_LIST_BONUS,
    COSMETIC_FULL_LIST_MIN,
    COSMETIC_TYPE_BONUS,
    DETERGENT_ECOLABEL_BONUS,
    DETERGENT_ECOLABEL_CAP,
    DETERGENT_TYPE_BONUS,
    FOOD_NUTRITION_BONUS,
    INGREDIENT_COUNT_BONUSES,
    LABEL_MODERATE,
    LABEL_RELIABLE,
    LABEL_VERY_RELIABLE,
    NAME_BONUS,
    NAME_KEYWORD_BONUS,
    NAME_KEYWORD_CAP,
    NAME_MIN_LENGTH,
    PUBLISHABLE_THRESHOLD,
    RECOGNITION_WEIGHT,
    UNRECOGNIZED_CAP,
)
from ecolojia.services.reference.keywords import CATEGORY_NAME_KEYWORDS
from ecolojia.services.scoring.aggregator import clamp, round_half_up


@dataclass(frozen=True, slots=True)
class ConfidenceFactors:
    """Data completeness signals gathered during one analysis."""

    ingredients_analyzed: int
    ingredients_recognized: int
    has_composition: bool = True
    product_name: str | None = None
    product_type_recognized: bool = False
    brand_known: bool = False
    certification_count: int = 0
    has_nutrition_facts: bool = False


@dataclass(frozen=True, slots=True)
class ConfidenceProfile:
    """Per-category bonuses added on top of the shared signals.

    A bonus of zero switches the signal off for that category.
    """

    category: ProductCategory
    name_keywords: frozenset[str] = field(default_factory=frozenset)
    full_list_min: int = 0
    full_list_bonus: float = 0.0
    product_type_bonus: float = 0.0
    brand_bonus: float = 0.0
    certification_bonus: float = 0.0
    certification_cap: float = 0.0
    nutrition_bonus: float = 0.0


FOOD_CONFIDENCE = ConfidenceProfile(
    category=ProductCategory.FOOD,
    name_keywords=CATEGORY_NAME_KEYWORDS[ProductCategory.FOOD],
    nutrition_bonus=FOOD_NUTRITION_BONUS,
)

COSMETIC_CONFIDENCE = ConfidenceProfile(
    category=ProductCategory.COSMETIC,
    name_keywords=CATEGORY_NAME_KEYWORDS[ProductCategory.COSMETIC],
    full_list_min=COSMETIC_FULL_LIST_MIN,
    full_list_bonus=COSMETIC_FULL_LIST_BONUS,
    product_type_bonus=COSMETIC_TYPE_BONUS,
    brand_bonus=COSMETIC_BRAND_BONUS,
    certification_bonus=COSMETIC_CERTIFICATION_BONUS,
    certification_cap=COSMETIC_CERTIFICATION_CAP,
)

DETERGENT_CONFIDENCE = ConfidenceProfile(
    category=ProductCategory.DETERGENT,
    name_keywords=CATEGORY_NAME_KEYWORDS[ProductCategory.DETERGENT],
    product_type_bonus=DETERGENT_TYPE_BONUS,
    certification_bonus=DETERGENT_ECOLABEL_BONUS,
    certification_cap=DETERGENT_ECOLABEL_CAP,
)


def calculate_confidence(
    factors: ConfidenceFactors,
    profile: ConfidenceProfile,
) -> float:
    """Compute the confidence of an analysis.

    Args:
        factors: Signals collected while analyzing the product.
        profile: Category-specific bonuses.

    Returns:
        Confidence in [0, 1], rounded half-up to two decimals.
    """
    confidence = BASE_CONFIDENCE

    if factors.has_composition:
        confidence += COMPOSITION_BONUS

    for min_count, bonus in INGREDIENT_COUNT_BONUSES:
        if factors.ingredients_analyzed >= min_count:
            confidence += bonus
            break

    confidence += _name_bonus(factors.product_name, profile.name_keywords)

    if factors.ingredients_analyzed > 0:
        recognized = min(factors.ingredients_recognized, factors.ingredients_analyzed)
        confidence += RECOGNITION_WEIGHT * recognized / factors.ingredients_analyzed

    if profile.full_list_min and factors.ingredients_analyzed >= profile.full_list_min:
        confidence += profile.full_list_bonus
    if factors.product_type_recognized:
        confidence += profile.product_type_bonus
    if factors.brand_known:
        confidence += profile.brand_bonus
    confidence += min(
        factors.certification_count * profile.certification_bonus,
        profile.certification_cap,
    )
    if factors.has_nutrition_facts:
        confidence += profile.nutrition_bonus

    if factors.ingredients_recognized <= 0:
        confidence = min(confidence, UNRECOGNIZED_CAP)

    return round_half_up(clamp(confidence, 0.0, 1.0), 2)


def is_publishable(confidence: float) -> bool:
    """Whether a score is reliable enough to be shown to users."""
    return confidence >= PUBLISHABLE_THRESHOLD


def confidence_label(confidence: float) -> ConfidenceLabel:
    """Map a confidence value to its display band."""
    if confidence >= LABEL_VERY_RELIABLE:
        return ConfidenceLabel.VERY_RELIABLE
    if confidence >= LABEL_RELIABLE:
        return ConfidenceLabel.RELIABLE
    if confidence >= LABEL_MODERATE:
        return ConfidenceLabel.MODERATE
    return ConfidenceLabel.UNRELIABLE


def _name_bonus(product_name: str | None, keywords: frozenset[str]) -> float:
    if not product_name:
        return 0.0
    name = product_name.strip().lower()
    if len(name) <= NAME_MIN_LENGTH:
        return 0.0
    matches = sum(1 for keyword in keywords if keyword in name)
    return NAME_BONUS + min(matches * NAME_KEYWORD_BONUS, NAME_KEYWORD_CAP)
