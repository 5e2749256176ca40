"""Formulation helpers shared by the cosmetic and detergent analyzers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ecolojia.schemas.enums import Complexity, Sustainability
from ecolojia.services.scoring.constants import (
    COMPLEX_LABEL_COUNT,
    COMPLEXITY_HIGH_COUNT,
    COMPLEXITY_HIGH_PENALTY,
    COMPLEXITY_LOW_BONUS,
    COMPLEXITY_LOW_COUNT,
    COMPLEXITY_MEDIUM_COUNT,
    COMPLEXITY_MEDIUM_PENALTY,
    MODERATE_LABEL_COUNT,
    SUSTAINABILITY_EXCELLENT,
    SUSTAINABILITY_GOOD,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def complexity_adjustment(count: int) -> int:
    """Points added to a formulation score for its ingredient count.

    Short formulas are rewarded, long ones penalized; 11 to 15 ingredients
    are neutral.
    """
    if count > COMPLEXITY_HIGH_COUNT:
        return COMPLEXITY_HIGH_PENALTY
    if count > COMPLEXITY_MEDIUM_COUNT:
        return COMPLEXITY_MEDIUM_PENALTY
    if count <= COMPLEXITY_LOW_COUNT:
        return COMPLEXITY_LOW_BONUS
    return 0


def complexity_label(count: int) -> Complexity:
    """Qualitative complexity from the ingredient count."""
    if count > COMPLEX_LABEL_COUNT:
        return Complexity.COMPLEX
    if count > MODERATE_LABEL_COUNT:
        return Complexity.MODERATE
    return Complexity.SIMPLE


def sustainability_label(score: int) -> Sustainability:
    """Qualitative band for a formulation or environmental score."""
    if score > SUSTAINABILITY_EXCELLENT:
        return Sustainability.EXCELLENT
    if score > SUSTAINABILITY_GOOD:
        return Sustainability.GOOD
    return Sustainability.NEEDS_IMPROVEMENT


def contains_marker(token: str, markers: Sequence[str]) -> bool:
    """Whether any marker is a substring of the token."""
    return any(marker in token for marker in markers)


def share(tokens: Sequence[str], predicate: Callable[[str], bool]) -> float:
    """Fraction of tokens matching a predicate (0.0 for no tokens)."""
    if not tokens:
        return 0.0
    return sum(1 for token in tokens if predicate(token)) / len(tokens)
