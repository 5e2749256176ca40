"""Numeric helpers and the weighted score aggregation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from ecolojia.services.scoring.constants import MAX_SCORE, MIN_SCORE


if TYPE_CHECKING:
    from collections.abc import Mapping


_NOISE_QUANTUM = Decimal("1e-9")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going away from zero (2.5 -> 3, 0.625 -> 0.63).

    ``round()`` uses banker's rounding on the binary value, which is not
    what users expect from a displayed score.
    """
    # Snap float noise (0.6249999999999999) before the real rounding
    exact = Decimal(str(value)).quantize(_NOISE_QUANTUM, rounding=ROUND_HALF_UP)
    quantum = Decimal(1).scaleb(-digits)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    """Bound a value to ``[low, high]``."""
    return max(low, min(high, value))


def to_score(value: float) -> int:
    """Round half-up and clamp to an integer score in [0, 100]."""
    return int(clamp(round_half_up(value)))


def aggregate_score(
    sub_scores: Mapping[str, float],
    weights: Mapping[str, float],
) -> int:
    """Combine component scores with a weight vector.

    Args:
        sub_scores: Component name to score (0-100).
        weights: Component name to weight; must cover every weighted component.

    Returns:
        Weighted score rounded half-up and clamped to [0, 100].

    Raises:
        KeyError: If a weighted component has no score.
    """
    missing = set(weights) - set(sub_scores)
    if missing:
        msg = f"Missing sub-scores: {', '.join(sorted(missing))}"
        raise KeyError(msg)
    # Decimal keeps exact halves (78.5) from drifting to 78.49999
    total = sum(
        (
            Decimal(str(sub_scores[name])) * Decimal(str(weight))
            for name, weight in weights.items()
        ),
        Decimal(0),
    )
    return to_score(float(total))
