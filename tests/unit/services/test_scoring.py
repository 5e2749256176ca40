"""Unit tests for the shared scoring helpers.

Tests cover:
- Half-up rounding and clamping
- Weighted aggregation
- Risk policy tiers
- Scoring profile validation
- Formulation helpers
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ecolojia.schemas.enums import Complexity, Level, ProductCategory, Sustainability
from ecolojia.services.scoring import (
    COSMETIC_SCORING,
    DETERGENT_SCORING,
    RiskPolicy,
    ScoringProfile,
    aggregate_score,
    clamp,
    round_half_up,
    to_score,
)
from ecolojia.services.scoring.formulation import (
    complexity_adjustment,
    complexity_label,
    contains_marker,
    share,
    sustainability_label,
)


pytestmark = pytest.mark.unit


# =============================================================================
# Aggregator Tests
# =============================================================================


class TestRounding:
    """Tests for round_half_up, clamp and to_score."""

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [
            (2.5, 0, 3.0),
            (78.5, 0, 79.0),
            (0.625, 2, 0.63),
            (0.6249999999999999, 2, 0.63),
            (1.234, 2, 1.23),
        ],
    )
    def test_round_half_up(self, value: float, digits: int, expected: float) -> None:
        """Should round halves up, ignoring float noise."""
        assert round_half_up(value, digits) == expected

    def test_clamp(self) -> None:
        """Should bound values to the score range by default."""
        assert clamp(-5) == 0
        assert clamp(130) == 100
        assert clamp(0.7, 0.0, 1.0) == 0.7

    def test_to_score(self) -> None:
        """Should produce an integer within [0, 100]."""
        assert to_score(-40) == 0
        assert to_score(130) == 100
        assert to_score(45.5) == 46
        assert isinstance(to_score(45.5), int)


class TestAggregateScore:
    """Tests for aggregate_score."""

    def test_weighted_sum(self) -> None:
        """Should combine sub-scores with the cosmetic weights."""
        score = aggregate_score(
            {"safety": 100, "efficacy": 30, "allergens": 100, "formulation": 100},
            COSMETIC_SCORING.weights,
        )

        assert score == 79

    def test_exact_half_rounds_up(self) -> None:
        """Should round 25.75 to 26 and 78.5 to 79."""
        assert (
            aggregate_score(
                {
                    "ecotoxicity": 0,
                    "biodegradability": 0,
                    "irritation": 35,
                    "environmental": 85,
                },
                DETERGENT_SCORING.weights,
            )
            == 26
        )
        assert aggregate_score({"a": 78.5}, {"a": 1.0}) == 79

    def test_missing_component_raises(self) -> None:
        """Should refuse to aggregate without every weighted component."""
        with pytest.raises(KeyError, match="efficacy"):
            aggregate_score(
                {"safety": 100, "allergens": 100, "formulation": 100},
                COSMETIC_SCORING.weights,
            )

    def test_extra_component_ignored(self) -> None:
        """Should ignore sub-scores that carry no weight."""
        assert aggregate_score({"a": 50, "b": 0}, {"a": 1.0}) == 50


# =============================================================================
# Profile Tests
# =============================================================================


class TestRiskPolicy:
    """Tests for RiskPolicy."""

    def test_default_thresholds(self) -> None:
        """Should default to 20 (high) and 10 (medium)."""
        policy = RiskPolicy()

        assert policy.high_threshold == 20
        assert policy.medium_threshold == 10

    @pytest.mark.parametrize(
        ("points", "count", "expected"),
        [
            (0, 5, Level.LOW),
            (10, 100, Level.LOW),
            (11, 100, Level.MEDIUM),
            (20, 100, Level.MEDIUM),
            (21, 100, Level.HIGH),
            (15, 4, Level.HIGH),
        ],
    )
    def test_tier(self, points: int, count: int, expected: Level) -> None:
        """Should tier strictly above each threshold."""
        assert RiskPolicy().tier(points, count) == expected

    def test_ratio_without_tokens(self) -> None:
        """Should return a zero ratio for an empty list."""
        assert RiskPolicy().ratio(30, 0) == 0.0

    def test_rejects_inverted_thresholds(self) -> None:
        """Should refuse a medium threshold above the high one."""
        with pytest.raises(ValidationError):
            RiskPolicy(high_threshold=10, medium_threshold=20)

    def test_frozen(self) -> None:
        """Should not allow mutation."""
        policy = RiskPolicy()

        with pytest.raises(ValidationError):
            policy.high_threshold = 50  # type: ignore[misc]


class TestScoringProfile:
    """Tests for ScoringProfile."""

    def test_default_profiles(self) -> None:
        """Should expose the four components of each category."""
        assert COSMETIC_SCORING.components == (
            "safety",
            "efficacy",
            "allergens",
            "formulation",
        )
        assert DETERGENT_SCORING.components == (
            "ecotoxicity",
            "biodegradability",
            "irritation",
            "environmental",
        )

    def test_rejects_weights_not_summing_to_one(self) -> None:
        """Should validate the weight sum."""
        with pytest.raises(ValidationError, match="sum to 1"):
            ScoringProfile(
                category=ProductCategory.COSMETIC,
                weights={"safety": 0.5, "efficacy": 0.3},
            )

    def test_rejects_negative_weight(self) -> None:
        """Should validate each weight is non-negative."""
        with pytest.raises(ValidationError):
            ScoringProfile(
                category=ProductCategory.COSMETIC,
                weights={"safety": 1.2, "efficacy": -0.2},
            )

    def test_rejects_empty_weights(self) -> None:
        """Should require at least one component."""
        with pytest.raises(ValidationError):
            ScoringProfile(category=ProductCategory.DETERGENT, weights={})

    def test_weight_map_is_read_only(self) -> None:
        """Should expose an immutable view of the weights."""
        weights = DETERGENT_SCORING.weight_map()

        with pytest.raises(TypeError):
            weights["ecotoxicity"] = 1.0  # type: ignore[index]


# =============================================================================
# Formulation Helper Tests
# =============================================================================


class TestFormulationHelpers:
    """Tests for the formulation helpers."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, 5), (10, 5), (11, 0), (15, 0), (16, -8), (25, -8), (26, -15)],
    )
    def test_complexity_adjustment(self, count: int, expected: int) -> None:
        """Should reward short formulas and penalize long ones."""
        assert complexity_adjustment(count) == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (15, Complexity.SIMPLE),
            (16, Complexity.MODERATE),
            (30, Complexity.MODERATE),
            (31, Complexity.COMPLEX),
        ],
    )
    def test_complexity_label(self, count: int, expected: Complexity) -> None:
        """Should label complexity from the ingredient count."""
        assert complexity_label(count) == expected

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (81, Sustainability.EXCELLENT),
            (80, Sustainability.GOOD),
            (61, Sustainability.GOOD),
            (60, Sustainability.NEEDS_IMPROVEMENT),
        ],
    )
    def test_sustainability_label(self, score: int, expected: Sustainability) -> None:
        """Should band scores strictly above 80 and 60."""
        assert sustainability_label(score) == expected

    def test_contains_marker(self) -> None:
        """Should match markers as substrings."""
        assert contains_marker("ALOE BARBADENSIS LEAF EXTRACT", ("EXTRACT",))
        assert not contains_marker("GLYCERIN", ("EXTRACT", "OIL"))

    def test_share(self) -> None:
        """Should compute the fraction of matching tokens."""
        assert share(("A", "B", "AB", "C"), lambda t: "A" in t) == 0.5
        assert share((), lambda t: True) == 0.0
