"""Scoring policy objects.

A ``ScoringProfile`` carries the weight vector of one product category and
a ``RiskPolicy`` turns penalty points into a qualitative risk tier. Both
have defaults and can be rebuilt from settings.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ecolojia.schemas.enums import Level, ProductCategory
from ecolojia.services.scoring.constants import (
    COSMETIC_WEIGHTS,
    DETERGENT_WEIGHTS,
    RISK_RATIO_HIGH,
    RISK_RATIO_MEDIUM,
    WEIGHT_SUM_TOLERANCE,
)


if TYPE_CHECKING:
    from collections.abc import Mapping


class RiskPolicy(BaseModel):
    """Thresholds on the risk ratio (penalty points per 100 ingredients)."""

    model_config = ConfigDict(frozen=True)

    high_threshold: float = Field(default=RISK_RATIO_HIGH, gt=0)
    medium_threshold: float = Field(default=RISK_RATIO_MEDIUM, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> RiskPolicy:
        if self.medium_threshold > self.high_threshold:
            msg = "medium_threshold must not exceed high_threshold"
            raise ValueError(msg)
        return self

    def ratio(self, points: float, token_count: int) -> float:
        """Penalty points relative to the number of ingredients, in percent."""
        if token_count <= 0:
            return 0.0
        return points / token_count * 100

    def tier(self, points: float, token_count: int) -> Level:
        """Classify penalty points into low, medium or high risk."""
        ratio = self.ratio(points, token_count)
        if ratio > self.high_threshold:
            return Level.HIGH
        if ratio > self.medium_threshold:
            return Level.MEDIUM
        return Level.LOW


class ScoringProfile(BaseModel):
    """Weight vector applied to the breakdown of one product category."""

    model_config = ConfigDict(frozen=True)

    category: ProductCategory
    weights: dict[str, float]

    @field_validator("weights")
    @classmethod
    def _weights_sum_to_one(cls, value: dict[str, float]) -> dict[str, float]:
        if not value:
            msg = "weights must not be empty"
            raise ValueError(msg)
        if any(weight < 0 for weight in value.values()):
            msg = "weights must be non-negative"
            raise ValueError(msg)
        total = sum(value.values())
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            msg = f"weights must sum to 1, got {total}"
            raise ValueError(msg)
        return value

    @property
    def components(self) -> tuple[str, ...]:
        """Component names in declaration order."""
        return tuple(self.weights)

    def weight_map(self) -> Mapping[str, float]:
        """Read-only view of the weights."""
        return MappingProxyType(self.weights)


COSMETIC_SCORING = ScoringProfile(
    category=ProductCategory.COSMETIC,
    weights=COSMETIC_WEIGHTS,
)
DETERGENT_SCORING = ScoringProfile(
    category=ProductCategory.DETERGENT,
    weights=DETERGENT_WEIGHTS,
)
DEFAULT_RISK_POLICY = RiskPolicy()
