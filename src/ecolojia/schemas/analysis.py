"""Analysis result schemas shared by every product category.

This module contains the score breakdown, metadata and recommendation
models that both the cosmetic and the detergent results are built from.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from ecolojia.schemas.base import AnalysisModel, APIRequest
from ecolojia.schemas.enums import ConfidenceLabel


class SubScore(AnalysisModel):
    """One weighted component of the overall score."""

    score: int = Field(..., ge=0, le=100, description="Component score (0-100)")
    details: str = Field(default="", description="Short summary of the component")


class AnalysisMeta(AnalysisModel):
    """Bookkeeping about one analysis run."""

    ingredients_analyzed: int = Field(
        ...,
        ge=0,
        description="Number of normalized ingredient tokens",
    )
    ingredients_recognized: int = Field(
        ...,
        ge=0,
        description="Tokens found in at least one reference table",
    )
    processing_time_ms: int = Field(
        default=0,
        ge=0,
        description="Wall-clock analysis time in milliseconds",
    )
    sources: list[str] = Field(
        default_factory=list,
        description="Reference databases the tables were built from",
    )
    modules_active: list[str] = Field(
        default_factory=list,
        description="Analyzers that contributed to the score",
    )

    @model_validator(mode="after")
    def _recognized_within_analyzed(self) -> AnalysisMeta:
        if self.ingredients_recognized > self.ingredients_analyzed:
            msg = "ingredients_recognized cannot exceed ingredients_analyzed"
            raise ValueError(msg)
        return self


class Alternative(AnalysisModel):
    """Suggested replacement for the analyzed product."""

    kind: str = Field(..., description="Machine-readable alternative type")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Why this alternative is suggested")
    benefits: tuple[str, ...] = Field(default=())
    examples: tuple[str, ...] = Field(default=())
    source: str | None = Field(default=None, description="Supporting reference")
    priority: str | None = Field(default=None)


class AnalysisResult(AnalysisModel):
    """Fields common to every category result."""

    score: int = Field(..., ge=0, le=100, description="Overall score (0-100)")
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="How much data backed the score (0-1)",
    )
    confidence_label: ConfidenceLabel = Field(..., description="Confidence band")
    is_publishable: bool = Field(
        ...,
        description="Whether the confidence is high enough to display the score",
    )
    breakdown: dict[str, SubScore] = Field(
        ...,
        description="Component name to weighted sub-score",
    )
    alternatives: list[Alternative] = Field(default_factory=list)
    meta: AnalysisMeta


class ProductAnalysisRequest(APIRequest):
    """Fields accepted by every analysis endpoint.

    Ingredients may be sent in any of the supported fields, as label text or
    as an already split list. The first usable one wins.
    """

    ingredients: str | list[str] | None = Field(
        default=None,
        description="Ingredient label text or list",
    )
    composition: str | list[str] | None = Field(
        default=None,
        description="Composition text as printed on the package",
    )
    inci_list: list[str] | str | None = Field(
        default=None,
        description="INCI names, one per entry",
    )
    inci: str | list[str] | None = Field(default=None, description="INCI text")
    product_name: str | None = Field(default=None, max_length=500)
    name: str | None = Field(
        default=None,
        max_length=500,
        description="Fallback for productName",
    )
    certifications: list[str] = Field(
        default_factory=list,
        description="Certification labels printed on the product",
    )

    @property
    def display_name(self) -> str | None:
        """Product name from either name field."""
        return self.product_name or self.name

    def to_payload(self) -> dict[str, Any]:
        """Snake-case mapping of the fields the client actually sent."""
        return self.model_dump(by_alias=False, exclude_none=True)
