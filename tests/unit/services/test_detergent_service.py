"""Unit tests for DetergentAnalysisService.

Tests cover:
- Reference products (eco-labelled and toxic formulas)
- Certification and product type signals
- Determinism and score bounds
- Validation before scoring and failure wrapping
- Payload analysis
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from ecolojia.schemas.enums import (
    ConfidenceLabel,
    DetergentProductType,
    IssueSeverity,
    SkinSafety,
)
from ecolojia.services.detergent import DetergentAnalysisService, analyze_detergent
from ecolojia.services.reference.detergent import (
    DETERGENT_METHODOLOGY,
    DETERGENT_SOURCES,
)
from ecolojia.services.scoring import (
    AnalysisComputationError,
    InvalidIngredientsError,
    MissingIngredientsError,
)
from tests.conftest import ECO_DETERGENT, TOXIC_DETERGENT


pytestmark = pytest.mark.unit


# =============================================================================
# Reference Products
# =============================================================================


class TestEcoDetergent:
    """Tests on an eco-labelled, plant-based detergent."""

    def test_score(self, detergent_service: DetergentAnalysisService) -> None:
        """Should score 100 on every component."""
        result = detergent_service.analyze(
            ECO_DETERGENT, certifications=["EU Ecolabel"]
        )

        assert result.score == 100
        assert {name: sub.score for name, sub in result.breakdown.items()} == {
            "ecotoxicity": 100,
            "biodegradability": 100,
            "irritation": 100,
            "environmental": 100,
        }
        assert result.confidence == 0.69
        assert result.confidence_label == ConfidenceLabel.RELIABLE

    def test_recommendations(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should praise the product and suggest the DIY recipe."""
        result = detergent_service.analyze(
            ECO_DETERGENT, certifications=["EU Ecolabel"]
        )

        assert result.detected_issues == []
        assert [a.kind for a in result.alternatives] == ["perfection"]
        assert [i.kind for i in result.insights] == ["good_choice"]
        assert [c.name for c in result.certifications_detected] == ["EU ECOLABEL"]
        assert result.environmental_analysis.certification_bonus == 10

    def test_meta(self, detergent_service: DetergentAnalysisService) -> None:
        """Should report counts, methodology and sources."""
        result = detergent_service.analyze(ECO_DETERGENT)

        assert result.meta.ingredients_analyzed == 5
        assert result.meta.ingredients_recognized == 4
        assert result.meta.sources == list(DETERGENT_SOURCES)
        assert isinstance(result.meta.processing_time_ms, int)
        assert result.methodology == DETERGENT_METHODOLOGY
        assert result.environmental_analysis.ingredient_count == 4

    def test_without_certification(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should lose the eco-label confidence bonus only."""
        result = detergent_service.analyze(ECO_DETERGENT)

        assert result.score == 100
        assert result.confidence == 0.64
        assert result.certifications_detected == []


class TestToxicDetergent:
    """Tests on a detergent full of hazardous ingredients."""

    def test_score(self, detergent_service: DetergentAnalysisService) -> None:
        """Should score 26 with zero ecotoxicity and biodegradability."""
        result = detergent_service.analyze(TOXIC_DETERGENT)

        assert result.score == 26
        assert {name: sub.score for name, sub in result.breakdown.items()} == {
            "ecotoxicity": 0,
            "biodegradability": 0,
            "irritation": 35,
            "environmental": 85,
        }
        assert result.irritation_analysis.skin_safety == SkinSafety.POOR
        assert result.confidence == 0.6

    def test_issues(self, detergent_service: DetergentAnalysisService) -> None:
        """Should report the chlorinated solvent as critical."""
        result = detergent_service.analyze(TOXIC_DETERGENT)

        critical = [
            issue
            for issue in result.detected_issues
            if issue.severity == IssueSeverity.CRITICAL
        ]
        assert [issue.ingredient for issue in critical] == ["DICHLOROMETHANE"]
        assert len(result.detected_issues) == 4
        assert result.ecotoxicity_analysis.issues == [
            "DICHLOROMETHANE: Très toxique (IARC Monographs)"
        ]

    def test_recommendations(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should recommend urgent replacement and explain the risks."""
        result = detergent_service.analyze(TOXIC_DETERGENT)

        assert [a.kind for a in result.alternatives] == [
            "urgent_replacement",
            "sensitive_skin",
        ]
        assert [i.kind for i in result.insights] == [
            "health_alert",
            "environmental_education",
            "toxicity_education",
        ]


# =============================================================================
# Signals and Properties
# =============================================================================


class TestSignals:
    """Tests for product metadata and invariants."""

    def test_certification_in_product_name(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should detect eco-labels and the product type from the name."""
        result = detergent_service.analyze(ECO_DETERGENT, "Lessive Ecocert")

        assert result.product_type == DetergentProductType.LAUNDRY
        assert [c.name for c in result.certifications_detected] == ["ECOCERT"]
        assert result.confidence == 0.82

    def test_explicit_product_type(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should keep a supplied product type."""
        result = detergent_service.analyze(
            ECO_DETERGENT,
            "Lessive",
            product_type=DetergentProductType.SOAP,
        )

        assert result.product_type == DetergentProductType.SOAP

    def test_idempotent(self, detergent_service: DetergentAnalysisService) -> None:
        """Should return the same analysis for the same input."""
        first = detergent_service.analyze(TOXIC_DETERGENT, "Nettoyant")
        second = detergent_service.analyze(TOXIC_DETERGENT, "Nettoyant")

        assert first.model_dump(exclude={"meta"}) == second.model_dump(
            exclude={"meta"}
        )

    @pytest.mark.parametrize(
        "ingredients",
        [
            "AQUA",
            "FOO, BAR, BAZ",
            ", ".join(f"COMPOUND {i}" for i in range(40)),
            TOXIC_DETERGENT + ", SODIUM HYPOCHLORITE, PERCHLOROETHYLENE",
        ],
    )
    def test_bounds(
        self,
        detergent_service: DetergentAnalysisService,
        ingredients: str,
    ) -> None:
        """Should keep every score in [0, 100] and confidence in [0, 1]."""
        result = detergent_service.analyze(ingredients)

        assert 0 <= result.score <= 100
        assert 0.0 <= result.confidence <= 1.0
        assert all(0 <= sub.score <= 100 for sub in result.breakdown.values())

    def test_unrecognized_only(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should stay below 0.5 confidence with no known ingredient."""
        result = detergent_service.analyze("FOO, BAR, BAZ", "Lessive Ecocert")

        assert result.confidence == 0.35
        assert not result.is_publishable


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    """Tests for validation and failure handling."""

    @pytest.mark.parametrize("ingredients", [None, "", "  ,  "])
    def test_missing_ingredients(
        self,
        detergent_service: DetergentAnalysisService,
        ingredients: str | None,
    ) -> None:
        """Should raise MissingIngredientsError before scoring."""
        with (
            patch(
                "ecolojia.services.detergent.service.analyze_ecotoxicity"
            ) as mock_ecotoxicity,
            pytest.raises(MissingIngredientsError),
        ):
            detergent_service.analyze(ingredients)

        mock_ecotoxicity.assert_not_called()

    def test_invalid_ingredients(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should raise InvalidIngredientsError for a malformed list."""
        with pytest.raises(InvalidIngredientsError):
            detergent_service.analyze([None])  # type: ignore[list-item]

    def test_analyzer_failure_is_wrapped(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should wrap unexpected analyzer failures."""
        with (
            patch(
                "ecolojia.services.detergent.service.analyze_biodegradability",
                side_effect=RuntimeError("boom"),
            ),
            pytest.raises(AnalysisComputationError) as exc_info,
        ):
            detergent_service.analyze(ECO_DETERGENT)

        assert exc_info.value.category == "detergent"


# =============================================================================
# Payload Analysis
# =============================================================================


class TestAnalyzePayload:
    """Tests for analyze_payload and analyze_detergent."""

    def test_composition_payload(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should read composition text and certifications."""
        result = detergent_service.analyze_payload(
            {
                "composition": ECO_DETERGENT,
                "certifications": ["EU Ecolabel"],
                "product_type": "laundry",
            }
        )

        assert result.score == 100
        assert result.product_type == DetergentProductType.LAUNDRY

    def test_invalid_payload_field(
        self, detergent_service: DetergentAnalysisService
    ) -> None:
        """Should raise InvalidIngredientsError for a non-text field."""
        with pytest.raises(InvalidIngredientsError):
            detergent_service.analyze_payload({"ingredients": {"a": 1}})

    def test_module_function(self) -> None:
        """Should analyze with the default service."""
        assert analyze_detergent(TOXIC_DETERGENT).score == 26
