"""Detergent analysis service.

Scores household detergents on ecotoxicity, biodegradability, skin
irritation and environmental footprint following the REACH, ECHA 2024 and
EU Ecolabel criteria embedded in the reference tables.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from ecolojia.observability.logging import get_logger
from ecolojia.parsing import strip_water
from ecolojia.schemas.analysis import AnalysisMeta, SubScore
from ecolojia.schemas.detergent import DetergentAnalysisResult
from ecolojia.schemas.enums import DetergentProductType
from ecolojia.services.confidence import (
    DETERGENT_CONFIDENCE,
    ConfidenceFactors,
    ConfidenceProfile,
    calculate_confidence,
    confidence_label,
    is_publishable,
)
from ecolojia.services.detergent.analyzers import (
    analyze_biodegradability,
    analyze_ecotoxicity,
    analyze_environmental,
    analyze_irritation,
    detect_certifications,
    is_recognized,
)
from ecolojia.services.detergent.constants import MODULES_ACTIVE
from ecolojia.services.detergent.recommendations import (
    build_alternatives,
    build_insights,
    detect_issues,
    detect_product_type,
)
from ecolojia.services.reference.detergent import (
    DETERGENT_METHODOLOGY,
    DETERGENT_SOURCES,
)
from ecolojia.services.scoring import (
    DEFAULT_RISK_POLICY,
    DETERGENT_SCORING,
    AnalysisComputationError,
    AnalysisError,
    RiskPolicy,
    ScoringProfile,
    aggregate_score,
    round_half_up,
)
from ecolojia.services.scoring.inputs import (
    payload_certifications,
    payload_name,
    payload_product_type,
    resolve_payload,
    tokenize,
)


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


logger = get_logger(__name__)


class DetergentAnalysisService:
    """Scores detergents from their ingredient list and eco-labels."""

    def __init__(
        self,
        scoring: ScoringProfile = DETERGENT_SCORING,
        risk_policy: RiskPolicy = DEFAULT_RISK_POLICY,
        confidence: ConfidenceProfile = DETERGENT_CONFIDENCE,
    ) -> None:
        self._scoring = scoring
        self._risk_policy = risk_policy
        self._confidence = confidence

    def analyze(
        self,
        ingredients: str | Sequence[str] | None,
        product_name: str | None = None,
        certifications: Sequence[str] | None = None,
        *,
        product_type: DetergentProductType | None = None,
    ) -> DetergentAnalysisResult:
        """Analyze a detergent.

        Args:
            ingredients: Ingredient text or list.
            product_name: Product name, also searched for eco-labels.
            certifications: Eco-labels printed on the product.
            product_type: Known product type; detected when omitted.

        Raises:
            MissingIngredientsError: If no ingredient can be extracted.
            InvalidIngredientsError: If the ingredients have an unsupported shape.
            AnalysisComputationError: If an analyzer fails unexpectedly.
        """
        tokens = tokenize(ingredients)

        try:
            return self._score(
                tokens,
                product_name=product_name,
                certifications=list(certifications or ()),
                product_type=product_type,
            )
        except AnalysisError:
            raise
        except Exception as e:
            logger.exception("Detergent analysis failed", product=product_name)
            raise AnalysisComputationError("detergent", e) from e

    def analyze_payload(self, payload: Mapping[str, Any]) -> DetergentAnalysisResult:
        """Analyze a loosely shaped product mapping."""
        source = resolve_payload(payload)
        return self.analyze(
            source.value,
            payload_name(payload),
            payload_certifications(payload),
            product_type=payload_product_type(payload, DetergentProductType),
        )

    def _score(
        self,
        tokens: tuple[str, ...],
        *,
        product_name: str | None,
        certifications: list[str],
        product_type: DetergentProductType | None,
    ) -> DetergentAnalysisResult:
        start = time.perf_counter()
        logger.debug(
            "Analyzing detergent",
            product=product_name,
            ingredients=len(tokens),
        )

        certifications_detected = detect_certifications(product_name, certifications)
        ecotoxicity = analyze_ecotoxicity(tokens, self._risk_policy)
        biodegradability = analyze_biodegradability(tokens)
        irritation = analyze_irritation(tokens)
        environmental = analyze_environmental(
            strip_water(tokens),
            certifications_detected,
        )

        breakdown = {
            "ecotoxicity": SubScore(
                score=ecotoxicity.score,
                details=f"Risque {ecotoxicity.overall_risk}",
            ),
            "biodegradability": SubScore(
                score=biodegradability.score,
                details=(
                    f"{len(biodegradability.biodegradable)} biodégradable(s), "
                    f"{len(biodegradability.non_biodegradable)} non biodégradable(s)"
                ),
            ),
            "irritation": SubScore(
                score=irritation.score,
                details=f"Sécurité cutanée {irritation.skin_safety}",
            ),
            "environmental": SubScore(
                score=environmental.score,
                details=f"Durabilité {environmental.sustainability}",
            ),
        }
        score = aggregate_score(
            {name: sub.score for name, sub in breakdown.items()},
            self._scoring.weight_map(),
        )

        resolved_type = product_type or detect_product_type(product_name)
        recognized = sum(1 for token in tokens if is_recognized(token))
        confidence = calculate_confidence(
            ConfidenceFactors(
                ingredients_analyzed=len(tokens),
                ingredients_recognized=recognized,
                product_name=product_name,
                product_type_recognized=resolved_type != DetergentProductType.GENERAL,
                certification_count=len(certifications_detected),
            ),
            self._confidence,
        )

        elapsed_ms = (time.perf_counter() - start) * 1000
        result = DetergentAnalysisResult(
            score=score,
            confidence=confidence,
            confidence_label=confidence_label(confidence),
            is_publishable=is_publishable(confidence),
            breakdown=breakdown,
            product_type=resolved_type,
            ecotoxicity_analysis=ecotoxicity,
            biodegradability_analysis=biodegradability,
            irritation_analysis=irritation,
            environmental_analysis=environmental,
            detected_issues=detect_issues(tokens),
            certifications_detected=certifications_detected,
            alternatives=build_alternatives(score, tokens),
            insights=build_insights(score, ecotoxicity, biodegradability),
            methodology=DETERGENT_METHODOLOGY,
            meta=AnalysisMeta(
                ingredients_analyzed=len(tokens),
                ingredients_recognized=recognized,
                processing_time_ms=int(round_half_up(elapsed_ms)),
                sources=list(DETERGENT_SOURCES),
                modules_active=list(MODULES_ACTIVE),
            ),
        )

        logger.info(
            "Detergent analysis complete",
            product=product_name,
            score=score,
            confidence=confidence,
            issues=len(result.detected_issues),
        )
        return result


def analyze_detergent(
    ingredients: str | Sequence[str] | None,
    product_name: str | None = None,
    certifications: Sequence[str] | None = None,
    *,
    product_type: DetergentProductType | None = None,
) -> DetergentAnalysisResult:
    """Analyze a detergent with the default policies."""
    return _default_service.analyze(
        ingredients,
        product_name,
        certifications,
        product_type=product_type,
    )


_default_service = DetergentAnalysisService()
