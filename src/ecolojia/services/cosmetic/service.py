"""Cosmetic analysis service.

Runs the four cosmetic analyzers over one normalized token tuple, weights
their scores and attaches confidence, metadata and alternatives.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from ecolojia.observability.logging import get_logger
from ecolojia.parsing import strip_water
from ecolojia.schemas.analysis import AnalysisMeta, SubScore
from ecolojia.schemas.cosmetic import CosmeticAnalysisResult
from ecolojia.schemas.enums import CosmeticProductType
from ecolojia.services.confidence import (
    COSMETIC_CONFIDENCE,
    ConfidenceFactors,
    ConfidenceProfile,
    calculate_confidence,
    confidence_label,
    is_publishable,
)
from ecolojia.services.cosmetic.analyzers import (
    analyze_allergens,
    analyze_benefits,
    analyze_formulation,
    analyze_risk,
    is_recognized,
)
from ecolojia.services.cosmetic.constants import MODULES_ACTIVE
from ecolojia.services.cosmetic.recommendations import (
    build_alternatives,
    detect_product_type,
    is_known_brand,
)
from ecolojia.services.reference.cosmetic import COSMETIC_SOURCES
from ecolojia.services.scoring import (
    COSMETIC_SCORING,
    DEFAULT_RISK_POLICY,
    AnalysisComputationError,
    AnalysisError,
    RiskPolicy,
    ScoringProfile,
    aggregate_score,
    round_half_up,
)
from ecolojia.services.scoring.inputs import (
    certification_labels,
    payload_certifications,
    payload_name,
    payload_product_type,
    resolve_payload,
    tokenize,
)


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


logger = get_logger(__name__)


class CosmeticAnalysisService:
    """Scores cosmetics from their INCI list.

    Stateless apart from its policy objects, so one instance is shared by
    every request.
    """

    def __init__(
        self,
        scoring: ScoringProfile = COSMETIC_SCORING,
        risk_policy: RiskPolicy = DEFAULT_RISK_POLICY,
        confidence: ConfidenceProfile = COSMETIC_CONFIDENCE,
    ) -> None:
        """Initialize the cosmetic analysis service.

        Args:
            scoring: Weight vector for the four cosmetic components.
            risk_policy: Risk ratio thresholds.
            confidence: Confidence bonuses for cosmetics.
        """
        self._scoring = scoring
        self._risk_policy = risk_policy
        self._confidence = confidence

    def analyze(
        self,
        ingredients: str | Sequence[str] | None,
        product_name: str | None = None,
        *,
        category: str | None = None,
        brand: str | None = None,
        certifications: Sequence[str] | None = None,
        product_type: CosmeticProductType | None = None,
    ) -> CosmeticAnalysisResult:
        """Analyze a cosmetic product.

        Args:
            ingredients: INCI text or list.
            product_name: Product name, used for type and brand detection.
            category: Free-text category from the product database.
            brand: Brand name.
            certifications: Certification labels printed on the product.
            product_type: Known product type; detected when omitted.

        Returns:
            The complete cosmetic analysis.

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
                category=category,
                brand=brand,
                certifications=certifications or (),
                product_type=product_type,
            )
        except AnalysisError:
            raise
        except Exception as e:
            logger.exception("Cosmetic analysis failed", product=product_name)
            raise AnalysisComputationError("cosmetic", e) from e

    def analyze_payload(self, payload: Mapping[str, Any]) -> CosmeticAnalysisResult:
        """Analyze a loosely shaped product mapping.

        Ingredients are resolved from ``inci_list``/``inci``/``ingredients``/
        ``composition``; the name from ``product_name``/``productName``/``name``.
        """
        source = resolve_payload(payload)
        return self.analyze(
            source.value,
            payload_name(payload),
            category=payload.get("category"),
            brand=payload.get("brand"),
            certifications=payload_certifications(payload),
            product_type=payload_product_type(payload, CosmeticProductType),
        )

    def _score(
        self,
        tokens: tuple[str, ...],
        *,
        product_name: str | None,
        category: str | None,
        brand: str | None,
        certifications: Sequence[str],
        product_type: CosmeticProductType | None,
    ) -> CosmeticAnalysisResult:
        start = time.perf_counter()
        logger.debug(
            "Analyzing cosmetic",
            product=product_name,
            ingredients=len(tokens),
        )

        risk = analyze_risk(tokens, self._risk_policy)
        benefits = analyze_benefits(tokens)
        allergens = analyze_allergens(tokens)
        formulation = analyze_formulation(strip_water(tokens))

        breakdown = {
            "safety": SubScore(
                score=risk.risk_score,
                details=(
                    f"{len(risk.endocrine_disruptors)} perturbateur(s) endocrinien(s), "
                    f"{len(risk.irritants)} irritant(s)"
                ),
            ),
            "efficacy": SubScore(
                score=benefits.benefit_score,
                details=f"{len(benefits.active_ingredients)} actif(s) bénéfique(s)",
            ),
            "allergens": SubScore(
                score=allergens.allergen_score,
                details=f"{allergens.total_allergens} allergène(s)",
            ),
            "formulation": SubScore(
                score=formulation.formulation_score,
                details=(
                    f"Complexité {formulation.complexity}, "
                    f"ratio naturel {formulation.natural_ratio}"
                ),
            ),
        }
        score = aggregate_score(
            {name: sub.score for name, sub in breakdown.items()},
            self._scoring.weight_map(),
        )

        resolved_type = product_type or detect_product_type(product_name, category)
        recognized = sum(1 for token in tokens if is_recognized(token))
        labels = certification_labels(certifications)
        confidence = calculate_confidence(
            ConfidenceFactors(
                ingredients_analyzed=len(tokens),
                ingredients_recognized=recognized,
                product_name=product_name,
                product_type_recognized=resolved_type != CosmeticProductType.GENERAL,
                brand_known=is_known_brand(product_name, brand),
                certification_count=len(labels),
            ),
            self._confidence,
        )

        elapsed_ms = (time.perf_counter() - start) * 1000
        result = CosmeticAnalysisResult(
            score=score,
            confidence=confidence,
            confidence_label=confidence_label(confidence),
            is_publishable=is_publishable(confidence),
            breakdown=breakdown,
            product_type=resolved_type,
            risk_analysis=risk,
            benefit_analysis=benefits,
            allergen_analysis=allergens,
            formulation_analysis=formulation,
            alternatives=build_alternatives(
                resolved_type, risk, allergens, formulation
            ),
            meta=AnalysisMeta(
                ingredients_analyzed=len(tokens),
                ingredients_recognized=recognized,
                processing_time_ms=int(round_half_up(elapsed_ms)),
                sources=list(COSMETIC_SOURCES),
                modules_active=list(MODULES_ACTIVE),
            ),
        )

        logger.info(
            "Cosmetic analysis complete",
            product=product_name,
            score=score,
            confidence=confidence,
            ingredients=len(tokens),
            recognized=recognized,
        )
        return result


def analyze_cosmetic(
    ingredients: str | Sequence[str] | None,
    product_name: str | None = None,
    *,
    category: str | None = None,
    brand: str | None = None,
    certifications: Sequence[str] | None = None,
    product_type: CosmeticProductType | None = None,
) -> CosmeticAnalysisResult:
    """Analyze a cosmetic with the default policies.

    See ``CosmeticAnalysisService.analyze``.
    """
    return _default_service.analyze(
        ingredients,
        product_name,
        category=category,
        brand=brand,
        certifications=certifications,
        product_type=product_type,
    )


_default_service = CosmeticAnalysisService()
