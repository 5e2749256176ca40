"""Detergent sub-analyzers.

Pure functions over the normalized token tuple, one per breakdown
component, plus certification detection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ecolojia.schemas.detergent import (
    BiodegradabilityAnalysis,
    CertificationMatch,
    EcotoxicityAnalysis,
    EnvironmentalAnalysis,
    HazardPenalty,
    IrritantLevelMatch,
    IrritationAnalysis,
)
from ecolojia.schemas.enums import IrritationLevel, SkinSafety, ToxicityLevel
from ecolojia.services.detergent.constants import (
    ALLERGEN_PENALTY,
    BIODEGRADABLE_BONUS_DIVISOR,
    CERTIFICATION_BONUS_CAP,
    CERTIFICATION_BONUS_DIVISOR,
    ECO_BONUS_DIVISOR,
    ENVIRONMENTAL_HAZARD_PENALTY,
    GENTLE_BONUS,
    IRRITATION_PENALTIES,
    NON_BIODEGRADABLE_PENALTY,
    SKIN_SAFETY_EXCELLENT,
    SKIN_SAFETY_GOOD,
    SKIN_SAFETY_MODERATE,
    UNKNOWN_BIODEGRADABLE_RATIO,
)
from ecolojia.services.reference.detergent import (
    DETERGENT_CERTIFICATIONS,
    DETERGENT_HAZARDS,
    ECO_INGREDIENTS,
)
from ecolojia.services.reference.keywords import NATURAL_MARKERS, SYNTHETIC_MARKERS
from ecolojia.services.scoring.aggregator import round_half_up, to_score
from ecolojia.services.scoring.constants import NATURAL_RATIO_WEIGHT
from ecolojia.services.scoring.formulation import (
    complexity_adjustment,
    complexity_label,
    contains_marker,
    share,
    sustainability_label,
)
from ecolojia.services.scoring.profiles import DEFAULT_RISK_POLICY


if TYPE_CHECKING:
    from collections.abc import Sequence

    from ecolojia.services.scoring.profiles import RiskPolicy


def analyze_ecotoxicity(
    tokens: Sequence[str],
    policy: RiskPolicy = DEFAULT_RISK_POLICY,
) -> EcotoxicityAnalysis:
    """Subtract each hazard's penalty from 100."""
    points = 0
    penalties: list[HazardPenalty] = []
    issues: list[str] = []

    for token in tokens:
        hazard = DETERGENT_HAZARDS.get(token)
        if hazard is None:
            continue
        points += hazard.penalty
        penalties.append(
            HazardPenalty(
                ingredient=token,
                penalty=hazard.penalty,
                toxicity=hazard.toxicity,
                source=hazard.source,
            )
        )
        if hazard.toxicity == ToxicityLevel.VERY_HIGH or hazard.carcinogen:
            issues.append(f"{token}: Très toxique ({hazard.source})")

    return EcotoxicityAnalysis(
        score=to_score(100 - points),
        overall_risk=policy.tier(points, len(tokens)),
        risk_ratio=round_half_up(policy.ratio(points, len(tokens)), 2),
        penalties=penalties,
        issues=issues,
    )


def analyze_biodegradability(tokens: Sequence[str]) -> BiodegradabilityAnalysis:
    """Reward biodegradable ingredients, then scale by their share.

    The score is multiplied by ``bio / (bio + non_bio)``; with no ingredient
    of known biodegradability the factor is 0.5.
    """
    score: float = 100
    biodegradable: list[str] = []
    non_biodegradable: list[str] = []

    for token in tokens:
        hazard = DETERGENT_HAZARDS.get(token)
        eco = ECO_INGREDIENTS.get(token)
        if hazard is not None and hazard.biodegradable is False:
            score -= NON_BIODEGRADABLE_PENALTY
            non_biodegradable.append(token)
        elif eco is not None and eco.biodegradable:
            score += eco.bonus / BIODEGRADABLE_BONUS_DIVISOR
            biodegradable.append(token)

    known = len(biodegradable) + len(non_biodegradable)
    ratio = len(biodegradable) / known if known else UNKNOWN_BIODEGRADABLE_RATIO

    return BiodegradabilityAnalysis(
        score=to_score(score * ratio),
        biodegradable_ratio=round_half_up(ratio, 2),
        biodegradable=biodegradable,
        non_biodegradable=non_biodegradable,
    )


def analyze_irritation(tokens: Sequence[str]) -> IrritationAnalysis:
    """Penalize allergens and irritants, reward gentle surfactants."""
    score = 100
    allergens: list[str] = []
    irritants: list[IrritantLevelMatch] = []
    gentle: list[str] = []

    for token in tokens:
        hazard = DETERGENT_HAZARDS.get(token)
        if hazard is not None:
            if hazard.allergen:
                score -= ALLERGEN_PENALTY
                allergens.append(token)
            if hazard.irritation != IrritationLevel.NONE:
                score -= IRRITATION_PENALTIES[hazard.irritation]
                irritants.append(
                    IrritantLevelMatch(ingredient=token, level=hazard.irritation)
                )

        eco = ECO_INGREDIENTS.get(token)
        if eco is not None and eco.gentle:
            score += GENTLE_BONUS
            gentle.append(token)

    final = to_score(score)
    return IrritationAnalysis(
        score=final,
        skin_safety=skin_safety(final),
        allergens=allergens,
        irritants=irritants,
        gentle_ingredients=gentle,
    )


def skin_safety(score: int) -> SkinSafety:
    """Qualitative skin safety band for an irritation score."""
    if score > SKIN_SAFETY_EXCELLENT:
        return SkinSafety.EXCELLENT
    if score > SKIN_SAFETY_GOOD:
        return SkinSafety.GOOD
    if score > SKIN_SAFETY_MODERATE:
        return SkinSafety.MODERATE
    return SkinSafety.POOR


def detect_certifications(
    product_name: str | None,
    certifications: Sequence[str],
) -> list[CertificationMatch]:
    """Find known eco-labels in the supplied labels or the product name.

    Matching is case-insensitive and by substring, so "Certifié EU Ecolabel"
    counts as EU ECOLABEL. The product name and each label are searched on
    their own, so a name never spans two inputs. Each certification is
    reported once.
    """
    parts = [part.upper() for part in (product_name or "", *certifications)]
    return [
        CertificationMatch(name=name, bonus=entry.bonus, credibility=entry.credibility)
        for name, entry in DETERGENT_CERTIFICATIONS.items()
        if any(name in part for part in parts)
    ]


def analyze_environmental(
    tokens: Sequence[str],
    certifications: Sequence[CertificationMatch] = (),
) -> EnvironmentalAnalysis:
    """Score the environmental footprint.

    Args:
        tokens: Ingredient tokens with water already removed.
        certifications: Certifications detected on the product.
    """
    count = len(tokens)
    eco_bonus = 0.0
    hazards: list[str] = []
    eco_found: list[str] = []

    for token in tokens:
        eco = ECO_INGREDIENTS.get(token)
        if eco is not None:
            eco_bonus += eco.bonus / ECO_BONUS_DIVISOR
            eco_found.append(token)
        hazard = DETERGENT_HAZARDS.get(token)
        if hazard is not None and hazard.environmental:
            hazards.append(token)

    certification_bonus = min(
        sum(c.bonus / CERTIFICATION_BONUS_DIVISOR for c in certifications),
        CERTIFICATION_BONUS_CAP,
    )
    natural_ratio = share(tokens, _is_natural)
    synthetic_ratio = share(tokens, _is_synthetic)

    score = to_score(
        100
        + complexity_adjustment(count)
        - ENVIRONMENTAL_HAZARD_PENALTY * len(hazards)
        + eco_bonus
        + certification_bonus
        + natural_ratio * NATURAL_RATIO_WEIGHT
    )

    return EnvironmentalAnalysis(
        score=score,
        ingredient_count=count,
        complexity=complexity_label(count),
        natural_ratio=round_half_up(natural_ratio, 2),
        synthetic_ratio=round_half_up(synthetic_ratio, 2),
        environmental_hazards=hazards,
        eco_ingredients=eco_found,
        certification_bonus=int(round_half_up(certification_bonus)),
        sustainability=sustainability_label(score),
    )


def is_recognized(token: str) -> bool:
    """Whether a token appears in a detergent reference table."""
    return token in DETERGENT_HAZARDS or token in ECO_INGREDIENTS


def _is_natural(token: str) -> bool:
    eco = ECO_INGREDIENTS.get(token)
    if eco is not None and (eco.natural or eco.plant_based):
        return True
    return contains_marker(token, NATURAL_MARKERS)


def _is_synthetic(token: str) -> bool:
    return token in DETERGENT_HAZARDS or contains_marker(token, SYNTHETIC_MARKERS)
