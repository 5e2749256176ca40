"""Cosmetic sub-analyzers.

Each analyzer is a pure function over the normalized token tuple. Unknown
ingredients are ignored; nothing here raises on content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ecolojia.schemas.cosmetic import (
    ActiveIngredientMatch,
    AllergenAnalysis,
    AllergenMatch,
    BenefitAnalysis,
    BenefitCategoryMatch,
    FormulationAnalysis,
    HazardMatch,
    IrritantMatch,
    RiskAnalysis,
)
from ecolojia.schemas.enums import Level
from ecolojia.services.cosmetic.constants import (
    ALLERGEN_HIGH_COUNT,
    ALLERGEN_MEDIUM_COUNT,
    ALLERGEN_PENALTIES,
    BENEFIT_BONUSES,
    DISRUPTOR_PENALTIES,
    IRRITANT_PENALTY,
    SENSITIVE_SKIN_HIGH_PREVALENCE,
)
from ecolojia.services.reference.cosmetic import (
    ALLERGENS,
    BENEFICIAL_ACTIVES,
    BENEFIT_CATEGORIES,
    ENDOCRINE_DISRUPTORS,
    IRRITANT_RECOMMENDATION,
    SENSITIVE_SKIN_IRRITANTS,
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


def analyze_risk(
    tokens: Sequence[str],
    policy: RiskPolicy = DEFAULT_RISK_POLICY,
) -> RiskAnalysis:
    """Score endocrine disruptors and sensitive-skin irritants.

    A token can be both a disruptor and an irritant; each lookup adds its
    own penalty.
    """
    points = 0
    disruptors: list[HazardMatch] = []
    irritants: list[IrritantMatch] = []

    for token in tokens:
        hazard = ENDOCRINE_DISRUPTORS.get(token)
        if hazard is not None:
            points += DISRUPTOR_PENALTIES[hazard.risk_level]
            disruptors.append(
                HazardMatch(
                    name=token,
                    risk_level=hazard.risk_level,
                    effect=hazard.effect,
                    source=hazard.source,
                )
            )

        irritant = SENSITIVE_SKIN_IRRITANTS.get(token)
        if irritant is not None:
            points += IRRITANT_PENALTY
            irritants.append(
                IrritantMatch(
                    name=token,
                    effect=irritant.effect,
                    recommendation=IRRITANT_RECOMMENDATION,
                )
            )

    return RiskAnalysis(
        risk_score=to_score(100 - points),
        overall_risk=policy.tier(points, len(tokens)),
        risk_ratio=round_half_up(policy.ratio(points, len(tokens)), 2),
        penalty_points=points,
        endocrine_disruptors=disruptors,
        irritants=irritants,
    )


def analyze_benefits(tokens: Sequence[str]) -> BenefitAnalysis:
    """Score beneficial actives and group them into benefit families."""
    bonus = 0
    actives: list[ActiveIngredientMatch] = []
    for token in tokens:
        entry = BENEFICIAL_ACTIVES.get(token)
        if entry is None:
            continue
        bonus += BENEFIT_BONUSES[entry.evidence_level]
        actives.append(
            ActiveIngredientMatch(
                name=token,
                benefit=entry.benefit,
                evidence_level=entry.evidence_level,
            )
        )

    found = {active.name for active in actives}
    categories = [
        BenefitCategoryMatch(
            category=category,
            ingredients=[token for token in tokens if token in members],
        )
        for category, members in BENEFIT_CATEGORIES.items()
        if found & members
    ]

    return BenefitAnalysis(
        benefit_score=to_score(bonus),
        active_ingredients=actives,
        benefit_categories=categories,
    )


def analyze_allergens(tokens: Sequence[str]) -> AllergenAnalysis:
    """Score fragrance allergens and flag formulas unfit for sensitive skin."""
    penalty = 0
    allergens: list[AllergenMatch] = []
    for token in tokens:
        entry = ALLERGENS.get(token)
        if entry is None:
            continue
        penalty += ALLERGEN_PENALTIES[entry.prevalence]
        allergens.append(
            AllergenMatch(name=token, prevalence=entry.prevalence, source=entry.source)
        )

    count = len(allergens)
    if count >= ALLERGEN_HIGH_COUNT:
        tier = Level.HIGH
    elif count == ALLERGEN_MEDIUM_COUNT:
        tier = Level.MEDIUM
    else:
        tier = Level.LOW

    high_prevalence = sum(1 for a in allergens if a.prevalence == Level.HIGH)

    return AllergenAnalysis(
        allergen_score=to_score(100 - penalty),
        total_allergens=count,
        allergen_risk=tier,
        allergens=allergens,
        sensitive_skin_warning=(
            tier == Level.HIGH or high_prevalence >= SENSITIVE_SKIN_HIGH_PREVALENCE
        ),
    )


def analyze_formulation(tokens: Sequence[str]) -> FormulationAnalysis:
    """Score complexity and naturalness.

    Args:
        tokens: Ingredient tokens with water already removed.
    """
    count = len(tokens)
    natural_ratio = share(tokens, lambda t: contains_marker(t, NATURAL_MARKERS))
    synthetic_ratio = share(tokens, lambda t: contains_marker(t, SYNTHETIC_MARKERS))
    score = to_score(
        100 + complexity_adjustment(count) + natural_ratio * NATURAL_RATIO_WEIGHT
    )

    return FormulationAnalysis(
        formulation_score=score,
        ingredient_count=count,
        complexity=complexity_label(count),
        natural_ratio=round_half_up(natural_ratio, 2),
        synthetic_ratio=round_half_up(synthetic_ratio, 2),
        sustainability=sustainability_label(score),
    )


def is_recognized(token: str) -> bool:
    """Whether a token appears in any cosmetic reference table."""
    return (
        token in ENDOCRINE_DISRUPTORS
        or token in SENSITIVE_SKIN_IRRITANTS
        or token in ALLERGENS
        or token in BENEFICIAL_ACTIVES
    )
