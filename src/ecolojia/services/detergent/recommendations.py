"""Detergent product type detection, issues, alternatives and insights."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ecolojia.schemas.analysis import Alternative
from ecolojia.schemas.detergent import (
    BiodegradabilityAnalysis,
    DetectedIssue,
    EcotoxicityAnalysis,
    Insight,
)
from ecolojia.schemas.enums import (
    DetergentProductType,
    IrritationLevel,
    IssueSeverity,
    ToxicityLevel,
)
from ecolojia.services.detergent.constants import (
    ALTERNATIVE_DIY_SCORE,
    ALTERNATIVE_ECO_SCORE,
    INSIGHT_BIODEGRADABILITY_SCORE,
    INSIGHT_HEALTH_ALERT_SCORE,
    INSIGHT_IMPROVEMENT_SCORE,
)
from ecolojia.services.reference.detergent import DETERGENT_HAZARDS, EUTROPHICATION
from ecolojia.services.reference.keywords import DETERGENT_TYPE_KEYWORDS


if TYPE_CHECKING:
    from collections.abc import Sequence


# =============================================================================
# Product Type
# =============================================================================


def detect_product_type(product_name: str | None) -> DetergentProductType:
    """Guess the detergent family from the product name."""
    name = (product_name or "").lower()
    for product_type, keywords in DETERGENT_TYPE_KEYWORDS.items():
        if any(keyword in name for keyword in keywords):
            return product_type
    return DetergentProductType.GENERAL


# =============================================================================
# Issues
# =============================================================================


def detect_issues(tokens: Sequence[str]) -> list[DetectedIssue]:
    """List serious problems, one entry per ingredient and problem."""
    issues: list[DetectedIssue] = []
    for token in tokens:
        hazard = DETERGENT_HAZARDS.get(token)
        if hazard is None:
            continue

        found: list[tuple[IssueSeverity, str]] = []
        if hazard.carcinogen:
            found.append((IssueSeverity.CRITICAL, "Cancérigène suspecté"))
        if hazard.environmental == EUTROPHICATION:
            found.append((IssueSeverity.HIGH, "Pollution aquatique (eutrophisation)"))
        if hazard.biodegradable is False and hazard.toxicity == ToxicityLevel.HIGH:
            found.append((IssueSeverity.HIGH, "Non biodégradable + Haute toxicité"))
        if hazard.corrosive:
            found.append((IssueSeverity.HIGH, "Corrosif pour la peau et les yeux"))

        issues.extend(
            DetectedIssue(
                severity=severity,
                ingredient=token,
                issue=issue,
                source=hazard.source,
            )
            for severity, issue in found
        )
    return issues


# =============================================================================
# Alternatives
# =============================================================================

_DIY = Alternative(
    kind="perfection",
    title="DIY Ultra-Naturel",
    description="Bicarbonate + Vinaigre blanc + Huiles essentielles",
    benefits=("100% biodégradable", "Zéro allergène", "70% moins cher"),
    source="Recettes validées laboratoire CNRS",
)

_ECO_CERTIFIED = Alternative(
    kind="eco_certified",
    title="Produits certifiés EU Ecolabel",
    description="Lessive concentrée aux tensioactifs végétaux",
    benefits=(
        "Biodégradable 28 jours",
        "Emballage recyclable",
        "Efficacité prouvée",
    ),
    examples=("Rainett", "Arbre Vert", "Ecover"),
    source="Base EU Ecolabel 2024",
)

_URGENT = Alternative(
    kind="urgent_replacement",
    title="Alternatives Urgentes Recommandées",
    description="Remplacer immédiatement par produits sans toxiques",
    benefits=("Élimination irritants", "Protection santé", "Réduction pollution"),
    source="Recommandations ANSES",
    priority="immediate",
)

_SENSITIVE_SKIN = Alternative(
    kind="sensitive_skin",
    title="Formules Hypoallergéniques",
    description="Produits sans sulfates ni MIT/BIT",
    benefits=("Testé dermatologiquement", "Convient peaux sensibles"),
    source="SCCS Guidelines 2024",
)


def build_alternatives(score: int, tokens: Sequence[str]) -> list[Alternative]:
    """One alternative for the score band, plus one for severe irritants."""
    if score >= ALTERNATIVE_DIY_SCORE:
        alternatives = [_DIY]
    elif score >= ALTERNATIVE_ECO_SCORE:
        alternatives = [_ECO_CERTIFIED]
    else:
        alternatives = [_URGENT]

    if any(_is_severe_irritant(token) for token in tokens):
        alternatives.append(_SENSITIVE_SKIN)
    return alternatives


def _is_severe_irritant(token: str) -> bool:
    hazard = DETERGENT_HAZARDS.get(token)
    return hazard is not None and hazard.irritation == IrritationLevel.SEVERE


# =============================================================================
# Insights
# =============================================================================

_HEALTH_ALERT = Insight(
    kind="health_alert",
    title="Produit à Risque Élevé",
    content=(
        "Ce produit contient plusieurs ingrédients problématiques selon les "
        "bases REACH et ECHA 2024."
    ),
    scientific_backing="Études montrent +40% risques allergies avec ces composants",
    source="European Chemicals Agency 2024",
)

_IMPROVEMENT = Insight(
    kind="improvement_needed",
    title="Amélioration Possible",
    content="Bon produit mais des alternatives plus écologiques existent.",
    scientific_backing="Réduction -60% impact environnemental possible",
    source="Life Cycle Assessment Studies",
)

_GOOD_CHOICE = Insight(
    kind="good_choice",
    title="Excellent Choix Écologique",
    content="Produit respectueux de l'environnement et de la santé.",
    scientific_backing="Conforme aux critères EU Ecolabel les plus stricts",
    source="Commission Européenne 2024",
)

_BIODEGRADABILITY = Insight(
    kind="environmental_education",
    title="Impact Biodégradabilité",
    content="Les tensioactifs non-biodégradables s'accumulent dans les cours d'eau.",
    scientific_backing="Persistance >28 jours = bioaccumulation confirmée",
    source="OECD 301 Studies & Water Framework Directive",
)

_ECOTOXICITY = Insight(
    kind="toxicity_education",
    title="Recherche Écotoxicité",
    content="Les études récentes révèlent des impacts sur la faune aquatique.",
    scientific_backing="LC50 poissons: effets létaux à concentrations domestiques",
    source="Nature Environmental Research 2024",
)


def build_insights(
    score: int,
    ecotoxicity: EcotoxicityAnalysis,
    biodegradability: BiodegradabilityAnalysis,
) -> list[Insight]:
    """Explain the score band and the weakest components."""
    if score < INSIGHT_HEALTH_ALERT_SCORE:
        insights = [_HEALTH_ALERT]
    elif score < INSIGHT_IMPROVEMENT_SCORE:
        insights = [_IMPROVEMENT]
    else:
        insights = [_GOOD_CHOICE]

    if biodegradability.score < INSIGHT_BIODEGRADABILITY_SCORE:
        insights.append(_BIODEGRADABILITY)
    if ecotoxicity.issues:
        insights.append(_ECOTOXICITY)
    return insights
