"""Cosmetic product type detection and alternative suggestions."""

from __future__ import annotations

from ecolojia.schemas.analysis import Alternative
from ecolojia.schemas.cosmetic import (
    AllergenAnalysis,
    FormulationAnalysis,
    RiskAnalysis,
)
from ecolojia.schemas.enums import CosmeticProductType
from ecolojia.services.cosmetic.constants import (
    HYPOALLERGENIC_ALLERGEN_COUNT,
    ORGANIC_NATURAL_RATIO,
)
from ecolojia.services.reference.cosmetic import KNOWN_COSMETIC_BRANDS
from ecolojia.services.reference.keywords import COSMETIC_TYPE_KEYWORDS


_CLEAN_BEAUTY = Alternative(
    kind="clean_beauty",
    title="Marque clean beauty",
    description="Sans perturbateurs endocriniens",
    benefits=("Réduction risque hormonal",),
    examples=("Weleda", "Dr. Hauschka", "Melvita"),
)

_HYPOALLERGENIC = Alternative(
    kind="hypoallergenic",
    title="Formule hypoallergénique",
    description="Moins d'allergènes détectés",
    benefits=("Meilleure tolérance cutanée",),
    examples=("Avène", "La Roche-Posay", "Eucerin"),
)

_ORGANIC = Alternative(
    kind="organic",
    title="Cosmétiques bio/naturels",
    description="Plus d'ingrédients naturels",
    benefits=("Formulation plus respectueuse",),
    examples=("Cattier", "Logona", "Lavera"),
)

_HOME_RECIPE = Alternative(
    kind="diy",
    title="Recette maison",
    description="Contrôle total des ingrédients",
    benefits=("Économique et personnalisable",),
    examples=("Huile de jojoba + aloe vera", "Savon de Marseille pur"),
)


def detect_product_type(
    product_name: str | None,
    category: str | None = None,
) -> CosmeticProductType:
    """Guess the cosmetic family from the product name and category."""
    text = f"{product_name or ''} {category or ''}".lower()
    for product_type, keywords in COSMETIC_TYPE_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return product_type
    return CosmeticProductType.GENERAL


def is_known_brand(product_name: str | None, brand: str | None = None) -> bool:
    """Whether the brand, or the product name, mentions a known brand."""
    text = f"{brand or ''} {product_name or ''}".lower()
    return any(known in text for known in KNOWN_COSMETIC_BRANDS)


def build_alternatives(
    product_type: CosmeticProductType,
    risk: RiskAnalysis,
    allergens: AllergenAnalysis,
    formulation: FormulationAnalysis,
) -> list[Alternative]:
    """Suggest alternatives addressing the problems found."""
    alternatives: list[Alternative] = []
    if risk.endocrine_disruptors:
        alternatives.append(_CLEAN_BEAUTY)
    if allergens.total_allergens > HYPOALLERGENIC_ALLERGEN_COUNT:
        alternatives.append(_HYPOALLERGENIC)
    if formulation.natural_ratio < ORGANIC_NATURAL_RATIO:
        alternatives.append(_ORGANIC)
    if product_type in (CosmeticProductType.SKINCARE, CosmeticProductType.HAIRCARE):
        alternatives.append(_HOME_RECIPE)
    return alternatives
