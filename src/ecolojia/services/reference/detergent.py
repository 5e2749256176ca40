"""Detergent reference tables.

Hazards and eco ingredients follow REACH, ECHA 2024 and the EU Ecolabel,
ECOCERT and Nordic Swan criteria. Penalties and bonuses are points on a
0-100 scale.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ecolojia.schemas.enums import Credibility, IrritationLevel, ToxicityLevel
from ecolojia.services.reference.models import (
    CertificationEntry,
    DetergentHazardEntry,
    EcoIngredientEntry,
    build_table,
)


EUTROPHICATION: Final[str] = "eutrophication"


# =============================================================================
# Harmful Ingredients
# =============================================================================

DETERGENT_HAZARDS: Final[Mapping[str, DetergentHazardEntry]] = build_table(
    [
        # Non-biodegradable surfactants
        DetergentHazardEntry(
            name="SODIUM LAURYL SULFATE",
            toxicity=ToxicityLevel.HIGH,
            irritation=IrritationLevel.SEVERE,
            biodegradable=False,
            penalty=25,
            source="ECHA 2024",
        ),
        DetergentHazardEntry(
            name="SODIUM LAURETH SULFATE",
            toxicity=ToxicityLevel.MEDIUM,
            irritation=IrritationLevel.MODERATE,
            biodegradable=False,
            penalty=15,
            source="REACH Database",
        ),
        DetergentHazardEntry(
            name="ALKYLBENZENE SULFONATE",
            toxicity=ToxicityLevel.HIGH,
            irritation=IrritationLevel.MODERATE,
            biodegradable=False,
            penalty=30,
            source="OECD Guidelines",
        ),
        # Phosphates
        DetergentHazardEntry(
            name="SODIUM TRIPOLYPHOSPHATE",
            toxicity=ToxicityLevel.HIGH,
            environmental=EUTROPHICATION,
            biodegradable=False,
            penalty=40,
            source="EU Regulation 648/2004",
        ),
        DetergentHazardEntry(
            name="TETRASODIUM PYROPHOSPHATE",
            toxicity=ToxicityLevel.MEDIUM,
            environmental=EUTROPHICATION,
            penalty=20,
            source="Water Framework Directive",
        ),
        # Preservatives
        DetergentHazardEntry(
            name="METHYLISOTHIAZOLINONE",
            toxicity=ToxicityLevel.HIGH,
            irritation=IrritationLevel.SEVERE,
            allergen=True,
            penalty=35,
            source="SCCS 2024",
        ),
        DetergentHazardEntry(
            name="BENZISOTHIAZOLINONE",
            toxicity=ToxicityLevel.MEDIUM,
            irritation=IrritationLevel.MODERATE,
            allergen=True,
            penalty=20,
            source="ECHA CLP",
        ),
        # Chlorinated solvents
        DetergentHazardEntry(
            name="DICHLOROMETHANE",
            toxicity=ToxicityLevel.VERY_HIGH,
            carcinogen="suspected",
            penalty=50,
            source="IARC Monographs",
        ),
        DetergentHazardEntry(
            name="PERCHLOROETHYLENE",
            toxicity=ToxicityLevel.HIGH,
            carcinogen="probable",
            penalty=45,
            source="EPA IRIS",
        ),
        # Bleaching agents
        DetergentHazardEntry(
            name="SODIUM HYPOCHLORITE",
            toxicity=ToxicityLevel.HIGH,
            irritation=IrritationLevel.SEVERE,
            corrosive=True,
            penalty=25,
            source="ECHA C&L Inventory",
        ),
        # Fragrance allergens
        DetergentHazardEntry(
            name="LIMONENE",
            irritation=IrritationLevel.MILD,
            allergen=True,
            penalty=5,
            source="Cosmetic Regulation EC",
        ),
        DetergentHazardEntry(
            name="LINALOOL",
            irritation=IrritationLevel.MILD,
            allergen=True,
            penalty=5,
            source="Cosmetic Regulation EC",
        ),
        DetergentHazardEntry(
            name="HEXYL CINNAMAL",
            irritation=IrritationLevel.MODERATE,
            allergen=True,
            penalty=8,
            source="SCCS Opinion",
        ),
    ]
)


# =============================================================================
# Eco-Friendly Ingredients
# =============================================================================

ECO_INGREDIENTS: Final[Mapping[str, EcoIngredientEntry]] = build_table(
    [
        EcoIngredientEntry(
            name="COCO GLUCOSIDE",
            biodegradable=True,
            plant_based=True,
            gentle=True,
            bonus=15,
            source="ECOCERT Standards",
        ),
        EcoIngredientEntry(
            name="LAURYL GLUCOSIDE",
            biodegradable=True,
            plant_based=True,
            bonus=12,
            source="Nordic Swan Criteria",
        ),
        EcoIngredientEntry(
            name="DECYL GLUCOSIDE",
            biodegradable=True,
            gentle=True,
            bonus=10,
            source="NaTrue Certification",
        ),
        EcoIngredientEntry(
            name="SODIUM BICARBONATE",
            biodegradable=True,
            natural=True,
            bonus=20,
            source="FDA GRAS",
        ),
        EcoIngredientEntry(
            name="CITRIC ACID",
            biodegradable=True,
            natural=True,
            bonus=15,
            source="Natural derivation",
        ),
        EcoIngredientEntry(
            name="SODIUM PERCARBONATE",
            biodegradable=True,
            bonus=18,
            source="EU Ecolabel",
        ),
        EcoIngredientEntry(
            name="PROTEASE",
            biodegradable=True,
            bonus=10,
            source="OECD 301 Test",
        ),
        EcoIngredientEntry(
            name="AMYLASE",
            biodegradable=True,
            bonus=8,
            source="Enzyme efficiency studies",
        ),
        EcoIngredientEntry(
            name="LIPASE",
            biodegradable=True,
            bonus=8,
            source="Biodegradation studies",
        ),
        EcoIngredientEntry(
            name="LAVANDULA ANGUSTIFOLIA OIL",
            natural=True,
            bonus=5,
            source="Aromatherapy research",
        ),
        EcoIngredientEntry(
            name="TEA TREE OIL",
            natural=True,
            bonus=8,
            source="Clinical studies",
        ),
    ]
)


# =============================================================================
# Certifications
# =============================================================================

DETERGENT_CERTIFICATIONS: Final[Mapping[str, CertificationEntry]] = build_table(
    [
        CertificationEntry(name="ECOCERT", bonus=15, credibility=Credibility.HIGH),
        CertificationEntry(name="EU ECOLABEL", bonus=20, credibility=Credibility.HIGH),
        CertificationEntry(name="NORDIC SWAN", bonus=18, credibility=Credibility.HIGH),
        CertificationEntry(
            name="CRADLE TO CRADLE", bonus=25, credibility=Credibility.HIGH
        ),
        CertificationEntry(
            name="NATURE ET PROGRES", bonus=12, credibility=Credibility.MEDIUM
        ),
        CertificationEntry(
            name="ECOGARANTIE", bonus=10, credibility=Credibility.MEDIUM
        ),
    ]
)

DETERGENT_SOURCES: Final[tuple[str, ...]] = (
    "REACH",
    "ECHA 2024",
    "EU Ecolabel criteria",
)

DETERGENT_METHODOLOGY: Final[str] = "REACH + ECHA 2024 + EU Ecolabel criteria"
