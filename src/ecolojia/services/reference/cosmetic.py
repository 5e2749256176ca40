"""Cosmetic reference tables (INCI names).

Simplified INCI knowledge base: endocrine disruptors, sensitive-skin
irritants, fragrance allergens and beneficial actives, each with the
citation it was taken from.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ecolojia.schemas.enums import Level
from ecolojia.services.reference.models import (
    AllergenEntry,
    BenefitEntry,
    HazardEntry,
    build_table,
)


# =============================================================================
# Endocrine Disruptors
# =============================================================================

ENDOCRINE_DISRUPTORS: Final[Mapping[str, HazardEntry]] = build_table(
    [
        HazardEntry(
            name="BUTYLPARABEN",
            risk_level=Level.HIGH,
            effect="Mimétisme œstrogène",
            source="ANSM 2024",
        ),
        HazardEntry(
            name="PROPYLPARABEN",
            risk_level=Level.MEDIUM,
            effect="Perturbation hormonale",
            source="EFSA 2023",
        ),
        HazardEntry(
            name="BENZOPHENONE-3",
            risk_level=Level.HIGH,
            effect="Absorption cutanée élevée",
            source="ANSES 2024",
        ),
        HazardEntry(
            name="TRICLOSAN",
            risk_level=Level.HIGH,
            effect="Résistance antibiotique",
            source="OMS 2023",
        ),
        HazardEntry(
            name="BHT",
            risk_level=Level.MEDIUM,
            effect="Accumulation tissulaire",
            source="EFSA 2024",
        ),
        HazardEntry(
            name="BHA",
            risk_level=Level.HIGH,
            effect="Cancérogène possible",
            source="IARC 2024",
        ),
        HazardEntry(
            name="PHENOXYETHANOL",
            risk_level=Level.LOW,
            effect="Toxique système nerveux >1%",
            source="ANSM 2024",
        ),
        HazardEntry(
            name="METHYLISOTHIAZOLINONE",
            risk_level=Level.HIGH,
            effect="Allergisant sévère",
            source="SCCS 2024",
        ),
        HazardEntry(
            name="DMDM HYDANTOIN",
            risk_level=Level.MEDIUM,
            effect="Libérateur formaldéhyde",
            source="SCCS 2023",
        ),
    ]
)


# =============================================================================
# Sensitive-Skin Irritants
# =============================================================================

_IRRITANT_EFFECT: Final[str] = "Irritant potentiel peau sensible"

SENSITIVE_SKIN_IRRITANTS: Final[Mapping[str, HazardEntry]] = build_table(
    HazardEntry(
        name=name,
        risk_level=Level.LOW,
        effect=_IRRITANT_EFFECT,
        source="SCCS 2024",
    )
    for name in (
        "ALCOHOL DENAT",
        "PARFUM",
        "FRAGRANCE",
        "ESSENTIAL OIL",
        "SODIUM LAURYL SULFATE",
        "SODIUM LAURETH SULFATE",
    )
)

IRRITANT_RECOMMENDATION: Final[str] = "Éviter si peau réactive"


# =============================================================================
# Allergens
# =============================================================================

ALLERGENS: Final[Mapping[str, AllergenEntry]] = build_table(
    [
        AllergenEntry(name="LIMONENE", prevalence=Level.HIGH, source="REVIDAL 2024"),
        AllergenEntry(name="LINALOOL", prevalence=Level.HIGH, source="REVIDAL 2024"),
        AllergenEntry(
            name="CITRONELLOL", prevalence=Level.MEDIUM, source="REVIDAL 2024"
        ),
        AllergenEntry(name="GERANIOL", prevalence=Level.MEDIUM, source="REVIDAL 2024"),
        AllergenEntry(
            name="BENZYL ALCOHOL", prevalence=Level.MEDIUM, source="SCCS 2024"
        ),
        AllergenEntry(name="BENZYL BENZOATE", prevalence=Level.LOW, source="SCCS 2024"),
        AllergenEntry(name="COUMARIN", prevalence=Level.MEDIUM, source="REVIDAL 2024"),
        AllergenEntry(name="EUGENOL", prevalence=Level.HIGH, source="REVIDAL 2024"),
        AllergenEntry(name="FARNESOL", prevalence=Level.LOW, source="REVIDAL 2024"),
    ]
)


# =============================================================================
# Beneficial Actives
# =============================================================================

BENEFICIAL_ACTIVES: Final[Mapping[str, BenefitEntry]] = build_table(
    [
        BenefitEntry(
            name="HYALURONIC ACID", benefit="Hydratation", evidence_level=Level.HIGH
        ),
        BenefitEntry(
            name="NIACINAMIDE", benefit="Anti-inflammatoire", evidence_level=Level.HIGH
        ),
        BenefitEntry(name="RETINOL", benefit="Anti-âge", evidence_level=Level.HIGH),
        BenefitEntry(
            name="CERAMIDE", benefit="Barrière cutanée", evidence_level=Level.HIGH
        ),
        BenefitEntry(
            name="ALOE BARBADENSIS", benefit="Apaisant", evidence_level=Level.MEDIUM
        ),
        BenefitEntry(
            name="TOCOPHEROL", benefit="Antioxydant", evidence_level=Level.HIGH
        ),
        BenefitEntry(
            name="ASCORBIC ACID", benefit="Antioxydant", evidence_level=Level.HIGH
        ),
        BenefitEntry(
            name="PANTHENOL", benefit="Réparateur", evidence_level=Level.MEDIUM
        ),
        BenefitEntry(name="GLYCERIN", benefit="Humectant", evidence_level=Level.HIGH),
        BenefitEntry(name="ALLANTOIN", benefit="Apaisant", evidence_level=Level.MEDIUM),
        BenefitEntry(name="SQUALANE", benefit="Émollient", evidence_level=Level.LOW),
    ]
)

# Benefit families reported alongside the individual actives
BENEFIT_CATEGORIES: Final[Mapping[str, frozenset[str]]] = MappingProxyType(
    {
        "Hydratation": frozenset({"HYALURONIC ACID", "GLYCERIN", "CERAMIDE"}),
        "Anti-âge": frozenset({"RETINOL", "NIACINAMIDE", "ASCORBIC ACID"}),
        "Apaisant": frozenset({"ALOE BARBADENSIS", "PANTHENOL", "ALLANTOIN"}),
        "Protection": frozenset({"TOCOPHEROL"}),
    }
)


# =============================================================================
# Brands, Sources
# =============================================================================

# Lowercase brand names recognised in product names
KNOWN_COSMETIC_BRANDS: Final[frozenset[str]] = frozenset(
    {
        "weleda",
        "dr. hauschka",
        "melvita",
        "avène",
        "avene",
        "la roche-posay",
        "eucerin",
        "cattier",
        "logona",
        "lavera",
        "bioderma",
        "nuxe",
        "caudalie",
        "cien",
        "nivea",
        "garnier",
        "l'oréal",
        "l'oreal",
        "sanoflore",
        "so'bio étic",
    }
)

COSMETIC_SOURCES: Final[tuple[str, ...]] = (
    "INCI Database",
    "ANSM 2024",
    "EFSA 2024",
    "SCCS 2024",
)
