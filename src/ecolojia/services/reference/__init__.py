"""Static reference data for the scoring engine.

Tables are built once at import time and exposed as read-only mappings.
"""

from ecolojia.services.reference.cosmetic import (
    ALLERGENS,
    BENEFICIAL_ACTIVES,
    BENEFIT_CATEGORIES,
    ENDOCRINE_DISRUPTORS,
    KNOWN_COSMETIC_BRANDS,
    SENSITIVE_SKIN_IRRITANTS,
)
from ecolojia.services.reference.detergent import (
    DETERGENT_CERTIFICATIONS,
    DETERGENT_HAZARDS,
    ECO_INGREDIENTS,
)
from ecolojia.services.reference.keywords import (
    CATEGORY_NAME_KEYWORDS,
    NATURAL_MARKERS,
    SYNTHETIC_MARKERS,
    WATER_SYNONYMS,
)
from ecolojia.services.reference.models import (
    AllergenEntry,
    BenefitEntry,
    CertificationEntry,
    DetergentHazardEntry,
    EcoIngredientEntry,
    HazardEntry,
)


__all__ = [
    "ALLERGENS",
    "BENEFICIAL_ACTIVES",
    "BENEFIT_CATEGORIES",
    "CATEGORY_NAME_KEYWORDS",
    "DETERGENT_CERTIFICATIONS",
    "DETERGENT_HAZARDS",
    "ECO_INGREDIENTS",
    "ENDOCRINE_DISRUPTORS",
    "KNOWN_COSMETIC_BRANDS",
    "NATURAL_MARKERS",
    "SENSITIVE_SKIN_IRRITANTS",
    "SYNTHETIC_MARKERS",
    "WATER_SYNONYMS",
    "AllergenEntry",
    "BenefitEntry",
    "CertificationEntry",
    "DetergentHazardEntry",
    "EcoIngredientEntry",
    "HazardEntry",
]
