"""Keyword sets used for classification and confidence signals.

Ingredient markers are uppercase (they are matched against normalized
tokens); product keywords are lowercase (matched against product names).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ecolojia.schemas.enums import (
    CosmeticProductType,
    DetergentProductType,
    ProductCategory,
)


# =============================================================================
# Ingredient Markers
# =============================================================================

WATER_SYNONYMS: Final[frozenset[str]] = frozenset(
    {
        "WATER",
        "AQUA",
        "EAU",
        "AQUA/WATER",
        "WATER/AQUA",
        "AQUA/EAU",
        "EAU/AQUA",
        "AQUA / WATER",
        "WATER / AQUA",
    }
)

NATURAL_MARKERS: Final[tuple[str, ...]] = (
    "EXTRACT",
    "OIL",
    "BUTTER",
    "WAX",
    "ALOE",
    "ROSA",
    "GLUCOSIDE",
    "VINEGAR",
)

SYNTHETIC_MARKERS: Final[tuple[str, ...]] = (
    "SODIUM",
    "POLYMER",
    "SILICONE",
    "PARABEN",
    "SULFATE",
    "SULFONATE",
    "PHOSPHATE",
    "ISOTHIAZOLINONE",
    "CHLOR",
    "PEG-",
)


# =============================================================================
# Product Name Keywords
# =============================================================================

CATEGORY_NAME_KEYWORDS: Final[Mapping[ProductCategory, frozenset[str]]] = (
    MappingProxyType(
        {
            ProductCategory.FOOD: frozenset(
                {
                    "bio",
                    "céréales",
                    "lait",
                    "yaourt",
                    "fromage",
                    "pain",
                    "biscuit",
                    "chocolat",
                    "confiture",
                    "miel",
                    "farine",
                }
            ),
            ProductCategory.COSMETIC: frozenset(
                {
                    "crème",
                    "creme",
                    "shampooing",
                    "shampoo",
                    "gel",
                    "huile",
                    "sérum",
                    "serum",
                    "masque",
                    "démaquillant",
                    "lotion",
                    "baume",
                    "déodorant",
                    "soin",
                    "cosmétique",
                }
            ),
            ProductCategory.DETERGENT: frozenset(
                {
                    "lessive",
                    "détergent",
                    "detergent",
                    "nettoyant",
                    "liquide vaisselle",
                    "savon",
                    "dégraissant",
                    "désinfectant",
                    "ménager",
                }
            ),
        }
    )
)


# =============================================================================
# Product Type Keywords
# =============================================================================
# Checked in declaration order; the first type with a match wins.

COSMETIC_TYPE_KEYWORDS: Final[Mapping[CosmeticProductType, tuple[str, ...]]] = (
    MappingProxyType(
        {
            CosmeticProductType.HAIRCARE: (
                "shampoo",
                "shampooing",
                "après-shampooing",
                "conditioner",
                "cheveux",
                "hair",
            ),
            CosmeticProductType.MAKEUP: (
                "maquillage",
                "makeup",
                "mascara",
                "fond de teint",
                "rouge à lèvres",
                "lipstick",
            ),
            CosmeticProductType.SKINCARE: (
                "crème",
                "creme",
                "cream",
                "lait",
                "sérum",
                "serum",
                "soin",
                "lotion",
                "baume",
                "skincare",
            ),
        }
    )
)

DETERGENT_TYPE_KEYWORDS: Final[Mapping[DetergentProductType, tuple[str, ...]]] = (
    MappingProxyType(
        {
            DetergentProductType.LAUNDRY: ("lessive", "laundry", "adoucissant"),
            DetergentProductType.DISHWASHING: (
                "vaisselle",
                "dishwash",
                "lave-vaisselle",
            ),
            DetergentProductType.ALL_PURPOSE: (
                "multi-usage",
                "multi-surface",
                "nettoyant",
                "all purpose",
                "dégraissant",
                "surface",
            ),
            DetergentProductType.SOAP: ("savon", "soap"),
        }
    )
)
