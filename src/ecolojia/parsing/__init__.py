"""Ingredient input parsing and normalization."""

from ecolojia.parsing.exceptions import (
    InvalidIngredientsInputError,
    MissingIngredientsInputError,
    ParsingError,
)
from ecolojia.parsing.ingredient import (
    IngredientSource,
    SourceKind,
    normalize_ingredients,
    resolve_ingredient_source,
    strip_water,
)


__all__ = [
    "IngredientSource",
    "InvalidIngredientsInputError",
    "MissingIngredientsInputError",
    "ParsingError",
    "SourceKind",
    "normalize_ingredients",
    "resolve_ingredient_source",
    "strip_water",
]
