"""Input handling shared by the analysis services.

Turns parser failures into analysis validation errors and reads the
optional product fields out of loosely shaped payloads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeVar

from ecolojia.observability.logging import get_logger
from ecolojia.parsing import (
    IngredientSource,
    MissingIngredientsInputError,
    ParsingError,
    normalize_ingredients,
    resolve_ingredient_source,
)
from ecolojia.services.scoring.exceptions import (
    InvalidIngredientsError,
    MissingIngredientsError,
)


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


logger = get_logger(__name__)

EnumT = TypeVar("EnumT", bound=StrEnum)

_NAME_KEYS = ("product_name", "productName", "name")
_TYPE_KEYS = ("product_type", "productType")


def tokenize(ingredients: str | Sequence[str] | None) -> tuple[str, ...]:
    """Normalize ingredients, refusing input that yields no token.

    Raises:
        MissingIngredientsError: If nothing was given or nothing survived
            normalization.
        InvalidIngredientsError: If the input is neither text nor a list of text.
    """
    if ingredients is None:
        msg = "Ingredients are required"
        raise MissingIngredientsError(msg)
    try:
        tokens = normalize_ingredients(ingredients)
    except ParsingError as e:
        raise InvalidIngredientsError(str(e)) from e
    if not tokens:
        msg = "No ingredient could be extracted"
        raise MissingIngredientsError(msg)
    return tokens


def resolve_payload(payload: Mapping[str, Any]) -> IngredientSource:
    """Resolve the ingredient field of a payload.

    Raises:
        MissingIngredientsError: If the payload has no ingredient field.
        InvalidIngredientsError: If the ingredient fields have the wrong type.
    """
    try:
        return resolve_ingredient_source(payload)
    except MissingIngredientsInputError as e:
        raise MissingIngredientsError(str(e)) from e
    except ParsingError as e:
        raise InvalidIngredientsError(str(e)) from e


def payload_name(payload: Mapping[str, Any]) -> str | None:
    """First non-blank product name in the payload."""
    for key in _NAME_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def payload_certifications(payload: Mapping[str, Any]) -> list[str]:
    """Certification labels, accepting a single label as text."""
    value = payload.get("certifications")
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [label for label in value if isinstance(label, str)]
    return []


def payload_product_type(payload: Mapping[str, Any], enum: type[EnumT]) -> EnumT | None:
    """Product type hint, or None when absent or unknown."""
    for key in _TYPE_KEYS:
        value = payload.get(key)
        if not value:
            continue
        try:
            return enum(value)
        except ValueError:
            logger.warning("Ignoring unknown product type", product_type=value)
            return None
    return None


def certification_labels(certifications: Sequence[str]) -> set[str]:
    """Distinct, uppercased, non-blank certification labels."""
    return {label.strip().upper() for label in certifications if label.strip()}
