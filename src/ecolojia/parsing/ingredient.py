"""Ingredient input resolution and normalization.

Collaborators hand us a loosely shaped payload: the ingredients may sit in
one of several fields and may be raw label text or an already split list.
This module resolves that input into a single tagged source and turns it
into the normalized token tuple every analyzer works on.

Example:
    ```python
    source = resolve_ingredient_source({"composition": "Ingredients: AQUA, GLYCERIN"})
    tokens = normalize_ingredients(source.value)
    # ("AQUA", "GLYCERIN")
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

from ecolojia.parsing.exceptions import (
    InvalidIngredientsInputError,
    MissingIngredientsInputError,
)
from ecolojia.services.reference.keywords import WATER_SYNONYMS


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class SourceKind(StrEnum):
    """Shape of the resolved ingredient input."""

    LIST = "list"
    COMPOSITION = "composition"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class IngredientSource:
    """Ingredient input picked from a payload."""

    kind: SourceKind
    field: str
    value: str | list[str] | tuple[str, ...]


# Payload keys accepted for each logical field (snake_case and camelCase)
_FIELD_KEYS: Final[dict[str, tuple[str, ...]]] = {
    "inci_list": ("inci_list", "inciList", "ingredient_list", "ingredientList"),
    "inci": ("inci",),
    "ingredients": ("ingredients",),
    "composition": ("composition",),
}

# Explicit lists win over any text; composition text wins over generic text
_LIST_PRIORITY: Final[tuple[str, ...]] = (
    "inci_list",
    "inci",
    "ingredients",
    "composition",
)
_TEXT_PRIORITY: Final[tuple[str, ...]] = (
    "composition",
    "ingredients",
    "inci_list",
    "inci",
)

_LABEL_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:ingr[eé]dients?|inci|composition)\s*:\s*",
    re.IGNORECASE,
)
_PARENTHESES_RE: Final[re.Pattern[str]] = re.compile(r"\([^()]*\)|\[[^\[\]]*\]")
_PERCENT_RE: Final[re.Pattern[str]] = re.compile(r"(?<![\w.])\d+(?:[.,]\d+)?\s*%")
_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[,;]")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def resolve_ingredient_source(payload: Mapping[str, Any]) -> IngredientSource:
    """Pick the ingredient input out of a product payload.

    Priority: any list-valued field, then ``composition`` text, then
    generic ingredient text. Empty lists and blank text are skipped so the
    next field gets its turn.

    Args:
        payload: Product mapping from a collaborator.

    Returns:
        The resolved ingredient source.

    Raises:
        MissingIngredientsInputError: If no ingredient field is present, or
            every present one is empty.
        InvalidIngredientsInputError: If the present fields hold neither text
            nor a list.
    """
    found: dict[str, Any] = {}
    for field, keys in _FIELD_KEYS.items():
        for key in keys:
            if key in payload:
                found[field] = payload[key]
                break

    if not found:
        msg = "No ingredient field in payload"
        raise MissingIngredientsInputError(msg)

    for field in _LIST_PRIORITY:
        value = found.get(field)
        if isinstance(value, (list, tuple)) and not _is_blank(value):
            return IngredientSource(kind=SourceKind.LIST, field=field, value=value)

    for field in _TEXT_PRIORITY:
        value = found.get(field)
        if isinstance(value, str) and not _is_blank(value):
            kind = SourceKind.COMPOSITION if field == "composition" else SourceKind.TEXT
            return IngredientSource(kind=kind, field=field, value=value)

    if any(isinstance(v, (str, list, tuple)) for v in found.values()):
        msg = f"Ingredient fields are empty ({', '.join(found)})"
        raise MissingIngredientsInputError(msg)

    types = ", ".join(f"{k}={type(v).__name__}" for k, v in found.items())
    msg = f"Unsupported ingredient field type ({types})"
    raise InvalidIngredientsInputError(msg)


def normalize_ingredients(value: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize ingredient text or a list of ingredients into tokens.

    Tokens are trimmed, uppercased and deduplicated in first-seen order.
    Text input additionally loses its leading label, parenthetical notes and
    percentages before being split on commas and semicolons.

    Raises:
        InvalidIngredientsInputError: If the value is not text or a list of text.
    """
    if isinstance(value, str):
        pieces = _split_text(value)
    elif isinstance(value, (list, tuple)):
        pieces = []
        for entry in value:
            if not isinstance(entry, str):
                msg = (
                    "Ingredient list entries must be strings, "
                    f"got {type(entry).__name__}"
                )
                raise InvalidIngredientsInputError(msg)
            pieces.append(entry)
    else:
        msg = f"Ingredients must be text or a list, got {type(value).__name__}"
        raise InvalidIngredientsInputError(msg)

    tokens: dict[str, None] = {}
    for piece in pieces:
        token = _clean_token(piece)
        if token:
            tokens.setdefault(token)
    return tuple(tokens)


def strip_water(tokens: Iterable[str]) -> tuple[str, ...]:
    """Drop water synonyms, which carry no formulation information."""
    return tuple(token for token in tokens if token not in WATER_SYNONYMS)


def _split_text(text: str) -> list[str]:
    text = _LABEL_RE.sub("", text, count=1)
    # Nested notes need several passes
    previous = None
    while previous != text:
        previous = text
        text = _PARENTHESES_RE.sub(" ", text)
    text = _PERCENT_RE.sub(" ", text)
    return _SEPARATOR_RE.split(text)


def _clean_token(piece: str) -> str:
    token = _WHITESPACE_RE.sub(" ", piece).strip(" .*")
    return token.upper()


def _is_blank(value: str | list[Any] | tuple[Any, ...]) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return all(isinstance(entry, str) and not entry.strip() for entry in value)
