"""Parsing exceptions.

This module defines exceptions raised while resolving and normalizing
ingredient input.
"""

from __future__ import annotations


class ParsingError(Exception):
    """Base exception for parsing errors."""


class MissingIngredientsInputError(ParsingError):
    """Raised when a payload carries no ingredient field at all."""


class InvalidIngredientsInputError(ParsingError):
    """Raised when the ingredient field is not a string or a list of strings.

    The payload is structurally wrong (null where text was expected, a number,
    a nested object, a list holding non-string entries).
    """
