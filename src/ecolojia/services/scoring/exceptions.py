"""Scoring engine exceptions.

The analysis services raise these; the HTTP layer maps them to responses.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base exception for analysis errors."""


class AnalysisValidationError(AnalysisError):
    """Raised when the input cannot be analyzed."""

    code: str = "INVALID_INGREDIENTS"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(message)


class MissingIngredientsError(AnalysisValidationError):
    """Raised when no ingredient could be extracted from the input."""

    code = "MISSING_INGREDIENTS"


class InvalidIngredientsError(AnalysisValidationError):
    """Raised when the ingredient input has an unsupported shape."""

    code = "INVALID_INGREDIENTS"


class AnalysisComputationError(AnalysisError):
    """Raised when an analyzer fails unexpectedly."""

    def __init__(self, category: str, cause: Exception) -> None:
        self.category = category
        self.cause = cause
        super().__init__(f"{category} analysis failed: {cause}")
