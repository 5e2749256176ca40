"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.requests import (
    CosmeticAnalysisRequestFactory,
    DetergentAnalysisRequestFactory,
)


__all__ = [
    "CosmeticAnalysisRequestFactory",
    "DetergentAnalysisRequestFactory",
]
