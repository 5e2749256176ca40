"""Confidence calculation for analysis results."""

from ecolojia.services.confidence.service import (
    COSMETIC_CONFIDENCE,
    DETERGENT_CONFIDENCE,
    FOOD_CONFIDENCE,
    ConfidenceFactors,
    ConfidenceProfile,
    calculate_confidence,
    confidence_label,
    is_publishable,
)


__all__ = [
    "COSMETIC_CONFIDENCE",
    "DETERGENT_CONFIDENCE",
    "FOOD_CONFIDENCE",
    "ConfidenceFactors",
    "ConfidenceProfile",
    "calculate_confidence",
    "confidence_label",
    "is_publishable",
]
