"""Detergent scoring: ecotoxicity, biodegradability, irritation, environment."""

from ecolojia.services.detergent.service import (
    DetergentAnalysisService,
    analyze_detergent,
)


__all__ = ["DetergentAnalysisService", "analyze_detergent"]
