"""Cosmetic scoring: endocrine disruptors, actives, allergens, formulation."""

from ecolojia.services.cosmetic.service import CosmeticAnalysisService, analyze_cosmetic


__all__ = ["CosmeticAnalysisService", "analyze_cosmetic"]
