"""Score aggregation shared by the analysis services."""

from ecolojia.services.scoring.aggregator import (
    aggregate_score,
    clamp,
    round_half_up,
    to_score,
)
from ecolojia.services.scoring.exceptions import (
    AnalysisComputationError,
    AnalysisError,
    AnalysisValidationError,
    InvalidIngredientsError,
    MissingIngredientsError,
)
from ecolojia.services.scoring.profiles import (
    COSMETIC_SCORING,
    DEFAULT_RISK_POLICY,
    DETERGENT_SCORING,
    RiskPolicy,
    ScoringProfile,
)


__all__ = [
    "COSMETIC_SCORING",
    "DEFAULT_RISK_POLICY",
    "DETERGENT_SCORING",
    "AnalysisComputationError",
    "AnalysisError",
    "AnalysisValidationError",
    "InvalidIngredientsError",
    "MissingIngredientsError",
    "RiskPolicy",
    "ScoringProfile",
    "aggregate_score",
    "clamp",
    "round_half_up",
    "to_score",
]
