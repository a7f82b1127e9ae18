"""
Weights Module - list weight calculation

Converts each ranked list's credibility into an integer weight.

Components:
- WeightCalculator: versioned calculator base and version table
- WeightCalculatorV1: reference algorithm (algorithm_version 1)
- BulkWeightCalculator: per-configuration recalculation with error isolation
- Services: configuration / all-configurations / single ranked list entry points
"""

from .errors import (
    WeightCalculationError,
    UnsupportedAlgorithmVersionError,
    PenaltyScopeMismatchError,
    RankedListNotFoundError,
)
from .models import (
    WeightCalculationDetails,
    PenaltyContribution,
    VoterCountCalculation,
    PenaltySummary,
    QualityBonus,
    FinalCalculation,
)
from .scoring import (
    BASE_WEIGHT,
    MAX_PENALTY_PERCENTAGE,
    condensed_median,
    voter_count_penalty,
    apply_quality_bonus,
    cap_penalty,
    round_half_up,
    weight_after_penalty,
)
from .median import median_voter_count, resolve_median_voter_count
from .calculator import WeightCalculator, register_weight_calculator, supported_versions
# Registers algorithm version 1
from .calculator_v1 import WeightCalculatorV1
from .bulk import BulkWeightCalculator
from .service import calculate_weights, recalculate_all_configurations, recalculate_ranked_list


__all__ = [
    # Errors
    "WeightCalculationError",
    "UnsupportedAlgorithmVersionError",
    "PenaltyScopeMismatchError",
    "RankedListNotFoundError",
    # Audit models
    "WeightCalculationDetails",
    "PenaltyContribution",
    "VoterCountCalculation",
    "PenaltySummary",
    "QualityBonus",
    "FinalCalculation",
    # Scoring utilities
    "BASE_WEIGHT",
    "MAX_PENALTY_PERCENTAGE",
    "condensed_median",
    "voter_count_penalty",
    "apply_quality_bonus",
    "cap_penalty",
    "round_half_up",
    "weight_after_penalty",
    "median_voter_count",
    "resolve_median_voter_count",
    # Calculators
    "WeightCalculator",
    "WeightCalculatorV1",
    "register_weight_calculator",
    "supported_versions",
    "BulkWeightCalculator",
    # Services
    "calculate_weights",
    "recalculate_all_configurations",
    "recalculate_ranked_list",
]
