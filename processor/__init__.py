"""
Processor package for the list weight engine.

- weights: versioned list weight calculators and bulk recalculation
"""

from .weights import (
    WeightCalculator,
    WeightCalculatorV1,
    BulkWeightCalculator,
    calculate_weights,
    recalculate_all_configurations,
    recalculate_ranked_list,
)

__all__ = [
    "WeightCalculator",
    "WeightCalculatorV1",
    "BulkWeightCalculator",
    "calculate_weights",
    "recalculate_all_configurations",
    "recalculate_ranked_list",
]
