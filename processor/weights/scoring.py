"""
Constants and utilities for list weight calculation.

Contains:
- Base weight and penalty cap
- Condensed median of voter counts
- Voter count power curve
- Quality bonus, capping and rounding helpers
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional


# ============================================
# WEIGHT CONFIGURATION
# ============================================

BASE_WEIGHT = 100
MAX_PENALTY_PERCENTAGE = 100.0


# ============================================
# MEDIAN VOTER COUNT
# ============================================

def condensed_median(voter_counts: Iterable[Optional[int]]) -> Optional[float]:
    """
    Median of voter counts with all 1s condensed into a single 1.

    Lists reporting a single voter count once, so a flood of
    one-voter lists cannot drag the median down. For an even number of
    values the mean of the two middle values is returned.

    Args:
        voter_counts: number_of_voters values (None entries are ignored)

    Returns:
        The median, or None when no values remain
    """
    numbers = sorted(n for n in voter_counts if n is not None)

    if 1 in numbers:
        numbers = sorted([n for n in numbers if n != 1] + [1])

    if not numbers:
        return None

    middle = len(numbers) // 2
    if len(numbers) % 2:
        return numbers[middle]
    return (numbers[middle - 1] + numbers[middle]) / 2


# ============================================
# PENALTY CURVES
# ============================================

def voter_count_ratio(voter_count: int, median_voter_count: float) -> float:
    """Position of voter_count between 1 voter (0.0) and the median (1.0)."""
    return (voter_count - 1) / (median_voter_count - 1)


def voter_count_penalty(
    voter_count: Optional[int],
    median_voter_count: float,
    max_value: float,
    exponent: float
) -> float:
    """
    Power curve penalty for lists with few voters.

    - Unknown voter count: 0
    - 1 voter or fewer: max_value
    - At or above the median: 0
    - Between: max_value * (1 - ratio) ** exponent

    Args:
        voter_count: The list's number_of_voters
        median_voter_count: Reference median for the configuration
        max_value: PenaltyApplication value (percentage)
        exponent: Curve exponent from the ranking configuration

    Returns:
        Penalty percentage in [0, max_value]
    """
    if voter_count is None:
        return 0.0
    if voter_count <= 1:
        return float(max_value)
    if voter_count >= median_voter_count:
        return 0.0

    ratio = voter_count_ratio(voter_count, median_voter_count)
    penalty = max_value * ((1.0 - ratio) ** exponent)
    return min(max(penalty, 0.0), float(max_value))


# ============================================
# TOTALS
# ============================================

def cap_penalty(total_penalty_percentage: float) -> float:
    """Cap a summed penalty at 100%."""
    return min(total_penalty_percentage, MAX_PENALTY_PERCENTAGE)


def apply_quality_bonus(
    total_penalty_percentage: float,
    bonus_pool_percentage: float,
    high_quality_source: bool
) -> float:
    """Subtract the bonus pool from a high quality list's penalty, floored at 0."""
    if not high_quality_source:
        return total_penalty_percentage
    return max(total_penalty_percentage - bonus_pool_percentage, 0.0)


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def weight_after_penalty(total_penalty_percentage: float, base_weight: int = BASE_WEIGHT) -> int:
    """Apply a penalty percentage to the base weight and round."""
    # Decimal keeps 14.5% of 100 at exactly 85.5 before rounding
    remaining = 1 - Decimal(str(total_penalty_percentage)) / 100
    return round_half_up(Decimal(base_weight) * remaining)
