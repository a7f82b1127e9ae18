"""
Data models for weight calculation audits.

A WeightCalculationDetails record is serialized into
RankedList.calculated_weight_details. calculation_version names the
calculator that wrote it, so older records stay readable after new
algorithm versions are added.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, List, Optional


@dataclass
class VoterCountCalculation:
    """Inputs of the voter count power curve."""
    voter_count: Optional[int]
    median_voter_count: float
    exponent: float
    formula: str
    ratio: Optional[float] = None


@dataclass
class PenaltyContribution:
    """One active penalty and the percentage it contributed."""
    source: str  # constants.PenaltySource
    penalty_id: int
    penalty_name: str
    penalty_application_id: int
    list_penalty_id: int
    max_value: float
    value: float
    dynamic_type: Optional[str] = None
    attribute_value: Any = None
    calculation: Optional[VoterCountCalculation] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PenaltyContribution":
        calculation = data.get("calculation")
        return cls(
            **{
                **data,
                "calculation": VoterCountCalculation(**calculation) if calculation else None,
            }
        )


@dataclass
class PenaltySummary:
    total_static_penalties: float
    total_voter_count_penalties: float
    total_attribute_penalties: float
    total_before_cap: float
    total_after_cap: float


@dataclass
class QualityBonus:
    applied: bool
    bonus_pool_percentage: float
    penalty_before: float
    penalty_after: float


@dataclass
class FinalCalculation:
    base_weight: int
    minimum_weight: int
    total_penalty_percentage: float
    weight_before_floor: int
    final_weight: int


@dataclass
class WeightCalculationDetails:
    """Audit of one weight calculation."""
    calculation_version: int
    calculated_at: str
    high_quality_source: bool
    median_voter_count: float
    penalty_summary: PenaltySummary
    quality_bonus: QualityBonus
    final_calculation: FinalCalculation
    old_weight: Optional[int]
    new_weight: int
    penalties: List[PenaltyContribution] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "WeightCalculationDetails":
        return cls(
            calculation_version=data["calculation_version"],
            calculated_at=data["calculated_at"],
            high_quality_source=data["high_quality_source"],
            median_voter_count=data["median_voter_count"],
            penalty_summary=PenaltySummary(**data["penalty_summary"]),
            quality_bonus=QualityBonus(**data["quality_bonus"]),
            final_calculation=FinalCalculation(**data["final_calculation"]),
            old_weight=data.get("old_weight"),
            new_weight=data["new_weight"],
            penalties=[PenaltyContribution.from_dict(p) for p in data.get("penalties", [])],
        )
