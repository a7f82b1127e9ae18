"""
WeightCalculatorV1 - reference weight algorithm

Steps:
1. Start from the base weight (100)
2. Resolve the active penalties (tagged on the list AND configured)
3. Compute each penalty's contribution
4. Sum and cap at 100%
5. Subtract the bonus pool for high quality sources (floored at 0)
6. Apply the penalty to the base weight and round
7. Floor at the configuration's min_list_weight
8. Record an audit in calculated_weight_details
"""
from datetime import datetime, timezone
from typing import List

from constants import DynamicPenaltyType, PenaltySource
from database.models import StaticPenalty
from repositories import ActivePenalty, PenaltyRepository
from .calculator import WeightCalculator, register_weight_calculator
from .errors import PenaltyScopeMismatchError
from .models import (
    FinalCalculation,
    PenaltyContribution,
    PenaltySummary,
    QualityBonus,
    VoterCountCalculation,
    WeightCalculationDetails,
)
from .scoring import (
    apply_quality_bonus,
    cap_penalty,
    voter_count_penalty,
    voter_count_ratio,
    weight_after_penalty,
)


@register_weight_calculator(1)
class WeightCalculatorV1(WeightCalculator):
    """Penalty-percentage weighting with a voter count power curve."""

    async def calculate_weight(self) -> int:
        median = await self.resolve_median_voter_count()

        active_penalties = await PenaltyRepository(self.session).get_active_for_list(
            self.list.id, self.ranking_configuration.id
        )
        contributions = [self._contribution(active, median) for active in active_penalties]

        summary = self._summarize(contributions)
        quality_bonus = self._quality_bonus(summary.total_after_cap)
        final = self._final_calculation(quality_bonus.penalty_after)

        details = WeightCalculationDetails(
            calculation_version=self.version,
            calculated_at=datetime.now(timezone.utc).isoformat(),
            high_quality_source=bool(self.list.high_quality_source),
            median_voter_count=median,
            penalty_summary=summary,
            quality_bonus=quality_bonus,
            final_calculation=final,
            old_weight=self.previous_weight,
            new_weight=final.final_weight,
            penalties=contributions,
        )
        self.ranked_list.calculated_weight_details = details.to_dict()

        return final.final_weight

    # ============================================
    # CONTRIBUTIONS
    # ============================================

    def _contribution(self, active: ActivePenalty, median: float) -> PenaltyContribution:
        penalty = active.penalty
        if not penalty.applies_to(self.list.media_type):
            raise PenaltyScopeMismatchError(penalty.id, penalty.media_type, self.list.id, self.list.media_type)

        max_value = float(active.application.value or 0)
        identity = {
            "penalty_id": penalty.id,
            "penalty_name": penalty.name,
            "penalty_application_id": active.application.id,
            "list_penalty_id": active.list_penalty.id,
            "max_value": max_value,
        }

        kind = penalty.kind
        if isinstance(kind, StaticPenalty):
            return PenaltyContribution(source=PenaltySource.STATIC.value, value=max_value, **identity)

        dynamic_type = kind.dynamic_type

        if dynamic_type == DynamicPenaltyType.NUMBER_OF_VOTERS:
            return self._voter_count_contribution(identity, max_value, median)

        if dynamic_type == DynamicPenaltyType.NUM_YEARS_COVERED:
            # Flat value whenever coverage is recorded
            years_covered = self.list.num_years_covered
            return PenaltyContribution(
                source=PenaltySource.DYNAMIC_TEMPORAL.value,
                dynamic_type=dynamic_type.value,
                attribute_value=years_covered,
                value=max_value if years_covered is not None else 0.0,
                **identity
            )

        flag = self._attribute_flag(dynamic_type)
        return PenaltyContribution(
            source=PenaltySource.DYNAMIC_ATTRIBUTE.value,
            dynamic_type=dynamic_type.value,
            attribute_value=flag,
            value=max_value if flag else 0.0,
            **identity
        )

    def _voter_count_contribution(self, identity: dict, max_value: float, median: float) -> PenaltyContribution:
        voter_count = self.list.number_of_voters
        exponent = float(self.ranking_configuration.exponent)

        if voter_count is None:
            formula, ratio = "0 (voter count unknown)", None
        elif voter_count <= 1:
            formula, ratio = "max_value (voter_count <= 1)", None
        elif voter_count >= median:
            formula, ratio = "0 (voter_count >= median)", None
        else:
            formula = "max_value * ((1 - (voter_count - 1) / (median - 1)) ** exponent)"
            ratio = voter_count_ratio(voter_count, median)

        return PenaltyContribution(
            source=PenaltySource.DYNAMIC_VOTER_COUNT.value,
            dynamic_type=DynamicPenaltyType.NUMBER_OF_VOTERS.value,
            attribute_value=voter_count,
            value=voter_count_penalty(voter_count, median, max_value, exponent),
            calculation=VoterCountCalculation(
                voter_count=voter_count,
                median_voter_count=median,
                exponent=exponent,
                formula=formula,
                ratio=ratio,
            ),
            **identity
        )

    def _attribute_flag(self, dynamic_type: DynamicPenaltyType) -> bool:
        if dynamic_type == DynamicPenaltyType.VOTER_NAMES_UNKNOWN:
            return bool(self.list.voter_names_unknown)
        if dynamic_type == DynamicPenaltyType.VOTER_COUNT_UNKNOWN:
            return bool(self.list.voter_count_unknown)
        if dynamic_type == DynamicPenaltyType.VOTER_COUNT_ESTIMATED:
            return bool(self.list.voter_count_estimated)
        if dynamic_type == DynamicPenaltyType.LOCATION_SPECIFIC:
            return bool(self.list.location_specific)
        if dynamic_type == DynamicPenaltyType.CATEGORY_SPECIFIC:
            return bool(self.list.category_specific)
        raise ValueError(f"Unhandled dynamic penalty type: {dynamic_type}")

    # ============================================
    # TOTALS
    # ============================================

    @staticmethod
    def _summarize(contributions: List[PenaltyContribution]) -> PenaltySummary:
        def total(*sources: PenaltySource) -> float:
            values = {s.value for s in sources}
            return sum(c.value for c in contributions if c.source in values)

        total_before_cap = sum(c.value for c in contributions)
        return PenaltySummary(
            total_static_penalties=total(PenaltySource.STATIC),
            total_voter_count_penalties=total(PenaltySource.DYNAMIC_VOTER_COUNT),
            total_attribute_penalties=total(PenaltySource.DYNAMIC_ATTRIBUTE, PenaltySource.DYNAMIC_TEMPORAL),
            total_before_cap=total_before_cap,
            total_after_cap=cap_penalty(total_before_cap),
        )

    def _quality_bonus(self, total_penalty_percentage: float) -> QualityBonus:
        applied = bool(self.list.high_quality_source)
        bonus_pool = float(self.ranking_configuration.bonus_pool_percentage)
        return QualityBonus(
            applied=applied,
            bonus_pool_percentage=bonus_pool,
            penalty_before=total_penalty_percentage,
            penalty_after=apply_quality_bonus(total_penalty_percentage, bonus_pool, applied),
        )

    def _final_calculation(self, total_penalty_percentage: float) -> FinalCalculation:
        weight_before_floor = weight_after_penalty(total_penalty_percentage, self.base_weight)
        return FinalCalculation(
            base_weight=self.base_weight,
            minimum_weight=self.minimum_weight,
            total_penalty_percentage=total_penalty_percentage,
            weight_before_floor=weight_before_floor,
            final_weight=max(weight_before_floor, self.minimum_weight),
        )
