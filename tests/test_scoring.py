"""Tests for the pure weight scoring helpers."""

import pytest

from processor.weights.scoring import (
    apply_quality_bonus,
    cap_penalty,
    condensed_median,
    round_half_up,
    voter_count_penalty,
    weight_after_penalty,
)


class TestCondensedMedian:
    def test_condenses_single_voter_lists(self):
        """[1,1,10,25,50,100] -> [1,10,25,50,100] -> 25."""
        assert condensed_median([1, 1, 10, 25, 50, 100]) == 25

    def test_unsorted_input(self):
        assert condensed_median([100, 1, 50, 1, 25, 10, 1]) == 25

    def test_even_length_takes_mean_of_middle_pair(self):
        assert condensed_median([10, 20, 30, 40]) == 25
        assert condensed_median([1, 1, 10, 25]) == 10
        assert condensed_median([10, 15]) == 12.5

    def test_ignores_none(self):
        assert condensed_median([None, 5, None, 7, 9]) == 7

    def test_empty_returns_none(self):
        assert condensed_median([]) is None
        assert condensed_median([None, None]) is None

    def test_only_single_voter_lists(self):
        assert condensed_median([1, 1, 1]) == 1

    def test_other_duplicates_are_kept(self):
        """Only the value 1 is condensed."""
        assert condensed_median([5, 5, 5, 100]) == 5


class TestVoterCountPenalty:
    def test_zero_at_median(self):
        assert voter_count_penalty(50, 50, max_value=40, exponent=2.0) == 0.0

    def test_zero_above_median(self):
        assert voter_count_penalty(500, 50, max_value=40, exponent=2.0) == 0.0

    def test_full_value_at_one_voter(self):
        assert voter_count_penalty(1, 50, max_value=40, exponent=2.0) == 40.0

    def test_full_value_below_one_voter(self):
        assert voter_count_penalty(0, 50, max_value=40, exponent=2.0) == 40.0

    def test_single_voter_checked_before_median(self):
        """A median of 1 still penalizes one-voter lists."""
        assert voter_count_penalty(1, 1, max_value=40, exponent=2.0) == 40.0

    def test_unknown_voter_count(self):
        assert voter_count_penalty(None, 50, max_value=40, exponent=2.0) == 0.0

    def test_midpoint_follows_power_curve(self):
        # ratio = (26 - 1) / (51 - 1) = 0.5 -> 40 * 0.5 ** 2
        assert voter_count_penalty(26, 51, max_value=40, exponent=2.0) == pytest.approx(10.0)

    def test_monotonic_between_one_and_median(self):
        values = [voter_count_penalty(v, 50, max_value=40, exponent=3.0) for v in range(1, 51)]
        assert all(a >= b for a, b in zip(values, values[1:]))
        assert values[0] == 40.0
        assert values[-1] == 0.0

    def test_one_voter_exceeds_median_list(self):
        assert voter_count_penalty(1, 25, 30, 2.0) > voter_count_penalty(25, 25, 30, 2.0)


class TestTotals:
    def test_cap_penalty(self):
        assert cap_penalty(150.0) == 100.0
        assert cap_penalty(42.5) == 42.5

    def test_quality_bonus_subtracts_pool(self):
        assert apply_quality_bonus(30.0, 10.0, True) == 20.0

    def test_quality_bonus_floors_at_zero(self):
        assert apply_quality_bonus(5.0, 10.0, True) == 0.0

    def test_quality_bonus_not_applied(self):
        assert apply_quality_bonus(30.0, 10.0, False) == 30.0

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.4999) == 2

    def test_weight_after_penalty(self):
        assert weight_after_penalty(0) == 100
        assert weight_after_penalty(30) == 70
        assert weight_after_penalty(100) == 0

    def test_weight_after_penalty_rounds_halves_up(self):
        assert weight_after_penalty(14.5) == 86
        assert weight_after_penalty(12.5) == 88
