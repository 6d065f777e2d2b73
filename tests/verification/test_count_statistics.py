"""Tests for the count statistics helpers."""

import math

import pytest

from shufflax.verification import (
    CountSummary,
    chi_square_uniformity,
    ideal_standard_deviation,
    summarize_counts,
)


class TestSummarizeCounts:
    """Tests for summarize_counts()."""

    def test_population_statistics(self):
        summary = summarize_counts([3, 1])
        assert summary == CountSummary(mean=2.0, variance=1.0, std=1.0)

    def test_uniform_counts_have_zero_spread(self):
        summary = summarize_counts([10, 10, 10, 10])
        assert summary.mean == 10.0
        assert summary.variance == 0.0
        assert summary.std == 0.0

    def test_single_count(self):
        summary = summarize_counts([7])
        assert summary.mean == 7.0
        assert summary.std == 0.0

    def test_empty(self):
        assert summarize_counts([]) == CountSummary(0.0, 0.0, 0.0)

    def test_known_values(self):
        summary = summarize_counts([2, 4, 4, 4, 5, 5, 7, 9])
        assert summary.mean == pytest.approx(5.0)
        assert summary.variance == pytest.approx(4.0)
        assert summary.std == pytest.approx(2.0)


class TestIdealStandardDeviation:
    """Tests for ideal_standard_deviation()."""

    def test_two_outcomes(self):
        assert ideal_standard_deviation(4, 2) == pytest.approx(1.0)

    def test_six_outcomes(self):
        expected = math.sqrt(1_000_000 * (1 / 6) * (5 / 6))
        assert ideal_standard_deviation(1_000_000, 6) == pytest.approx(expected)
        assert ideal_standard_deviation(1_000_000, 6) == pytest.approx(372.68, abs=0.01)

    def test_single_outcome_has_no_spread(self):
        assert ideal_standard_deviation(100, 1) == 0.0

    @pytest.mark.parametrize("trials,outcomes", [(0, 6), (100, 0), (-5, 3)])
    def test_degenerate(self, trials, outcomes):
        assert ideal_standard_deviation(trials, outcomes) == 0.0


class TestChiSquareUniformity:
    """Tests for chi_square_uniformity()."""

    def test_perfectly_uniform(self):
        statistic, p_value = chi_square_uniformity([10, 10, 10])
        assert statistic == pytest.approx(0.0)
        assert p_value == pytest.approx(1.0)

    def test_strongly_skewed(self):
        statistic, p_value = chi_square_uniformity([100, 0])
        assert statistic == pytest.approx(100.0)
        assert p_value < 1e-10

    def test_fewer_than_two_counts(self):
        assert chi_square_uniformity([42]) == (0.0, 1.0)
        assert chi_square_uniformity([]) == (0.0, 1.0)
