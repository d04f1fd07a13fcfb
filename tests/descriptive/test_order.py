"""
Tests for order statistics: extremes, five-number summary, fences and
interpolated quantiles.

The five-number summary (median splitting) and quantiles(0.25) (linear
interpolation) are different estimators; several tests pin down samples
where they disagree.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from datastats.descriptive import DataStats, Fences, five_number_summary, quantiles
from datastats.descriptive._order import reference_positions


# ═══════════════════════════════════════════════════════════════════════
# Minimum / maximum
# ═══════════════════════════════════════════════════════════════════════


class TestExtremes:

    def test_singleton(self):
        stats = DataStats([1.0])
        assert stats.minimum == 1.0
        assert stats.maximum == 1.0

    def test_all_negative(self):
        stats = DataStats([-5.0, -2.0, -9.0])
        assert stats.minimum == -9.0
        assert stats.maximum == -2.0

    def test_unsorted(self, exam_scores):
        shuffled = list(reversed(exam_scores))
        stats = DataStats(shuffled)
        assert stats.minimum == 60.0
        assert stats.maximum == 100.0

    def test_bounds_hold_for_random_samples(self, rng):
        for size in (1, 2, 3, 10, 101):
            stats = DataStats(rng.normal(5.0, 3.0, size=size))
            assert stats.minimum <= stats.median <= stats.maximum
            assert stats.minimum <= stats.mean <= stats.maximum


# ═══════════════════════════════════════════════════════════════════════
# Median
# ═══════════════════════════════════════════════════════════════════════


class TestMedian:

    def test_odd(self, exam_scores):
        assert DataStats(exam_scores).median == 75.0

    def test_even_averages_middle_pair(self):
        assert DataStats([4.0, 1.0, 3.0, 2.0]).median == 2.5

    def test_forty_integers(self, forty_integers):
        assert DataStats(forty_integers).median == 15.0

    def test_singleton(self):
        assert DataStats([1.0]).median == 1.0

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(64)
        assert DataStats(x).median == np.median(x)


# ═══════════════════════════════════════════════════════════════════════
# Five-number summary
# ═══════════════════════════════════════════════════════════════════════


class TestFiveNumberSummary:

    def test_empty(self):
        assert DataStats().five_number_summary() == []

    def test_singleton(self):
        assert DataStats([7.5]).five_number_summary() == [7.5] * 5

    def test_odd_median_in_both_halves(self):
        """1..5: halves [1,2,3] and [3,4,5]."""
        assert five_number_summary([5, 3, 1, 4, 2]) == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_odd_halves_even_length(self):
        """1..7: halves [1,2,3,4] and [4,5,6,7]."""
        assert five_number_summary(range(1, 8)) == [1.0, 2.5, 4.0, 5.5, 7.0]

    def test_even_disjoint_halves(self):
        """1..4: halves [1,2] and [3,4]."""
        assert five_number_summary([1, 2, 3, 4]) == [1.0, 1.5, 2.5, 3.5, 4.0]

    def test_exam_scores(self, exam_scores):
        assert five_number_summary(exam_scores) == [60.0, 70.0, 75.0, 92.5, 100.0]

    def test_two_values(self):
        assert five_number_summary([2.0, 8.0]) == [2.0, 2.0, 5.0, 8.0, 8.0]

    def test_ends_match_extremes(self, rng):
        for size in (2, 3, 4, 5, 17, 50):
            stats = DataStats(rng.uniform(-10, 10, size=size))
            summary = stats.five_number_summary()
            assert summary[0] == stats.minimum
            assert summary[4] == stats.maximum
            assert summary[2] == stats.median
            assert summary == sorted(summary)


# ═══════════════════════════════════════════════════════════════════════
# Fences
# ═══════════════════════════════════════════════════════════════════════


class TestFences:

    def test_from_quartiles(self):
        """Q1=1.5, Q3=3.5, IQR=2."""
        fences = DataStats([1, 2, 3, 4]).fences()
        assert fences == Fences(lower=-1.5, upper=6.5)

    def test_exam_scores(self, exam_scores):
        """Q1=70, Q3=92.5, IQR=22.5."""
        fences = DataStats(exam_scores).fences()
        assert fences.lower == pytest.approx(36.25)
        assert fences.upper == pytest.approx(126.25)

    def test_outlier_outside(self):
        fences = DataStats([10, 11, 12, 13, 14, 15, 100]).fences()
        assert not fences.contains(100.0)
        assert fences.contains(12.0)

    def test_constant_sample_collapses(self):
        fences = DataStats([3.0, 3.0, 3.0]).fences()
        assert fences == Fences(lower=3.0, upper=3.0)

    def test_empty(self):
        assert DataStats().fences() == Fences(lower=0.0, upper=0.0)


# ═══════════════════════════════════════════════════════════════════════
# Interpolated quantiles
# ═══════════════════════════════════════════════════════════════════════


class TestReferencePositions:

    def test_endpoints_exact(self):
        f = reference_positions(7)
        assert f[0] == 0.0
        assert f[-1] == 1.0
        assert len(f) == 7

    def test_two_points(self):
        assert reference_positions(2) == [0.0, 1.0]

    def test_evenly_spaced(self):
        np.testing.assert_allclose(reference_positions(5), [0, 0.25, 0.5, 0.75, 1.0])


class TestQuantiles:

    def test_quartiles_interpolate(self):
        """1..4: positions 0, 1/3, 2/3, 1."""
        np.testing.assert_allclose(
            quantiles([1, 2, 3, 4], 0.25), [1.0, 1.75, 2.5, 3.25, 4.0], rtol=1e-12
        )

    def test_quartiles_disagree_with_five_number_summary(self):
        data = [1, 2, 3, 4]
        interpolated = quantiles(data, 0.25)
        split = five_number_summary(data)
        assert interpolated[0] == split[0]
        assert interpolated[4] == split[4]
        assert interpolated[1] != pytest.approx(split[1])
        assert interpolated[3] != pytest.approx(split[3])

    def test_quartiles_on_grid_points(self):
        """1..5: every quartile falls on a datum."""
        np.testing.assert_allclose(quantiles([5, 4, 3, 2, 1], 0.25), [1, 2, 3, 4, 5])

    def test_deciles_of_zero_to_ten(self):
        result = quantiles(np.arange(11.0), 0.1)
        assert len(result) == 11
        np.testing.assert_allclose(result, np.arange(11.0), atol=1e-9)

    def test_median_only(self):
        assert quantiles([1, 2, 3, 4, 5], 0.5) == [1.0, 3.0, 5.0]

    @pytest.mark.parametrize("p", [0.1, 0.2, 0.25, 0.3, 0.5, 0.05, 0.01])
    def test_length(self, p, rng):
        result = quantiles(rng.standard_normal(30), p)
        assert len(result) == math.floor(1 / p) + 1

    @pytest.mark.parametrize("p", [None, float('nan'), 0.0, 0.005, 1.0, 1.5, -0.25])
    def test_invalid_fraction_means_quartiles(self, p):
        data = [3.0, 9.0, 1.0, 4.0, 7.0, 2.0]
        assert quantiles(data, p) == quantiles(data, 0.25)

    def test_default_is_quartiles(self):
        stats = DataStats([3.0, 9.0, 1.0, 4.0, 7.0, 2.0])
        assert stats.quantiles() == stats.quantiles(0.25)

    def test_bounds_inclusive(self):
        data = list(range(20))
        assert len(quantiles(data, 0.01)) == 101
        assert len(quantiles(data, 0.99)) == 2

    def test_too_few_samples(self):
        assert quantiles([4.0], 0.25) == []
        assert DataStats().quantiles(0.25) == []

    def test_two_samples(self):
        np.testing.assert_allclose(quantiles([0.0, 8.0], 0.25), [0, 2, 4, 6, 8])

    def test_monotone(self, rng):
        result = quantiles(rng.exponential(size=57), 0.1)
        assert all(a <= b for a, b in zip(result, result[1:]))

    def test_ends_are_extremes(self, rng):
        x = rng.standard_normal(23)
        result = quantiles(x, 0.2)
        assert result[0] == x.min()
        assert result[-1] == x.max()
