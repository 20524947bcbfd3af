"""
Tests for Hyndman-Fan type 8 quantiles and percentiles.

Expected values agree with R 4.x quantile(x, probs, type = 8).
"""

import math

import numpy as np
import pytest

from pylinstat.core.matrix import Matrix
from pylinstat.core.exceptions import ShapeError
from pylinstat.descriptive import quantile, percentile
from pylinstat.descriptive._quantile import in_unit_interval, type8_quantile, type8_quantiles


# x = 1:5, probs = c(0, 0.25, 0.5, 0.75, 1)
PROBS_5 = [0.0, 0.25, 0.5, 0.75, 1.0]
EXPECTED_1TO5 = [1.0, 5.0 / 3.0, 3.0, 13.0 / 3.0, 5.0]

# x = c(2.1, 5.3, 8.7, 1.4, 9.2, 3.6, 7.8, 4.5, 6.9, 0.3)
DATA_10 = [2.1, 5.3, 8.7, 1.4, 9.2, 3.6, 7.8, 4.5, 6.9, 0.3]
PROBS_7 = [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]
EXPECTED_10 = [0.3, 0.7033333333333331, 2.0416666666666665, 4.9, 7.875, 9.0166666666666657, 9.2]

# x = c(10, 20)
EXPECTED_N2 = [10.0, 10.0, 15.0, 20.0, 20.0]


class TestQuantileValues:

    @pytest.mark.parametrize("tau, expected", list(zip(PROBS_5, EXPECTED_1TO5)))
    def test_one_to_five(self, tau, expected):
        assert quantile([1, 2, 3, 4, 5], tau) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("tau, expected", list(zip(PROBS_7, EXPECTED_10)))
    def test_ten_elements(self, tau, expected):
        assert quantile(DATA_10, tau) == pytest.approx(expected, rel=1e-10)

    @pytest.mark.parametrize("tau, expected", list(zip(PROBS_5, EXPECTED_N2)))
    def test_two_elements(self, tau, expected):
        assert quantile([20, 10], tau) == pytest.approx(expected, rel=1e-12)

    def test_bounds_are_min_and_max(self, rng):
        x = rng.standard_normal(17)
        assert quantile(x, 0.0) == x.min()
        assert quantile(x, 1.0) == x.max()

    def test_single_element(self):
        for tau in (0.0, 0.3, 1.0):
            assert quantile([4.2], tau) == 4.2

    def test_monotone_in_tau(self, rng):
        x = rng.standard_normal(25)
        qs = [quantile(x, t) for t in np.linspace(0.0, 1.0, 21)]
        assert all(a <= b for a, b in zip(qs, qs[1:]))

    def test_within_sample_range(self, rng):
        x = rng.standard_normal(9)
        for t in (0.05, 0.33, 0.9):
            assert x.min() <= quantile(x, t) <= x.max()

    def test_matrix_input(self):
        assert quantile(Matrix.column([5, 4, 3, 2, 1]), 0.5) == pytest.approx(3.0)


class TestQuantileDomain:

    @pytest.mark.parametrize("tau", [-0.01, 1.01, 2.0, float("nan")])
    def test_out_of_range_returns_none(self, tau):
        assert quantile([1, 2, 3], tau) is None

    def test_empty_rejected(self):
        with pytest.raises(ShapeError):
            quantile([], 0.5)

    def test_in_unit_interval(self):
        assert in_unit_interval(0.0)
        assert in_unit_interval(1.0)
        assert not in_unit_interval(-1e-12)
        assert not in_unit_interval(math.nan)


class TestPercentile:

    def test_scales_quantile(self):
        assert percentile(DATA_10, 25) == quantile(DATA_10, 0.25)
        assert percentile(DATA_10, 90) == quantile(DATA_10, 0.9)

    def test_bounds(self):
        assert percentile([3, 1, 2], 0) == 1.0
        assert percentile([3, 1, 2], 100) == 3.0

    @pytest.mark.parametrize("p", [-1, 100.5, float("nan")])
    def test_out_of_range_returns_none(self, p):
        assert percentile([1, 2, 3], p) is None


class TestKernel:

    def test_vectorized_matches_scalar(self):
        x_sorted = np.sort(np.array(DATA_10))
        probs = np.array(PROBS_7)
        expected = [type8_quantile(x_sorted, p) for p in PROBS_7]
        np.testing.assert_array_equal(type8_quantiles(x_sorted, probs), expected)
