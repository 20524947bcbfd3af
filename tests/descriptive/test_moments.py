"""
Tests for central tendency, dispersion, moments and bivariate statistics.

Closed-form expectations are checked at the CPU_FP64 tolerance tier;
skewness and kurtosis are cross-checked against scipy.stats with the
biased (population) estimators.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pylinstat.core.matrix import Matrix
from pylinstat.core.compute.tolerances import CPU_FP64
from pylinstat.core.exceptions import ShapeError, ValidationError
from pylinstat.descriptive import (
    mean,
    median,
    mode,
    value_range,
    range_,
    variance,
    population_variance,
    std_dev,
    population_std_dev,
    moment,
    kurtosis,
    skewness,
    covariance,
    population_covariance,
    weighted_mean,
    weighted_covariance,
)


RTOL = CPU_FP64.rtol
ATOL = CPU_FP64.atol

# Textbook sample with population variance 4 and sample variance 32/7
SAMPLE = [2, 4, 4, 4, 5, 5, 7, 9]


# ═══════════════════════════════════════════════════════════════════════
# Central tendency
# ═══════════════════════════════════════════════════════════════════════


class TestMean:

    def test_simple(self):
        assert mean([1, 2, 3, 4, 5]) == 3.0

    def test_returns_float(self):
        assert type(mean([1, 2])) is float

    def test_matrix_row_and_column(self):
        assert mean(Matrix.new([1, 2, 3])) == 2.0
        assert mean(Matrix.column([1, 2, 3])) == 2.0

    def test_single_element(self):
        assert mean([7.5]) == 7.5

    def test_empty_rejected(self):
        with pytest.raises(ShapeError):
            mean([])

    def test_non_vector_rejected(self):
        with pytest.raises(ShapeError):
            mean(Matrix.new([[1, 2], [3, 4]]))

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            mean(["a", "b"])

    def test_nan_propagates(self):
        assert math.isnan(mean([1.0, np.nan, 3.0]))


class TestMedian:

    def test_odd(self):
        assert median([3, 1, 2]) == 2.0

    def test_even_takes_lower_middle(self):
        assert median([1, 2, 3, 4]) == 2.0

    def test_even_unsorted(self):
        assert median([10, 40, 20, 30]) == 20.0

    def test_single_element(self):
        assert median([5]) == 5.0

    def test_result_is_an_element(self, rng):
        x = rng.standard_normal(10)
        assert median(x) in set(x.tolist())

    def test_input_not_modified(self):
        x = np.array([3.0, 1.0, 2.0])
        median(x)
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])


class TestMode:

    def test_single_mode(self):
        assert mode([4, 4, 1]) == [4.0]

    def test_tie_returns_all_ascending(self):
        assert mode([2, 2, 1, 1, 3]) == [1.0, 2.0]

    def test_no_repeats_returns_none(self):
        assert mode([1, 2, 3]) is None

    def test_single_element_returns_none(self):
        assert mode([5]) is None

    def test_all_equal(self):
        assert mode([3, 3, 3]) == [3.0]


# ═══════════════════════════════════════════════════════════════════════
# Dispersion
# ═══════════════════════════════════════════════════════════════════════


class TestRange:

    def test_range(self):
        assert value_range(SAMPLE) == 7.0

    def test_alias(self):
        assert range_ is value_range

    def test_constant(self):
        assert value_range([3, 3]) == 0.0


class TestVariance:

    def test_population_variance(self):
        np.testing.assert_allclose(population_variance(SAMPLE), 4.0, rtol=RTOL, atol=ATOL)

    def test_sample_variance(self):
        np.testing.assert_allclose(variance(SAMPLE), 32.0 / 7.0, rtol=RTOL, atol=ATOL)

    def test_std_devs(self):
        np.testing.assert_allclose(population_std_dev(SAMPLE), 2.0, rtol=RTOL, atol=ATOL)
        np.testing.assert_allclose(std_dev(SAMPLE), math.sqrt(32.0 / 7.0), rtol=RTOL, atol=ATOL)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(50)
        np.testing.assert_allclose(variance(x), np.var(x, ddof=1), rtol=RTOL)
        np.testing.assert_allclose(population_variance(x), np.var(x), rtol=RTOL)

    def test_sample_exceeds_population(self, rng):
        x = rng.standard_normal(10)
        assert variance(x) > population_variance(x)

    def test_single_element_sample_variance_rejected(self):
        with pytest.raises(ShapeError, match="at least 2"):
            variance([1.0])
        with pytest.raises(ShapeError):
            std_dev([1.0])

    def test_single_element_population_variance(self):
        assert population_variance([1.0]) == 0.0

    def test_constant_is_zero(self):
        assert variance([5, 5, 5]) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Higher moments
# ═══════════════════════════════════════════════════════════════════════


class TestMoment:

    def test_first_moment_is_zero(self):
        assert moment([0.1, 0.2, 0.7], 1) == 0.0

    def test_second_moment_is_population_variance(self):
        np.testing.assert_allclose(moment(SAMPLE, 2), population_variance(SAMPLE), rtol=RTOL)

    def test_third_moment(self):
        # deviations -1, -1, 2 about mean 1
        x = [0, 0, 3]
        np.testing.assert_allclose(moment(x, 3), 2.0, rtol=RTOL)

    def test_numpy_integer_order(self):
        assert moment(SAMPLE, np.int64(2)) == moment(SAMPLE, 2)

    @pytest.mark.parametrize("p", [0, -1, 2.0, True])
    def test_invalid_order(self, p):
        with pytest.raises(ValidationError, match="moment order"):
            moment(SAMPLE, p)


class TestShape:

    def test_symmetric_skewness_is_zero(self):
        assert skewness([1, 2, 3, 4, 5]) == 0.0

    def test_kurtosis_uniform_grid(self):
        # m4 / m2² = 6.8 / 4
        np.testing.assert_allclose(kurtosis([1, 2, 3, 4, 5]), 1.7 - 3.0, rtol=RTOL)

    def test_matches_scipy(self, rng):
        x = rng.exponential(size=40)
        np.testing.assert_allclose(skewness(x), stats.skew(x), rtol=RTOL)
        np.testing.assert_allclose(kurtosis(x), stats.kurtosis(x), rtol=RTOL)

    def test_right_skew_positive(self):
        assert skewness([1, 1, 1, 2, 10]) > 0

    def test_constant_gives_nan(self):
        assert math.isnan(skewness([2, 2, 2]))
        assert math.isnan(kurtosis([2, 2, 2]))


# ═══════════════════════════════════════════════════════════════════════
# Bivariate
# ═══════════════════════════════════════════════════════════════════════


class TestCovariance:

    def test_self_covariance_is_variance(self):
        np.testing.assert_allclose(covariance(SAMPLE, SAMPLE), variance(SAMPLE), rtol=RTOL)

    def test_simple(self):
        assert covariance([1, 2, 3], [1, 2, 3]) == 1.0
        np.testing.assert_allclose(population_covariance([1, 2, 3], [1, 2, 3]), 2.0 / 3.0, rtol=RTOL)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(30)
        y = 0.5 * x + rng.standard_normal(30)
        np.testing.assert_allclose(covariance(x, y), np.cov(x, y)[0, 1], rtol=RTOL)
        np.testing.assert_allclose(
            population_covariance(x, y), np.cov(x, y, bias=True)[0, 1], rtol=RTOL
        )

    def test_symmetric(self, rng):
        x = rng.standard_normal(12)
        y = rng.standard_normal(12)
        np.testing.assert_allclose(covariance(x, y), covariance(y, x), rtol=RTOL)

    def test_mixed_orientation(self):
        assert covariance(Matrix.new([1, 2, 3]), Matrix.column([2, 4, 6])) == 2.0

    def test_length_mismatch(self):
        with pytest.raises(ShapeError, match="Inconsistent lengths"):
            covariance([1, 2, 3], [1, 2])
        with pytest.raises(ShapeError):
            population_covariance([1, 2, 3], [1, 2])

    def test_single_pair_rejected(self):
        with pytest.raises(ShapeError):
            covariance([1.0], [2.0])


class TestWeighted:

    def test_equal_weights_give_mean(self, rng):
        x = rng.standard_normal(20)
        np.testing.assert_allclose(weighted_mean(x, np.ones(20)), mean(x), rtol=RTOL, atol=ATOL)

    def test_weights_select(self):
        assert weighted_mean([1, 2, 3], [0, 0, 1]) == 3.0

    def test_scale_invariant(self):
        x = [1.0, 4.0, 9.0]
        w = [1.0, 2.0, 3.0]
        np.testing.assert_allclose(
            weighted_mean(x, w), weighted_mean(x, [10.0 * v for v in w]), rtol=RTOL
        )

    def test_zero_weight_sum_is_nan(self):
        assert math.isnan(weighted_mean([1, 2], [0, 0]))

    def test_weight_length_mismatch(self):
        with pytest.raises(ShapeError):
            weighted_mean([1, 2, 3], [1, 1])

    def test_equal_weights_give_population_covariance(self, rng):
        x = rng.standard_normal(15)
        y = rng.standard_normal(15)
        np.testing.assert_allclose(
            weighted_covariance(x, y, np.full(15, 2.0)),
            population_covariance(x, y),
            rtol=RTOL,
            atol=ATOL,
        )

    def test_weighted_covariance_length_mismatch(self):
        with pytest.raises(ShapeError):
            weighted_covariance([1, 2, 3], [1, 2, 3], [1, 1])
