"""
Descriptive statistics over numeric vectors.

Every function accepts a vector-shaped Matrix or a plain ordered numeric
collection (promoted to a vector first) and operates on its flattened
element sequence. Scalar results are Python floats; "no result" is None.

Two failure styles:
    - ShapeError is raised before computing when an operand is empty, too
      short for the statistic, or differs in length from its partner.
    - quantile()/percentile() with an out-of-domain probability, and mode()
      when no value repeats, return None.

Degenerate but well-shaped inputs (zero variance, zero weight sum)
produce NaN/Inf.

describe() and summary() compute several statistics at once and return a
DescriptiveSolution.
"""

from __future__ import annotations

import math
from typing import Literal, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinstat.core.matrix import Matrix, as_vector
from pylinstat.core.exceptions import ValidationError
from pylinstat.core.validation import check_min_elements, check_equal_length
from pylinstat.descriptive import _moments
from pylinstat.descriptive._quantile import in_unit_interval, type8_quantile
from pylinstat.descriptive.design import VectorDesign
from pylinstat.descriptive.solution import DescriptiveSolution
from pylinstat.descriptive.backends.cpu import CPUDescriptiveBackend


VectorLike = Union[Matrix, ArrayLike]
BackendChoice = Literal['auto', 'cpu']

DEFAULT_QUANTILE_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)


# --- Central tendency ---

def mean(x: VectorLike) -> float:
    """
    Arithmetic mean, sum(x) / n.

    >>> mean([1, 2, 3, 4, 5])
    3.0
    """
    return float(_moments.mean(as_vector(x, 'x')))


def median(x: VectorLike) -> float:
    """
    Middle element of the sorted sample.

    Returns the element at 0-based index round(n/2) - 1 (halves round up).
    For odd n this is the middle element. For even n it is the lower of the
    two middle elements, not their average:

    >>> median([1, 2, 3, 4])
    2.0
    """
    values = np.sort(as_vector(x, 'x'))
    n = values.size
    return float(values[(n + 1) // 2 - 1])


def mode(x: VectorLike) -> list[float] | None:
    """
    Most frequent value(s), ascending.

    Returns None when every value occurs exactly once. Ties at the maximum
    frequency return all tied values.

    >>> mode([1, 1, 2, 2, 3])
    [1.0, 2.0]
    >>> mode([1, 2, 3]) is None
    True
    """
    values, counts = np.unique(as_vector(x, 'x'), return_counts=True)
    max_count = counts.max()
    if max_count == 1:
        return None
    return [float(v) for v in values[counts == max_count]]


# --- Dispersion ---

def value_range(x: VectorLike) -> float:
    """max(x) - min(x)."""
    values = as_vector(x, 'x')
    return float(np.max(values) - np.min(values))


range_ = value_range


def variance(x: VectorLike) -> float:
    """
    Unbiased sample variance, Σ(xᵢ - mean)² / (n - 1).

    Raises:
        ShapeError: If x has fewer than 2 elements
    """
    values = as_vector(x, 'x')
    check_min_elements(values.size, 2, 'x')
    return float(_moments.sum_powered_deviations(values, 2) / (values.size - 1))


def population_variance(x: VectorLike) -> float:
    """Population variance, the second central moment Σ(xᵢ - mean)² / n."""
    return float(_moments.central_moment(as_vector(x, 'x'), 2))


def std_dev(x: VectorLike) -> float:
    """
    Unbiased sample standard deviation, sqrt(variance(x)).

    Raises:
        ShapeError: If x has fewer than 2 elements
    """
    return math.sqrt(variance(x))


def population_std_dev(x: VectorLike) -> float:
    """sqrt(population_variance(x))."""
    return math.sqrt(population_variance(x))


# --- Higher moments ---

def moment(x: VectorLike, p: int) -> float:
    """
    p-th central moment, Σ(xᵢ - mean)^p / n. The first moment is 0.0.

    Raises:
        ValidationError: If p is not an integer >= 1
    """
    if isinstance(p, bool) or not isinstance(p, (int, np.integer)) or p < 1:
        raise ValidationError(f"p: moment order must be an integer >= 1, got {p!r}")
    return float(_moments.central_moment(as_vector(x, 'x'), int(p)))


def kurtosis(x: VectorLike) -> float:
    """
    Excess kurtosis, moment(x, 4) / population_variance(x)² - 3.

    NaN for a constant vector.
    """
    return float(_moments.standardized_moment(as_vector(x, 'x'), 4) - 3.0)


def skewness(x: VectorLike) -> float:
    """
    Skewness, moment(x, 3) / population_variance(x)^1.5.

    NaN for a constant vector.
    """
    return float(_moments.standardized_moment(as_vector(x, 'x'), 3))


# --- Bivariate ---

def covariance(x: VectorLike, y: VectorLike) -> float:
    """
    Unbiased sample covariance, Σ(xᵢ - x̄)(yᵢ - ȳ) / (n - 1).

    Raises:
        ShapeError: If x and y differ in length or have fewer than 2 elements
    """
    xv, yv = _paired(x, y)
    check_min_elements(xv.size, 2, 'x')
    return float(_moments.co_deviation_sum(xv, yv) / (xv.size - 1))


def population_covariance(x: VectorLike, y: VectorLike) -> float:
    """
    Population covariance, Σ(xᵢ - x̄)(yᵢ - ȳ) / n.

    Raises:
        ShapeError: If x and y differ in length
    """
    xv, yv = _paired(x, y)
    return float(_moments.co_deviation_sum(xv, yv) / xv.size)


def weighted_mean(x: VectorLike, w: VectorLike) -> float:
    """
    Σ xᵢwᵢ / Σ wᵢ.

    Raises:
        ShapeError: If x and w differ in length
    """
    xv, wv = _paired(x, w, names=('x', 'w'))
    return float(_moments.weighted_mean(xv, wv))


def weighted_covariance(x: VectorLike, y: VectorLike, w: VectorLike) -> float:
    """
    Weighted covariance, Σ wᵢ(xᵢ - x̄_w)(yᵢ - ȳ_w) / Σ wᵢ,
    where x̄_w and ȳ_w are the weighted means.

    Raises:
        ShapeError: If x, y and w do not all have the same length
    """
    xv = as_vector(x, 'x')
    yv = as_vector(y, 'y')
    wv = as_vector(w, 'w')
    check_equal_length(xv.size, yv.size, wv.size, names=('x', 'y', 'w'))
    return float(_moments.weighted_covariance(xv, yv, wv))


def _paired(
    x: VectorLike,
    y: VectorLike,
    names: tuple[str, str] = ('x', 'y'),
) -> tuple[NDArray, NDArray]:
    xv = as_vector(x, names[0])
    yv = as_vector(y, names[1])
    check_equal_length(xv.size, yv.size, names=names)
    return xv, yv


# --- Quantiles ---

def quantile(x: VectorLike, tau: float) -> float | None:
    """
    Hyndman-Fan type 8 quantile estimate.

    Approximately median-unbiased regardless of the sample distribution.
    quantile(x, 0) is min(x) and quantile(x, 1) is max(x).

    Returns:
        The estimate, or None if tau is outside [0, 1]
    """
    if not in_unit_interval(tau):
        return None
    return float(type8_quantile(np.sort(as_vector(x, 'x')), tau))


def percentile(x: VectorLike, p: float) -> float | None:
    """
    quantile(x, p / 100).

    Returns:
        The estimate, or None if p is outside [0, 100]
    """
    if not 0.0 <= p <= 100.0:
        return None
    return quantile(x, p / 100.0)


# --- Aggregate ---

def _ensure_design(data: VectorLike | VectorDesign) -> VectorDesign:
    """Convert raw input to VectorDesign if needed."""
    if isinstance(data, VectorDesign):
        return data
    return VectorDesign.from_array(data)


def _get_backend(backend: BackendChoice) -> CPUDescriptiveBackend:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def describe(
    data: VectorLike | VectorDesign,
    *,
    quantile_probs: ArrayLike | None = None,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute every univariate statistic at once.

    Computes: mean, median, mode, range, variance, population variance,
    standard deviations, skewness, kurtosis, type 8 quantiles and the
    six-number summary.

    Unlike variance()/std_dev(), a vector with a single element does not
    raise: the sample variance and standard deviation are None and a
    warning is recorded on the solution.

    Parameters
    ----------
    data : Matrix, array-like or VectorDesign
        Vector data.
    quantile_probs : array-like, optional
        Probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1).
    backend : str
        'auto' or 'cpu'.

    Raises
    ------
    ValidationError
        If any quantile probability is outside [0, 1].
    """
    design = _ensure_design(data)
    be = _get_backend(backend)

    probs = _check_probs(quantile_probs)

    compute = {
        'mean', 'median', 'mode', 'range', 'variance', 'population_variance',
        'std_dev', 'population_std_dev', 'skewness', 'kurtosis',
        'quantiles', 'summary',
    }
    result = be.solve(design, compute=compute, quantile_probs=probs)
    return DescriptiveSolution(_result=result, _design=design)


def summary(
    data: VectorLike | VectorDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Six-number summary: Min, Q1, Median, Mean, Q3, Max.

    Q1 and Q3 are type 8 quantiles; Median follows median().
    """
    design = _ensure_design(data)
    be = _get_backend(backend)
    result = be.solve(design, compute={'summary', 'mean', 'median'})
    return DescriptiveSolution(_result=result, _design=design)


def _check_probs(probs: ArrayLike | None) -> NDArray:
    if probs is None:
        return np.array(DEFAULT_QUANTILE_PROBS)
    q_probs = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    bad = q_probs[~((q_probs >= 0.0) & (q_probs <= 1.0))]
    if bad.size > 0:
        raise ValidationError(
            f"quantile_probs must lie in [0, 1], got {bad.tolist()}"
        )
    return q_probs
