"""
Deviation sums and central moments.

Kernels over validated 1D float64 arrays. They return NumPy scalars so
that degenerate inputs (zero variance, zero weight sum) produce IEEE
NaN/Inf instead of raising ZeroDivisionError.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def mean(x: NDArray) -> np.float64:
    """sum(x) / n."""
    return np.sum(x) / x.size


def sum_powered_deviations(x: NDArray, p: int) -> np.float64:
    """Σ (xᵢ - mean)^p."""
    return np.sum((x - mean(x)) ** p)


def central_moment(x: NDArray, p: int) -> np.float64:
    """
    p-th moment about the mean, Σ (xᵢ - mean)^p / n.

    The first central moment is identically zero and is returned as an
    exact 0.0 rather than the rounding residue of the sum.
    """
    if p == 1:
        return np.float64(0.0)
    return sum_powered_deviations(x, p) / x.size


def standardized_moment(x: NDArray, p: int) -> np.float64:
    """
    m_p / m_2^(p/2). NaN when x has zero variance.

    p=3 is skewness; p=4 is kurtosis before the excess correction.
    """
    m2 = central_moment(x, 2)
    with np.errstate(divide='ignore', invalid='ignore'):
        return central_moment(x, p) / m2 ** (p / 2.0)


def co_deviation_sum(x: NDArray, y: NDArray) -> np.float64:
    """Σ (xᵢ - x̄)(yᵢ - ȳ). x and y must have equal length."""
    return np.sum((x - mean(x)) * (y - mean(y)))


def weighted_mean(x: NDArray, w: NDArray) -> np.float64:
    """Σ xᵢwᵢ / Σ wᵢ."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.sum(x * w) / np.sum(w)


def weighted_covariance(x: NDArray, y: NDArray, w: NDArray) -> np.float64:
    """Σ wᵢ(xᵢ - x̄_w)(yᵢ - ȳ_w) / Σ wᵢ."""
    mx = weighted_mean(x, w)
    my = weighted_mean(y, w)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.sum(w * (x - mx) * (y - my)) / np.sum(w)
