"""
Hyndman-Fan type 8 sample quantile.

The type 8 estimator is approximately median-unbiased regardless of the
distribution of the sample. With the sorted sample s₁ ≤ … ≤ sₙ
(1-indexed):

    h  = (n + 1/3) τ + 1/3
    hf = floor(h)
    Q(τ) = s₁                                 if hf < 1
           sₙ                                 if hf ≥ n
           s_hf + (h - hf)(s_hf+1 - s_hf)     otherwise

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray


def in_unit_interval(tau: float) -> bool:
    """True for 0 <= tau <= 1. NaN is outside."""
    return 0.0 <= tau <= 1.0


def type8_quantile(x_sorted: NDArray, tau: float) -> np.float64:
    """
    Type 8 quantile of an ascending-sorted, non-empty sample.

    tau must already be known to lie in [0, 1].
    """
    n = x_sorted.size
    h = (n + 1.0 / 3.0) * tau + 1.0 / 3.0
    hf = math.floor(h)

    if hf < 1:
        return x_sorted[0]
    if hf >= n:
        return x_sorted[n - 1]

    # 1-indexed s_hf is x_sorted[hf - 1]
    lo = x_sorted[hf - 1]
    hi = x_sorted[hf]
    return lo + (h - hf) * (hi - lo)


def type8_quantiles(x_sorted: NDArray, probs: NDArray) -> NDArray:
    """Type 8 quantiles for each probability in probs (all in [0, 1])."""
    return np.array([type8_quantile(x_sorted, float(p)) for p in probs], dtype=np.float64)
