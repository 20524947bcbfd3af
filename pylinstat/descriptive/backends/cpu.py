"""
CPU reference backend for descriptive statistics.

Computes a requested set of statistics over one VectorDesign, sorting the
sample once and timing each statistic.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pylinstat.core.result import Result
from pylinstat.core.compute.timing import Timer
from pylinstat.descriptive import _moments
from pylinstat.descriptive._quantile import type8_quantile, type8_quantiles
from pylinstat.descriptive.design import VectorDesign
from pylinstat.descriptive.solution import DescriptiveParams


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: VectorDesign,
        *,
        compute: set[str],
        quantile_probs: NDArray | None = None,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : VectorDesign
        compute : set of str
            Which statistics to compute. Valid entries:
            'mean', 'median', 'mode', 'range', 'variance',
            'population_variance', 'std_dev', 'population_std_dev',
            'skewness', 'kurtosis', 'quantiles', 'summary'
        quantile_probs : array-like or None
            Probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1).
        """
        timer = Timer()
        timer.start()

        x = design.values
        n = design.n
        warnings_list: list[str] = []
        values: dict[str, object] = {}

        with timer.section('sort'):
            x_sorted = np.sort(x)

        if 'mean' in compute:
            with timer.section('mean'):
                values['mean'] = float(_moments.mean(x))

        if 'median' in compute:
            with timer.section('median'):
                values['median'] = float(x_sorted[(n + 1) // 2 - 1])

        if 'mode' in compute:
            with timer.section('mode'):
                values['mode'] = self._compute_mode(x_sorted)

        if 'range' in compute:
            with timer.section('range'):
                values['range'] = float(x_sorted[-1] - x_sorted[0])

        if compute & {'variance', 'std_dev'}:
            with timer.section('variance'):
                if n < 2:
                    warnings_list.append(
                        f"sample variance requires at least 2 elements, got {n}"
                    )
                    var = None
                else:
                    var = float(_moments.sum_powered_deviations(x, 2) / (n - 1))
            if 'variance' in compute:
                values['variance'] = var
            if 'std_dev' in compute:
                values['std_dev'] = None if var is None else math.sqrt(var)

        if compute & {'population_variance', 'population_std_dev'}:
            with timer.section('population_variance'):
                pvar = float(_moments.central_moment(x, 2))
            if 'population_variance' in compute:
                values['population_variance'] = pvar
            if 'population_std_dev' in compute:
                values['population_std_dev'] = math.sqrt(pvar)

        if 'skewness' in compute:
            with timer.section('skewness'):
                values['skewness'] = float(_moments.standardized_moment(x, 3))

        if 'kurtosis' in compute:
            with timer.section('kurtosis'):
                values['kurtosis'] = float(_moments.standardized_moment(x, 4) - 3.0)

        if 'quantiles' in compute:
            with timer.section('quantiles'):
                q_probs = quantile_probs
                if q_probs is None:
                    q_probs = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
                values['quantile_probs'] = q_probs
                values['quantiles'] = type8_quantiles(x_sorted, q_probs)

        if 'summary' in compute:
            with timer.section('summary'):
                values['summary_table'] = self._compute_summary(x, x_sorted)

        timer.stop()

        return Result(
            params=DescriptiveParams(**values),
            info={'n': n, 'computed': sorted(compute), 'quantile_type': 8},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _compute_mode(self, x_sorted: NDArray) -> tuple[float, ...] | None:
        """Values attaining the maximum frequency; None if nothing repeats."""
        uniq, counts = np.unique(x_sorted, return_counts=True)
        max_count = counts.max()
        if max_count == 1:
            return None
        return tuple(float(v) for v in uniq[counts == max_count])

    def _compute_summary(self, x: NDArray, x_sorted: NDArray) -> NDArray:
        """
        Six-number summary: Min, Q1, Median, Mean, Q3, Max.

        Q1/Q3 are type 8 quantiles; Median is the selected-element median.
        """
        n = x_sorted.size
        return np.array([
            x_sorted[0],
            type8_quantile(x_sorted, 0.25),
            x_sorted[(n + 1) // 2 - 1],
            _moments.mean(x),
            type8_quantile(x_sorted, 0.75),
            x_sorted[-1],
        ], dtype=np.float64)
