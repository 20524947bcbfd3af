"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinstat.core.result import Result

if TYPE_CHECKING:
    from pylinstat.descriptive.design import VectorDesign


SUMMARY_LABELS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). describe() populates all;
    summary() populates only the summary table, mean and median.
    """
    mean: float | None = None
    median: float | None = None
    mode: tuple[float, ...] | None = None
    range: float | None = None
    variance: float | None = None
    population_variance: float | None = None
    std_dev: float | None = None
    population_std_dev: float | None = None
    skewness: float | None = None
    kurtosis: float | None = None

    # Type 8 quantiles, one per probability
    quantiles: NDArray[np.floating[Any]] | None = None
    quantile_probs: NDArray[np.floating[Any]] | None = None

    # Summary table, shape (6,): Min, Q1, Median, Mean, Q3, Max
    summary_table: NDArray[np.floating[Any]] | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'VectorDesign'

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...] | None:
        """Most frequent values, or None if no value repeats (or not computed)."""
        return self._result.params.mode

    @property
    def range(self) -> float | None:
        return self._result.params.range

    @property
    def variance(self) -> float | None:
        """Sample variance (n-1). None when n < 2."""
        return self._result.params.variance

    @property
    def population_variance(self) -> float | None:
        return self._result.params.population_variance

    @property
    def std_dev(self) -> float | None:
        """Sample standard deviation. None when n < 2."""
        return self._result.params.std_dev

    @property
    def population_std_dev(self) -> float | None:
        return self._result.params.population_std_dev

    @property
    def skewness(self) -> float | None:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def quantiles(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.quantiles

    @property
    def quantile_probs(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.quantile_probs

    @property
    def summary_table(self) -> NDArray[np.floating[Any]] | None:
        """Six-number summary (6,): Min, Q1, Median, Mean, Q3, Max."""
        return self._result.params.summary_table

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text table of the computed statistics."""
        lines = []

        if self.summary_table is not None:
            values = [f"{v:.6g}" for v in self.summary_table]
            widths = [max(len(label), len(v)) for label, v in zip(SUMMARY_LABELS, values)]
            lines.append("  ".join(label.rjust(w) for label, w in zip(SUMMARY_LABELS, widths)))
            lines.append("  ".join(v.rjust(w) for v, w in zip(values, widths)))

        rows = [
            ("variance", self.variance),
            ("std_dev", self.std_dev),
            ("population_variance", self.population_variance),
            ("population_std_dev", self.population_std_dev),
            ("skewness", self.skewness),
            ("kurtosis", self.kurtosis),
            ("range", self.range),
        ]
        computed = [(name, v) for name, v in rows if v is not None]
        if computed:
            if lines:
                lines.append("")
            label_width = max(len(name) for name, _ in computed)
            for name, v in computed:
                lines.append(f"{name.ljust(label_width)}  {v:.6g}")
            if self.mode is not None:
                lines.append(f"{'mode'.ljust(label_width)}  " + ", ".join(f"{m:.6g}" for m in self.mode))

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        computed = [
            name for name in (
                'mean', 'median', 'mode', 'range', 'variance', 'population_variance',
                'std_dev', 'population_std_dev', 'skewness', 'kurtosis',
                'quantiles', 'summary_table',
            )
            if getattr(params, name) is not None
        ]
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={self.n}, computed=[{stats_str}])"
