"""
Descriptive statistics module.

Statistics over numeric vectors (a vector-shaped Matrix or any plain
ordered numeric collection).

Public API:
    mean, median, mode, value_range (range_)
    variance, population_variance, std_dev, population_std_dev
    moment, skewness, kurtosis
    covariance, population_covariance
    weighted_mean, weighted_covariance
    quantile, percentile            (Hyndman-Fan type 8)
    describe(x)  - All univariate statistics at once
    summary(x)   - Six-number summary (Min, Q1, Median, Mean, Q3, Max)
"""

from pylinstat.descriptive.design import VectorDesign
from pylinstat.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pylinstat.descriptive.solvers import (
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
    quantile,
    percentile,
    weighted_mean,
    weighted_covariance,
    describe,
    summary,
)

__all__ = [
    "mean",
    "median",
    "mode",
    "value_range",
    "range_",
    "variance",
    "population_variance",
    "std_dev",
    "population_std_dev",
    "moment",
    "kurtosis",
    "skewness",
    "covariance",
    "population_covariance",
    "quantile",
    "percentile",
    "weighted_mean",
    "weighted_covariance",
    "describe",
    "summary",
    "VectorDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
