"""
Descriptive statistics module.

Provides a stateful engine with lazily cached statistics plus one-shot
functions for single queries.

Public API:
    DataStats              - Assign a sample once, query many times
    describe(data)         - All single-sample statistics at once
    five_number_summary(x) - Min, Q1, Median, Q3, Max (median splitting)
    quantiles(x, p)        - Interpolated quantiles at multiples of p
    covariance(x, y)       - Sample covariance
    correlation(x, y)      - Pearson correlation
    covariance_matrix(x)   - Lower-triangular covariance matrix
"""

from datastats.descriptive._common import ConfidenceInterval, Fences
from datastats.descriptive._association import mirror_lower_triangle
from datastats.descriptive.design import SampleDesign
from datastats.descriptive.engine import DataStats
from datastats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from datastats.descriptive.solvers import (
    describe,
    five_number_summary,
    quantiles,
    covariance,
    correlation,
    covariance_matrix,
)

__all__ = [
    "DataStats",
    "describe",
    "five_number_summary",
    "quantiles",
    "covariance",
    "correlation",
    "covariance_matrix",
    "mirror_lower_triangle",
    "ConfidenceInterval",
    "Fences",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
