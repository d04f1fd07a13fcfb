"""
One-shot functional API for descriptive statistics.

Each function answers a single query on an array-like without keeping an
engine around. Single-sample functions build a throwaway DataStats, so
they follow exactly the same neutral-value rules; association functions
call the stateless helpers directly.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from datastats.descriptive import _association
from datastats.descriptive.engine import DataStats
from datastats.descriptive.solution import DescriptiveSolution


def describe(data: ArrayLike, *, t: float | None = None) -> DescriptiveSolution:
    """
    Compute every single-sample statistic of data.

    Parameters
    ----------
    data : array-like
        1D sample.
    t : float, optional
        Confidence factor for the confidence interval (default 0.9).

    Returns
    -------
    DescriptiveSolution
    """
    return DataStats(data).describe(t)


def five_number_summary(data: ArrayLike) -> list[float]:
    """[min, Q1, median, Q3, max] by median splitting; [] for an empty sample."""
    return DataStats(data).five_number_summary()


def quantiles(data: ArrayLike, p: float | None = None) -> list[float]:
    """
    Interpolated quantiles at every multiple of p.

    Parameters
    ----------
    data : array-like
        1D sample.
    p : float, optional
        Fraction in [0.01, 0.99]; anything else means quartiles.
    """
    return DataStats(data).quantiles(p)


def covariance(x: ArrayLike | None, y: ArrayLike | None) -> float:
    """Sample covariance (n - 1); 0.0 unless x and y have equal length >= 2."""
    return _association.covariance(x, y)


def correlation(x: ArrayLike | None, y: ArrayLike | None) -> float:
    """Pearson correlation; 0.0 unless x and y have equal length >= 2."""
    return _association.correlation(x, y)


def covariance_matrix(x: ArrayLike | None) -> list[list[float]]:
    """Lower-triangular covariance matrix (divisor m) of the columns of x."""
    return _association.covariance_matrix(x)
