"""
Bivariate and multivariate association: covariance, Pearson correlation
and the covariance matrix of several variables.

These functions are stateless. They reuse the single-sample mean and
Welford standard deviation from _moments directly, so calling them never
disturbs the sample held by a DataStats engine.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from datastats.core.validation import (
    check_1d, check_2d, check_array, check_rectangular,
)
from datastats.descriptive._moments import arithmetic_mean, welford_std


def _paired_series(
    x: ArrayLike | None, y: ArrayLike | None,
) -> tuple[list[float], list[float]] | None:
    """
    Convert x and y for a paired statistic, or None if they cannot be paired.

    Pairing requires both series present with the same length of at least 2.
    Malformed (non-numeric, multi-dimensional) series still raise.
    """
    if x is None or y is None:
        return None

    x_arr = check_array(x, 'x')
    y_arr = check_array(y, 'y')
    check_1d(x_arr, 'x')
    check_1d(y_arr, 'y')

    n = x_arr.shape[0]
    if n < 2 or n != y_arr.shape[0]:
        return None
    return x_arr.tolist(), y_arr.tolist()


def _covariance(xs: list[float], ys: list[float]) -> float:
    n = len(xs)
    x_mean = arithmetic_mean(xs)
    y_mean = arithmetic_mean(ys)

    s = 0.0
    for xi, yi in zip(xs, ys):
        s += (xi - x_mean) * (yi - y_mean)
    return s / (n - 1.0)


def covariance(x: ArrayLike | None, y: ArrayLike | None) -> float:
    """
    Sample covariance of two paired series (n - 1 denominator).

    Parameters
    ----------
    x, y : array-like
        1D series of equal length n >= 2.

    Returns
    -------
    float
        Cov(x, y), or 0.0 if either series is missing, the lengths differ,
        or fewer than two pairs are available.
    """
    paired = _paired_series(x, y)
    if paired is None:
        return 0.0
    return _covariance(*paired)


def correlation(x: ArrayLike | None, y: ArrayLike | None) -> float:
    """
    Pearson correlation coefficient r = Cov(x, y) / (sd(x) * sd(y)).

    Same validity rule as covariance(); invalid pairs give 0.0. A constant
    series has zero standard deviation and yields NaN or inf.
    """
    paired = _paired_series(x, y)
    if paired is None:
        return 0.0

    xs, ys = paired
    x_std = welford_std(xs)
    y_std = welford_std(ys)

    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(_covariance(xs, ys)) / (np.float64(x_std) * y_std))


def covariance_matrix(x: Sequence[Sequence[float]] | ArrayLike | None) -> list[list[float]]:
    """
    Lower triangle of the covariance matrix of several variables.

    Parameters
    ----------
    x : 2D array-like
        m observations (rows) by p variables (columns).

    Returns
    -------
    list of list of float
        Row i holds cov[i][0..i], i.e. i + 1 entries, where

            cov[i][j] = sum_k C[k, i] * C[k, j] / m

        and C is x with each column mean subtracted. The divisor is m
        (not m - 1). Only the lower triangle is materialised; use
        mirror_lower_triangle() for the full symmetric matrix. Empty or
        missing input gives [].

    Raises
    ------
    DimensionError
        If the rows are ragged or the input is not two-dimensional.
    """
    if x is None:
        return []
    if isinstance(x, np.ndarray):
        if x.size == 0:
            return []
    elif len(x) == 0:
        return []

    check_rectangular(x, 'x')
    data = check_array(x, 'x')
    check_2d(data, 'x')

    m, p = data.shape
    s = 1.0 / m

    means = data.sum(axis=0) * s
    centered = data - means
    full = (centered.T @ centered) * s

    return [full[i, :i + 1].tolist() for i in range(p)]


def mirror_lower_triangle(lower: Sequence[Sequence[float]]) -> NDArray[np.floating[Any]]:
    """
    Expand a lower-triangular covariance matrix into the full symmetric array.

    Parameters
    ----------
    lower : list of list of float
        Row i holds entries [0..i], as returned by covariance_matrix().

    Returns
    -------
    NDArray
        Symmetric (p, p) float64 array.
    """
    p = len(lower)
    full = np.zeros((p, p), dtype=np.float64)
    for i, row in enumerate(lower):
        for j in range(i + 1):
            full[i, j] = full[j, i] = row[j]
    return full
