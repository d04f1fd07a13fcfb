"""
Order statistics: extremes, five-number summary, fences and quantiles.

Two distinct quartile estimators live here and are kept apart on purpose:

- five_number_summary() splits the sorted sample at the median (the median
  belongs to both halves when n is odd) and takes the median of each half.
- quantiles() walks evenly spaced levels along a reference CDF of the
  sorted sample and interpolates linearly between neighbouring order
  statistics.

For the same sample the two may report different quartiles.

Every function takes the sample in stored order and sorts a private copy.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from datastats.descriptive._common import (
    Fences,
    FENCE_MULTIPLIER,
    QUANTILE_P_DEFAULT,
    QUANTILE_P_MAX,
    QUANTILE_P_MIN,
    QUANTILE_SNAP_TOLERANCE,
    is_even,
)


def minimum(data: NDArray[np.floating[Any]]) -> float:
    """Smallest observation; 0.0 for an empty sample."""
    if data.shape[0] == 0:
        return 0.0
    return float(np.min(data))


def maximum(data: NDArray[np.floating[Any]]) -> float:
    """Largest observation; 0.0 for an empty sample."""
    if data.shape[0] == 0:
        return 0.0
    return float(np.max(data))


def median_of_sorted(sorted_data: NDArray[np.floating[Any]]) -> float:
    """
    Median of an already sorted, non-empty array.

    Odd length: the middle element. Even length: the mean of the two
    middle elements.
    """
    n = sorted_data.shape[0]
    if is_even(n):
        m = n // 2 - 1
        return float(0.5 * (sorted_data[m] + sorted_data[m + 1]))
    return float(sorted_data[(n + 1) // 2 - 1])


def median(data: NDArray[np.floating[Any]]) -> float:
    """Median of the sample; 0.0 for an empty sample."""
    if data.shape[0] == 0:
        return 0.0
    return median_of_sorted(np.sort(data))


def five_number_summary(data: NDArray[np.floating[Any]]) -> list[float]:
    """
    Tukey five-number summary by recursive median splitting.

    Parameters
    ----------
    data : NDArray
        1D sample in any order.

    Returns
    -------
    list of float
        [min, Q1, median, Q3, max]; empty for an empty sample and five
        copies of the value for a single observation.
    """
    n = data.shape[0]
    if n == 0:
        return []
    if n == 1:
        value = float(data[0])
        return [value] * 5

    ordered = np.sort(data)
    med = median_of_sorted(ordered)

    if is_even(n):
        m = n // 2 - 1
        lower = ordered[:m + 1]
        upper = ordered[m + 1:]
    else:
        # the median datum belongs to both halves
        m = (n + 1) // 2 - 1
        lower = ordered[:m + 1]
        upper = ordered[m:]

    return [
        float(ordered[0]),
        median_of_sorted(lower),
        med,
        median_of_sorted(upper),
        float(ordered[-1]),
    ]


def fences_from_summary(summary: list[float]) -> Fences:
    """
    Tukey fences from a five-number summary.

    An empty summary (empty sample) gives Fences(0.0, 0.0).
    """
    if not summary:
        return Fences(lower=0.0, upper=0.0)

    q1 = summary[1]
    q3 = summary[3]
    iqr = q3 - q1
    return Fences(lower=q1 - FENCE_MULTIPLIER * iqr, upper=q3 + FENCE_MULTIPLIER * iqr)


def coerce_quantile_fraction(p: float | None) -> float:
    """Replace a missing, NaN or out-of-range fraction by 0.25 (quartiles)."""
    if p is None:
        return QUANTILE_P_DEFAULT
    p = float(p)
    if math.isnan(p) or p < QUANTILE_P_MIN or p > QUANTILE_P_MAX:
        return QUANTILE_P_DEFAULT
    return p


def reference_positions(n: int) -> list[float]:
    """
    Cumulative positions of n sorted observations along [0, 1].

    f[0] = 0 and f[n-1] = 1 exactly; interior positions are accumulated by
    repeated addition of 1/(n-1), so they carry the same rounding as the
    quantile levels they are compared against.
    """
    step = 1.0 / (n - 1)
    f = [0.0]
    for i in range(1, n - 1):
        f.append(f[i - 1] + step)
    f.append(1.0)
    return f


def quantiles(data: NDArray[np.floating[Any]], p: float | None = None) -> list[float]:
    """
    Quantiles at every multiple of p by linear interpolation.

    Parameters
    ----------
    data : NDArray
        1D sample in any order.
    p : float, optional
        Fraction in [0.01, 0.99], e.g. 0.25 for quartiles or 0.1 for
        deciles. Missing, NaN or out-of-range values fall back to 0.25.

    Returns
    -------
    list of float
        floor(1/p) + 1 values: the minimum, the interior quantiles at
        p, 2p, ..., and the maximum. Empty when fewer than two
        observations are available.
    """
    p = coerce_quantile_fraction(p)
    n = data.shape[0]
    if n < 2:
        return []

    n_quant = math.floor(1.0 / p)
    f = reference_positions(n)
    ordered = np.sort(data).tolist()

    result = [ordered[0]]

    q = 0.0
    for _ in range(n_quant - 1):
        q += p
        r = min(math.floor(q * (n - 1)), n - 1)

        if abs(f[r] - q) < QUANTILE_SNAP_TOLERANCE or r == n - 1:
            result.append(ordered[r])
        else:
            t = (q - f[r]) / (f[r + 1] - f[r])
            result.append((1.0 - t) * ordered[r] + t * ordered[r + 1])

    result.append(ordered[-1])
    return result
