"""
Central tendency, dispersion and shape statistics for a single sample.

Functions here are stateless: they take the sample (and, for derived
statistics, the mean and standard deviation already computed by the
caller) and return a Python float.

Degenerate input returns a neutral value (0.0) instead of raising.
Mathematically undefined results (zero divisors, a negative product under
a fractional power) are allowed to come out as NaN or inf; numpy's
floating-point warnings for them are silenced with np.errstate.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from typing import Any
import numpy as np
from numpy.typing import NDArray

from datastats.descriptive._common import (
    ConfidenceInterval,
    CONFIDENCE_DEFAULT,
    CONFIDENCE_MAX,
    CONFIDENCE_MIN,
    RECIPROCAL_ZERO_THRESHOLD,
)


# NaN != NaN, so NaN observations share this stand-in when counted
_NAN_KEY = object()


def _as_list(data: NDArray[np.floating[Any]] | Sequence[float]) -> list[float]:
    if isinstance(data, np.ndarray):
        return data.tolist()
    return [float(x) for x in data]


# --- Central tendency ---

def arithmetic_mean(data: NDArray[np.floating[Any]] | Sequence[float]) -> float:
    """
    Arithmetic mean, summed strictly left to right.

    Not np.sum or sum(): those use pairwise or compensated accumulation.
    Empty sample gives 0.0.
    """
    values = _as_list(data)
    n = len(values)
    if n == 0:
        return 0.0

    total = 0.0
    for x in values:
        total += x
    return total / n


def geometric_mean(data: NDArray[np.floating[Any]]) -> float:
    """
    Geometric mean, (x1 * x2 * ... * xn) ** (1/n).

    Empty sample gives 0.0. A negative running product yields NaN; this is
    returned as-is.
    """
    values = _as_list(data)
    n = len(values)
    if n == 0:
        return 0.0

    with np.errstate(invalid='ignore', over='ignore', under='ignore'):
        product = np.float64(1.0)
        for x in values:
            product *= x
        return float(np.power(product, 1.0 / n))


def harmonic_mean(data: NDArray[np.floating[Any]]) -> float:
    """
    Harmonic mean, n / sum(1/xi).

    Observations with |xi| <= 1e-9 contribute 0 to the reciprocal sum
    rather than diverging. Empty sample gives 0.0.
    """
    values = _as_list(data)
    n = len(values)
    if n == 0:
        return 0.0

    s = 0.0
    for x in values:
        if abs(x) > RECIPROCAL_ZERO_THRESHOLD:
            s += 1.0 / x

    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(n) / np.float64(s))


def mode(data: NDArray[np.floating[Any]]) -> float:
    """
    Most frequent value.

    Counts are kept in insertion order (first occurrence in the sample).
    The mode is the first value whose count strictly exceeds every count
    before it, so among values tied for the highest count the one that
    appeared first wins. Empty sample gives 0.0.

    All NaN observations are counted together under one key, placed where
    the first NaN appears.
    """
    values = _as_list(data)
    if not values:
        return 0.0

    counts = Counter(_NAN_KEY if math.isnan(x) else x for x in values)

    best_count = -1
    best_value = 0.0
    for value, count in counts.items():
        if count > best_count:
            best_count = count
            best_value = value
    if best_value is _NAN_KEY:
        return math.nan
    return float(best_value)


# --- Dispersion ---

def welford_std(data: NDArray[np.floating[Any]] | Sequence[float]) -> float:
    """
    Sample standard deviation (n - 1 denominator) by Welford's method.

    Single pass over the data maintaining the running mean m and the
    running sum of squared deviations s:

        d = xi - m_prev
        m = m_prev + d / (i + 1)
        s = s + (xi - m) * d

    Fewer than two observations give 0.0.
    """
    values = _as_list(data)
    n = len(values)
    if n <= 1:
        return 0.0

    m = 0.0
    s = 0.0
    for i, x in enumerate(values):
        d = x - m
        m = m + d / (i + 1)
        s = s + (x - m) * d

    with np.errstate(invalid='ignore'):
        return float(np.sqrt(s / (n - 1)))


def coefficient_of_variation(mean: float, std: float) -> float:
    """100 * std / mean, in percent. inf or NaN when the mean is 0."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float((np.float64(std) / np.float64(mean)) * 100.0)


def coerce_confidence_factor(t: float | None) -> float:
    """Default a missing or NaN factor to 0.9, then clamp to [0.01, 0.99]."""
    if t is None or math.isnan(t):
        t = CONFIDENCE_DEFAULT
    return min(max(CONFIDENCE_MIN, float(t)), CONFIDENCE_MAX)


def confidence_interval(
    mean: float, std: float, n: int, t: float | None = None,
) -> ConfidenceInterval:
    """
    Symmetric interval mean +/- t * std / sqrt(n).

    The factor t is used directly as the multiplier. An empty sample gives
    ConfidenceInterval(0.0, 0.0).
    """
    t = coerce_confidence_factor(t)
    if n == 0:
        return ConfidenceInterval(left=0.0, right=0.0)

    d = t * std / math.sqrt(n)
    return ConfidenceInterval(left=mean - d, right=mean + d)


# --- Shape ---

def skewness(data: NDArray[np.floating[Any]], mean: float, std: float) -> float:
    """
    Bias-adjusted sample skewness.

        skewness = sqrt(n*(n-1)) / (n-2) * (sum((x-mean)^3) / n) / std^3

    with std the sample (n - 1) standard deviation. Requires n >= 3;
    smaller samples give 0.0. Zero std yields NaN or inf.
    """
    values = _as_list(data)
    n = len(values)
    if n < 3:
        return 0.0

    mult = math.sqrt(n * (n - 1)) / (n - 2)

    s1 = 0.0
    for x in values:
        z = x - mean
        s1 += z * z * z

    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.float64(std)
        skew = (s1 / n) / (s * s * s)
        return float(mult * skew)


def kurtosis(data: NDArray[np.floating[Any]], mean: float, std: float) -> float:
    """
    Bias-adjusted excess kurtosis.

        a = n(n+1) * sum((x-mean)^4) / ((n-1)(n-2)(n-3) * std^4)
        b = 3 (n-1)^2 / ((n-2)(n-3))
        kurtosis = a - b

    with std the sample (n - 1) standard deviation. Requires n >= 4;
    smaller samples give 0.0. Zero std yields NaN or inf.
    """
    values = _as_list(data)
    n = len(values)
    if n < 4:
        return 0.0

    s1 = 0.0
    for x in values:
        z = x - mean
        s1 += z * z * z * z

    n1 = n - 1
    n2 = n - 2
    n3 = n - 3
    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.float64(std)
        a = (n * (n + 1) * s1) / (n1 * n2 * n3 * s * s * s * s)
        b = 3.0 * n1 * n1 / (n2 * n3)
        return float(a - b)
