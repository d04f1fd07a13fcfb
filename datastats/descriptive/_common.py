"""
Common types and constants for descriptive statistics.

Defines the small result records (Fences, ConfidenceInterval), the
parity helper shared by every median computation, and the named constants
that pin down parameter coercion.
"""

from __future__ import annotations

from dataclasses import dataclass


# quantiles(p): p outside [QUANTILE_P_MIN, QUANTILE_P_MAX] falls back to quartiles
QUANTILE_P_MIN = 0.01
QUANTILE_P_MAX = 0.99
QUANTILE_P_DEFAULT = 0.25

# An interpolation level within this distance of a reference position
# takes the datum itself
QUANTILE_SNAP_TOLERANCE = 0.001

# confidence_interval(t): default factor and clamp range
CONFIDENCE_DEFAULT = 0.9
CONFIDENCE_MIN = 0.01
CONFIDENCE_MAX = 0.99

# Tukey fences
FENCE_MULTIPLIER = 1.5

# harmonic_mean: values this close to zero contribute a reciprocal of 0
RECIPROCAL_ZERO_THRESHOLD = 1e-9


@dataclass(frozen=True)
class Fences:
    """
    IQR-based outlier thresholds.

    Attributes
    ----------
    lower : float
        Q1 - 1.5 * IQR
    upper : float
        Q3 + 1.5 * IQR
    """
    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        """True if value lies inside the fences (inclusive)."""
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class ConfidenceInterval:
    """Symmetric interval around the mean, [left, right]."""
    left: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left


def is_even(n: int) -> bool:
    """Integer evenness test."""
    return n % 2 == 0
