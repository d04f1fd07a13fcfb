"""
Descriptive statistics solution types.

Contains the parameter payload of a describe() snapshot and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from datastats.core.result import Result
from datastats.descriptive._common import ConfidenceInterval, Fences


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for a describe() snapshot.

    Every single-sample statistic of the engine, taken at one moment.
    Association statistics are not included; they need a second series.
    """
    n: int

    # Location
    minimum: float
    maximum: float
    mean: float
    geometric_mean: float
    harmonic_mean: float
    median: float
    mode: float

    # Dispersion
    standard_deviation: float
    coefficient_of_variation: float
    confidence_interval: ConfidenceInterval

    # Shape
    skewness: float
    kurtosis: float

    # Order statistics
    five_number_summary: tuple[float, ...]
    fences: Fences
    quartiles: tuple[float, ...]


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics snapshot.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> float:
        return self._result.params.mode

    @property
    def std(self) -> float:
        """Sample standard deviation (n - 1)."""
        return self._result.params.standard_deviation

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def five_number_summary(self) -> tuple[float, ...]:
        """(min, Q1, median, Q3, max) by median splitting."""
        return self._result.params.five_number_summary

    @property
    def quartiles(self) -> tuple[float, ...]:
        """(min, Q1, Q2, Q3, max) by linear interpolation."""
        return self._result.params.quartiles

    @property
    def fences(self) -> Fences:
        return self._result.params.fences

    @property
    def confidence_interval(self) -> ConfidenceInterval:
        return self._result.params.confidence_interval

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Plain-text table of every statistic in the snapshot."""
        p = self._result.params
        ci = p.confidence_interval
        rows = [
            ("n", f"{p.n}"),
            ("Min.", f"{p.minimum:.6f}"),
            ("1st Qu.", _fmt_index(p.five_number_summary, 1)),
            ("Median", f"{p.median:.6f}"),
            ("Mean", f"{p.mean:.6f}"),
            ("3rd Qu.", _fmt_index(p.five_number_summary, 3)),
            ("Max.", f"{p.maximum:.6f}"),
            ("Mode", f"{p.mode:.6f}"),
            ("Geo. mean", f"{p.geometric_mean:.6f}"),
            ("Harm. mean", f"{p.harmonic_mean:.6f}"),
            ("Std. dev.", f"{p.standard_deviation:.6f}"),
            ("CV (%)", f"{p.coefficient_of_variation:.6f}"),
            ("Skewness", f"{p.skewness:.6f}"),
            ("Kurtosis", f"{p.kurtosis:.6f}"),
            ("Fences", f"[{p.fences.lower:.6f}, {p.fences.upper:.6f}]"),
            ("Conf. int.", f"[{ci.left:.6f}, {ci.right:.6f}]"),
        ]

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = ["Descriptive Statistics:"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, std={self.std:.6g})"


def _fmt_index(values: tuple[float, ...], i: int) -> str:
    if len(values) <= i:
        return "NA"
    return f"{values[i]:.6f}"
