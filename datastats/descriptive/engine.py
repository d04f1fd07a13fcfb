"""
DataStats: stateful descriptive statistics engine with lazy caching.

Assign a sample once, then query statistics as often as needed. The six
most common statistics (min, max, mean, standard deviation, median, mode)
are computed on first request and cached until the next assignment; the
rest are recomputed on every call.

Usage:
    stats = DataStats([60, 64, 70, 70, 70, 75, 80, 90, 95, 95, 100])
    stats.mean                      # 79.0
    stats.median                    # 75.0
    stats.five_number_summary()     # [60.0, 70.0, 75.0, 92.5, 100.0]
    stats.quantiles(0.1)            # deciles, bracketed by min and max

    stats.data = [1.0, 2.0, 3.0]    # invalidates every cached statistic
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from datastats.core.compute.timing import Timer
from datastats.core.result import Result
from datastats.descriptive import _association, _moments, _order
from datastats.descriptive._cache import StatisticCache
from datastats.descriptive._common import ConfidenceInterval, Fences, is_even
from datastats.descriptive.design import SampleDesign
from datastats.descriptive.solution import DescriptiveParams, DescriptiveSolution


class DataStats:
    """
    Descriptive statistics over one assignable numeric sample.

    The engine owns a private copy of the sample. Assigning None or an
    empty sequence is ignored and the previous sample is kept.

    Statistics of an empty sample are neutral values (0.0 or an empty
    list), never errors. Undefined arithmetic, e.g. the coefficient of
    variation of a zero-mean sample, comes back as NaN or inf.

    Instances are not thread-safe: serialize assignment and queries on a
    shared instance, or give each thread its own.
    """

    def __init__(self, data: ArrayLike | None = None):
        self._design = SampleDesign.empty()
        self._cache = StatisticCache()
        if data is not None:
            self.assign(data)

    # --- Sample store ---

    @staticmethod
    def is_even(n: int) -> bool:
        """True if the integer n is even."""
        return is_even(n)

    def assign(self, data: ArrayLike | None) -> None:
        """
        Replace the sample and invalidate every cached statistic.

        Parameters
        ----------
        data : array-like or None
            1D sequence of real numbers. It is copied, so the caller may
            modify it afterwards. None or an empty sequence leaves the
            current sample and cache untouched.

        Raises
        ------
        ValidationError
            If data is not numeric.
        DimensionError
            If data is not one-dimensional.
        """
        if data is None:
            return

        design = SampleDesign.from_array(data)
        if design.n == 0:
            return

        self._design = design
        self._cache.invalidate_all()

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Copy of the current sample (empty before the first assignment)."""
        return self._design.data.copy()

    @data.setter
    def data(self, value: ArrayLike | None) -> None:
        self.assign(value)

    @property
    def samples(self) -> int:
        """Number of observations in the current sample."""
        return self._design.n

    def __len__(self) -> int:
        return self._design.n

    # --- Cached statistics ---

    @property
    def minimum(self) -> float:
        return self._cache['min'].get(lambda: _order.minimum(self._design.data))

    @property
    def maximum(self) -> float:
        return self._cache['max'].get(lambda: _order.maximum(self._design.data))

    @property
    def mean(self) -> float:
        """Arithmetic mean; 0.0 for an empty sample."""
        return self._cache['mean'].get(lambda: _moments.arithmetic_mean(self._design.data))

    @property
    def std(self) -> float:
        """Sample standard deviation (n - 1) by Welford's method; 0.0 for n <= 1."""
        return self._cache['std'].get(lambda: _moments.welford_std(self._design.data))

    @property
    def median(self) -> float:
        return self._cache['median'].get(lambda: _order.median(self._design.data))

    @property
    def mode(self) -> float:
        """Most frequent value; ties go to the value seen first."""
        return self._cache['mode'].get(lambda: _moments.mode(self._design.data))

    # --- Uncached statistics ---

    @property
    def geometric_mean(self) -> float:
        return _moments.geometric_mean(self._design.data)

    @property
    def harmonic_mean(self) -> float:
        return _moments.harmonic_mean(self._design.data)

    @property
    def coefficient_of_variation(self) -> float:
        """100 * std / mean, in percent."""
        return _moments.coefficient_of_variation(self.mean, self.std)

    @property
    def skewness(self) -> float:
        """Bias-adjusted skewness; 0.0 for fewer than 3 observations."""
        return _moments.skewness(self._design.data, self.mean, self.std)

    @property
    def kurtosis(self) -> float:
        """Bias-adjusted excess kurtosis; 0.0 for fewer than 4 observations."""
        return _moments.kurtosis(self._design.data, self.mean, self.std)

    def confidence_interval(self, t: float | None = None) -> ConfidenceInterval:
        """
        Symmetric interval mean +/- t * std / sqrt(n).

        Parameters
        ----------
        t : float, optional
            Confidence factor, e.g. 0.95. Missing or NaN defaults to 0.9;
            other values are clamped to [0.01, 0.99].
        """
        n = self._design.n
        if n == 0:
            return _moments.confidence_interval(0.0, 0.0, 0, t)
        return _moments.confidence_interval(self.mean, self.std, n, t)

    def five_number_summary(self) -> list[float]:
        """[min, Q1, median, Q3, max] by median splitting; [] when empty."""
        return _order.five_number_summary(self._design.data)

    def fences(self) -> Fences:
        """Tukey fences Q1 - 1.5 IQR and Q3 + 1.5 IQR from the five-number summary."""
        return _order.fences_from_summary(self.five_number_summary())

    def quantiles(self, p: float | None = None) -> list[float]:
        """
        Interpolated quantiles at every multiple of p, bracketed by min and max.

        See datastats.descriptive._order.quantiles for the algorithm. Note
        that quantiles(0.25) need not agree with five_number_summary().
        """
        return _order.quantiles(self._design.data, p)

    # --- Association (does not touch the stored sample) ---

    def covariance(self, x: ArrayLike | None, y: ArrayLike | None) -> float:
        """Sample covariance of x and y; 0.0 unless both have equal length >= 2."""
        return _association.covariance(x, y)

    def correlation(self, x: ArrayLike | None, y: ArrayLike | None) -> float:
        """Pearson correlation of x and y; 0.0 unless both have equal length >= 2."""
        return _association.correlation(x, y)

    def covariance_matrix(self, x: ArrayLike | None) -> list[list[float]]:
        """Lower triangle of the covariance matrix of the columns of x."""
        return _association.covariance_matrix(x)

    # --- Snapshot ---

    def describe(self, t: float | None = None) -> DescriptiveSolution:
        """
        Compute every single-sample statistic at once.

        Parameters
        ----------
        t : float, optional
            Confidence factor for the confidence interval (default 0.9).

        Returns
        -------
        DescriptiveSolution
            Frozen snapshot with timing and non-fatal warnings for
            statistics that came out undefined.
        """
        timer = Timer()
        timer.start()

        n = self._design.n

        with timer.section('order_statistics'):
            minimum = self.minimum
            maximum = self.maximum
            median = self.median
            five = tuple(self.five_number_summary())
            fences = self.fences()
            quartiles = tuple(self.quantiles(0.25))

        with timer.section('central_tendency'):
            mean = self.mean
            geometric = self.geometric_mean
            harmonic = self.harmonic_mean
            mode = self.mode

        with timer.section('dispersion'):
            std = self.std
            cv = self.coefficient_of_variation
            ci = self.confidence_interval(t)

        with timer.section('shape'):
            skew = self.skewness
            kurt = self.kurtosis

        timer.stop()

        params = DescriptiveParams(
            n=n,
            minimum=minimum,
            maximum=maximum,
            mean=mean,
            geometric_mean=geometric,
            harmonic_mean=harmonic,
            median=median,
            mode=mode,
            standard_deviation=std,
            coefficient_of_variation=cv,
            confidence_interval=ci,
            skewness=skew,
            kurtosis=kurt,
            five_number_summary=five,
            fences=fences,
            quartiles=quartiles,
        )

        result = Result(
            params=params,
            info={'n': n, 'cached': self._cache.valid_names()},
            timing=timer.result(),
            warnings=tuple(_collect_warnings(params)),
        )
        return DescriptiveSolution(_result=result)

    def __repr__(self) -> str:
        return f"DataStats(samples={self.samples})"


def _collect_warnings(params: DescriptiveParams) -> list[str]:
    """Non-fatal diagnostics for statistics that are neutral or undefined."""
    n = params.n
    warnings_list: list[str] = []

    if n == 0:
        warnings_list.append("sample is empty: all statistics are neutral values")
        return warnings_list

    if n < 2:
        warnings_list.append(f"quantiles: requires at least 2 samples, got {n}")
    if n < 3:
        warnings_list.append(f"skewness: requires at least 3 samples, got {n}")
    if n < 4:
        warnings_list.append(f"kurtosis: requires at least 4 samples, got {n}")

    if n >= 3 and params.standard_deviation == 0.0:
        warnings_list.append("standard deviation is 0: skewness and kurtosis are undefined")

    if params.mean == 0.0:
        warnings_list.append("mean is 0: coefficient of variation is undefined")

    if math.isnan(params.geometric_mean):
        warnings_list.append("geometric mean is NaN: product of observations is negative")

    return warnings_list
