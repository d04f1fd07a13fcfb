"""
SampleDesign: immutable snapshot of the sample under analysis.

Wraps a one-dimensional float64 array. The engine replaces its design
wholesale on every assignment; a design never changes after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from datastats.core.validation import check_array, check_1d


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for single-sample descriptive statistics.

    Holds a private, read-only copy of the sample. Immutable after
    construction.

    Construction:
        SampleDesign.from_array(data)
        SampleDesign.empty()
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, data: ArrayLike) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of real numbers. Lists, tuples, numpy arrays and
            pandas Series (anything with a .values attribute) are accepted.
            The values are copied; the caller may mutate or discard the
            original afterwards.

        Raises
        ------
        ValidationError
            If data is not numeric.
        DimensionError
            If data is not one-dimensional.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        arr.setflags(write=False)
        return cls(_data=arr)

    @classmethod
    def empty(cls) -> SampleDesign:
        """Design holding no observations."""
        arr = np.empty(0, dtype=np.float64)
        arr.setflags(write=False)
        return cls(_data=arr)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The sample (read-only view)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._data.shape[0])
