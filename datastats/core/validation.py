"""
Input validation utilities for datastats.

These validators fail fast on malformed input: anything that cannot be read
as a real-valued array raises immediately with a clear message. They never
judge statistical adequacy (sample size, matching lengths); those cases are
answered with neutral values by the statistics themselves.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from datastats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Always returns a fresh array, so callers may keep it without aliasing
    the caller's buffer.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is accepted by numpy as a number; treat it as non-numeric here
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(rows: Sequence[Sequence[float]], name: str) -> None:
    """
    Verify every row of a nested sequence has the same length.

    numpy refuses ragged input with a generic ValueError; checking first
    gives a message naming the offending row.

    Args:
        rows: Nested sequence (rows of observations)
        name: Parameter name for error messages

    Raises:
        DimensionError: If row lengths differ
    """
    if isinstance(rows, np.ndarray):
        return

    width = None
    for i, row in enumerate(rows):
        if not hasattr(row, '__len__'):
            raise DimensionError(f"{name}: row {i} is not a sequence")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise DimensionError(
                f"{name}: ragged rows, row 0 has {width} values but row {i} has {len(row)}"
            )
