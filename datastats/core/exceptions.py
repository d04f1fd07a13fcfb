"""
Exception hierarchy for datastats.

All exceptions inherit from DataStatsError to allow catching any
library-specific error.

Degenerate statistical input (empty samples, too few observations,
mismatched series) never raises: those cases return documented neutral
values. Exceptions are reserved for malformed input that cannot be
interpreted as numbers at all.
"""


class DataStatsError(Exception):
    """Base exception for all datastats errors."""
    pass


class ValidationError(DataStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be converted to a numeric array.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a sample is not one-dimensional or when an observation
    matrix is ragged or not two-dimensional.

    Attributes:
        shape: Offending shape, if one could be determined
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape
