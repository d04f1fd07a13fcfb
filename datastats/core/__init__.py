"""
Core infrastructure for datastats.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from datastats.core.result import Result
from datastats.core.exceptions import (
    DataStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "DataStatsError",
    "ValidationError",
    "DimensionError",
]
