"""
Generic result container for datastats snapshots.

The Result class is the envelope returned by describe(). It separates the
statistic payload from metadata, timing and non-fatal diagnostics so that
tooling can inspect any of them without knowing the payload type.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample size, cache state)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a snapshot never drifts from its sample
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Statistic payload (mean, median, quartiles, ...)
        info: Structured metadata (sample size, which statistics were cached)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=3, mean=2.0, ...),
        ...     info={'n': 3, 'cached': ['mean', 'std']},
        ...     timing={'total_seconds': 0.0001},
        ...     warnings=('kurtosis: requires at least 4 samples, got 3',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
