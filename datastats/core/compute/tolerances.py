"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing datastats output against
other implementations:
- exact: same algorithm, same summation order (bit-identical or 1 ulp)
- reference: independent float64 implementation (numpy, scipy)
- published: textbook values quoted to a handful of digits

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Same algorithm and summation order',
)

# numpy/scipy use pairwise summation, so the last few bits can differ
REFERENCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='reference',
    description='Independent float64 implementation',
)

PUBLISHED_3 = ToleranceTier(
    rtol=0.0,
    atol=1e-3,
    name='published_3',
    description='Published value quoted to three decimals',
)

PUBLISHED_2 = ToleranceTier(
    rtol=0.0,
    atol=1e-2,
    name='published_2',
    description='Published value quoted to two decimals',
)


def select_tolerance(digits: int | None = None) -> ToleranceTier:
    """Select a tolerance tier for a comparison quoted to `digits` decimals."""
    if digits is None:
        return REFERENCE
    if digits >= 3:
        return PUBLISHED_3
    return PUBLISHED_2
