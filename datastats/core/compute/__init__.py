"""
Shared compute infrastructure for datastats.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from datastats.core.compute.timing import Timer
from datastats.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    "Timer",
    "ToleranceTier",
    "select_tolerance",
]
