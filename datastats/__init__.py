"""
datastats: descriptive statistics over a one-dimensional sample.

Assign a sample to a DataStats engine and query central tendency,
dispersion, shape, order statistics and bivariate association. The most
common statistics are cached until the sample changes.

Submodules:
    descriptive: DataStats engine and one-shot functions
    core: Exceptions, result envelope, validation, timing
"""

__version__ = "0.1.0"

from datastats import descriptive
from datastats.descriptive import DataStats, describe

__all__ = [
    "__version__",
    "descriptive",
    "DataStats",
    "describe",
]
