"""Benchmark and cross-check of classic in-memory sorting algorithms.

Exports the algorithm registry, the input generator and the comparison driver.
"""

from sortbench.algorithms import ALGORITHMS  # noqa: F401
from sortbench.driver import run_comparison  # noqa: F401
from sortbench.errors import InvalidRangeError, InvalidSizeError  # noqa: F401
from sortbench.generator import generate_random_sequence  # noqa: F401

__all__ = [
    "ALGORITHMS",
    "InvalidRangeError",
    "InvalidSizeError",
    "generate_random_sequence",
    "run_comparison",
]
