"""Core data structures for sorting benchmark runs.

This module defines:
    Sequence         -- alias for the integer lists being sorted.
    SortFn           -- uniform signature shared by every algorithm.
    SortRun          -- one timed invocation of a single algorithm.
    ComparisonReport -- outcome of a full generate / sort / verify pass.
    SweepConfig      -- plan parameters for a multi-size experiment batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

Sequence = List[int]
SortFn = Callable[..., list]

CANONICAL_ORDER: Tuple[str, ...] = (
    "Selection Sort",
    "Merge Sort",
    "Heapsort",
    "Quicksort",
)


@dataclass(frozen=True)
class SortRun:
    """Single timed algorithm run.

    Fields:
        label: Display name of the algorithm (e.g. ``"Merge Sort"``).
        elapsed_ms: Wall-clock duration truncated to whole milliseconds.
        output: Sorted sequence returned by the algorithm.
    """

    label: str
    elapsed_ms: int
    output: Sequence = field(repr=False)


@dataclass
class ComparisonReport:
    """Result of one benchmark pass over a single generated input.

    Fields:
        size: Length of the generated input.
        min_value: Inclusive lower bound of generated values.
        max_value: Inclusive upper bound of generated values.
        seed: Seed used for generation (``None`` when entropy-seeded).
        runs: Timed runs in execution order.
        identical: ``True`` when every run produced the same output.
    """

    size: int
    min_value: int
    max_value: int
    seed: int | None
    runs: List[SortRun]
    identical: bool

    def timings(self) -> Dict[str, int]:
        return {run.label: run.elapsed_ms for run in self.runs}

    def to_dict(self) -> dict:
        # outputs are omitted: they are as large as the input itself
        return {
            "size": self.size,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "seed": self.seed,
            "identical": self.identical,
            "timings_ms": self.timings(),
            "order": [run.label for run in self.runs],
        }


@dataclass(frozen=True)
class SweepConfig:
    """Parameters of an experiment batch across several input sizes."""

    sizes: Tuple[int, ...]
    repeats: int = 1
    min_value: int = 1
    max_value: int = 100000
    base_seed: int = 0
    algorithms: Tuple[str, ...] = CANONICAL_ORDER
