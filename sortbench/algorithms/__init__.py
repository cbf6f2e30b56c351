"""Sorting algorithms compared by the benchmark.

Contains:
- Selection Sort
- Merge Sort
- Heapsort
- Quicksort

``ALGORITHMS`` maps each display label to its function, in the fixed order
the benchmark runs them.
"""

from typing import Dict, Iterable, List, Tuple

from sortbench.algorithms.heap import heapsort
from sortbench.algorithms.merge import merge, merge_sort
from sortbench.algorithms.quick import quicksort
from sortbench.algorithms.selection import selection_sort
from sortbench.models import SortFn

ALGORITHMS: Dict[str, SortFn] = {
    "Selection Sort": selection_sort,
    "Merge Sort": merge_sort,
    "Heapsort": heapsort,
    "Quicksort": quicksort,
}


def select_algorithms(labels: Iterable[str] | None = None) -> List[Tuple[str, SortFn]]:
    """Resolve labels to ``(label, function)`` pairs, keeping the given order.

    Raises:
        ValueError: If a label is not registered or the selection is empty.
    """
    if labels is None:
        return list(ALGORITHMS.items())
    labels = list(labels)
    if not labels:
        raise ValueError("At least one algorithm must be selected")
    selected = []
    for label in labels:
        fn = ALGORITHMS.get(label)
        if fn is None:
            raise ValueError(f"Unknown algorithm: {label}")
        selected.append((label, fn))
    return selected


__all__ = [
    "ALGORITHMS",
    "heapsort",
    "merge",
    "merge_sort",
    "quicksort",
    "select_algorithms",
    "selection_sort",
]
