"""Quicksort with a middle pivot and three-way partitioning."""

from typing import Callable, List, Optional


def quicksort(seq: List, key: Optional[Callable] = None) -> List:
    """Return a sorted copy of ``seq``.

    Elements equal to the pivot are collected once and never revisited, so
    inputs with many duplicates do not degrade. Recursion depth is O(n) in
    the worst case.
    """
    if len(seq) <= 1:
        return list(seq)
    pivot_item = seq[len(seq) // 2]
    pivot = pivot_item if key is None else key(pivot_item)
    less, equal, greater = [], [], []
    for x in seq:
        kx = x if key is None else key(x)
        if kx < pivot:
            less.append(x)
        elif kx == pivot:
            equal.append(x)
        else:
            greater.append(x)
    return quicksort(less, key) + equal + quicksort(greater, key)
