"""Selection sort: O(n^2) comparisons, O(n) exchanges, not stable."""

from typing import Callable, List, Optional


def selection_sort(seq: List, key: Optional[Callable] = None) -> List:
    """Return a sorted copy of ``seq`` built by repeated minimum selection.

    For each boundary ``i`` the remainder ``[i, n)`` is scanned for the first
    smallest element, which is then exchanged into position ``i``. There is no
    early exit for already-sorted input.
    """
    arr = list(seq)
    keys = arr if key is None else [key(x) for x in arr]
    n = len(arr)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if keys[j] < keys[min_idx]:
                min_idx = j
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            if keys is not arr:
                keys[i], keys[min_idx] = keys[min_idx], keys[i]
    return arr
