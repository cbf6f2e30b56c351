"""Top-down merge sort (stable, not in-place)."""

from typing import Callable, List, Optional


def merge(left: List, right: List, key: Optional[Callable] = None) -> List:
    """Merge two ascending lists into a new ascending list.

    Ties are taken from ``left`` first, which is what makes the sort stable.
    """
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key is None:
            take_left = left[i] <= right[j]
        else:
            take_left = key(left[i]) <= key(right[j])
        if take_left:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _merge_sort_range(arr: List, left: int, right: int, key: Optional[Callable]) -> List:
    if left >= right:
        return arr[left : right + 1]
    mid = (left + right) // 2
    left_part = _merge_sort_range(arr, left, mid, key)
    right_part = _merge_sort_range(arr, mid + 1, right, key)
    return merge(left_part, right_part, key)


def merge_sort(seq: List, key: Optional[Callable] = None) -> List:
    """Return a stably sorted copy of ``seq``.

    The inclusive index range ``[left, right]`` is split at the midpoint until
    ranges hold at most one element, then halves are merged back together.
    """
    arr = list(seq)
    return _merge_sort_range(arr, 0, len(arr) - 1, key)
