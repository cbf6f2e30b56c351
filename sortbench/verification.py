"""Correctness checks over sort outputs."""

from collections import Counter
from typing import Callable, Optional, Sequence


def all_equal(results: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` if every result is element-wise identical to the first."""
    for i in range(1, len(results)):
        if list(results[i]) != list(results[0]):
            return False
    return True


def is_sorted(seq: Sequence, key: Optional[Callable] = None) -> bool:
    keys = list(seq) if key is None else [key(x) for x in seq]
    return all(keys[i] <= keys[i + 1] for i in range(len(keys) - 1))


def is_permutation(a: Sequence, b: Sequence) -> bool:
    """Multiset equality: same elements with the same multiplicities."""
    return len(a) == len(b) and Counter(a) == Counter(b)
