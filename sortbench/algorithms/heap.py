"""Heapsort via repeated min-heap extraction."""

import heapq
from typing import Callable, List, Optional


def heapsort(seq: List, key: Optional[Callable] = None) -> List:
    """Return a sorted copy of ``seq`` by popping a min-heap until empty.

    The heap is built over a separate copy, so auxiliary space is O(n).
    With ``key`` the entries are decorated as ``(key(x), position, x)`` and the
    values themselves are never compared.
    """
    if key is None:
        heap = list(seq)
        heapq.heapify(heap)
        return [heapq.heappop(heap) for _ in range(len(heap))]
    decorated = [(key(x), pos, x) for pos, x in enumerate(seq)]
    heapq.heapify(decorated)
    return [heapq.heappop(decorated)[2] for _ in range(len(decorated))]
