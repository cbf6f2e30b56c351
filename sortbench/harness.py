"""Timing wrapper shared by the single comparison and the experiment batch.

Every algorithm receives its own copy of the input so that an algorithm
mutating its argument can never influence the next one. Timing uses the
monotonic ``time.perf_counter`` clock and is truncated to whole
milliseconds, so very fast runs legitimately report ``0``.
"""
from __future__ import annotations

import time
from typing import Sequence

from sortbench.models import SortFn


def measure(
    label: str,
    data: Sequence[int],
    sort_fn: SortFn,
    verbose: bool = True,
) -> tuple[list[int], int]:
    """Run ``sort_fn`` on a fresh copy of ``data`` and time it.

    Args:
        label: Display name printed in the report line.
        data: Original input; never passed to ``sort_fn`` directly.
        sort_fn: Algorithm with the signature ``list -> list``.
        verbose: Print ``"<label>: <ms> ms"`` to stdout when ``True``.

    Returns:
        Tuple ``(output, elapsed_ms)``.
    """
    working = list(data)
    t0 = time.perf_counter()
    output = sort_fn(working)
    t1 = time.perf_counter()
    elapsed_ms = int((t1 - t0) * 1000)
    if verbose:
        print(f"{label}: {elapsed_ms} ms")
    return output, elapsed_ms
