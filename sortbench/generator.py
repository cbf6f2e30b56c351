import random
from typing import List

from sortbench.errors import InvalidRangeError, InvalidSizeError


def generate_random_sequence(
    n: int,
    min_value: int = 1,
    max_value: int = 100000,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> List[int]:
    """Generate ``n`` integers drawn uniformly from ``[min_value, max_value]``.

    An explicit ``rng`` wins over ``seed``; with neither, the generator is
    seeded from system entropy.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidSizeError(f"sequence length must be a positive integer, got {n!r}")
    if min_value > max_value:
        raise InvalidRangeError(f"min_value {min_value} exceeds max_value {max_value}")
    if rng is None:
        rng = random.Random(seed)
    return [rng.randint(min_value, max_value) for _ in range(n)]
