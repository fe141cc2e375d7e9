"""Number-theory problems: minimum LCM split and raspberry products."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count


def minimum_lcm(n: int) -> tuple[int, int]:
    """Return ``(a, b)`` with ``a + b == n`` and the least possible ``lcm(a, b)``."""
    for divisor in count(2):
        if divisor * divisor > n:
            break
        if n % divisor == 0:
            largest = n // divisor
            return largest, n - largest
    return 1, n - 1


def raspberries(a: Sequence[int], k: int) -> int:
    """Return the fewest increments making the product of ``a`` divisible by ``k``."""
    if not a:
        raise ValueError("at least one number is required")
    if k < 1:
        raise ValueError("k must be positive")
    best = min((-value) % k for value in a)
    if k == 4:
        evens = sum(1 for value in a if value % 2 == 0)
        best = min(best, max(0, 2 - evens))
    return best