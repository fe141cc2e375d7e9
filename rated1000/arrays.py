"""Array construction and counting problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def beautiful_array(n: int, k: int, b: int, s: int) -> list[int] | None:
    """Return ``n`` non-negative numbers summing to ``s`` whose floors by ``k`` sum to ``b``.

    Returns ``None`` when no such array exists.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if k < 1:
        raise ValueError("k must be positive")
    minimum = k * b
    maximum = minimum + (k - 1) * n
    if not minimum <= s <= maximum:
        return None
    result = [minimum] + [0] * (n - 1)
    remaining = s - minimum
    for position in range(n):
        add = min(k - 1, remaining)
        result[position] += add
        remaining -= add
    return result


def _longest_runs(values: Sequence[int]) -> dict[int, int]:
    runs: dict[int, int] = {}
    for value, group in groupby(values):
        runs[value] = max(runs.get(value, 0), sum(1 for _ in group))
    return runs


def array_merging(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the longest run of equal values obtainable by merging ``a`` and ``b``."""
    runs_a = _longest_runs(a)
    runs_b = _longest_runs(b)
    return max(
        (runs_a.get(value, 0) + runs_b.get(value, 0) for value in runs_a.keys() | runs_b.keys()),
        default=0,
    )


def monsters_order(healths: Sequence[int], k: int) -> list[int]:
    """Return the 1-based order in which monsters die under repeated ``k`` damage."""
    if k < 1:
        raise ValueError("k must be positive")

    def remainder(health: int) -> int:
        return health % k or k

    ranked = sorted(enumerate(healths), key=lambda item: (-remainder(item[1]), item[0]))
    return [index + 1 for index, _ in ranked]


def ski_resort(temperatures: Sequence[int], k: int, q: int) -> int:
    """Count stretches of at least ``k`` consecutive days no warmer than ``q``."""
    total = 0
    for cold, group in groupby(temperatures, key=lambda t: t <= q):
        if not cold:
            continue
        length = sum(1 for _ in group)
        if length >= k:
            total += (length - k + 1) * (length - k + 2) // 2
    return total