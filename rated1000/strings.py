"""String problems: distinct splits, traffic lights and binary deletions."""

from __future__ import annotations

from collections import Counter


def distinct_split(s: str) -> int:
    """Return the largest sum of distinct-character counts over a split of ``s``.

    The left part is never empty; the right part may be.
    """
    if not s:
        raise ValueError("string must not be empty")
    seen: set[str] = set()
    prefix = []
    for ch in s:
        seen.add(ch)
        prefix.append(len(seen))
    seen = set()
    suffix = []
    for ch in reversed(s):
        seen.add(ch)
        suffix.append(len(seen))
    suffix.reverse()
    suffix.append(0)
    return max(left + right for left, right in zip(prefix, suffix[1:]))


def traffic_light(state: str, colors: str) -> int:
    """Return the longest possible wait for green starting from ``state``.

    ``colors`` is one cycle of the light and repeats forever.
    """
    if "g" not in colors:
        raise ValueError("the cycle has no green light")
    if state not in colors:
        raise ValueError(f"state {state!r} does not occur in the cycle")
    doubled = colors * 2
    next_green: int | None = None
    longest = 0
    for index, ch in reversed(list(enumerate(doubled))):
        if ch == "g":
            next_green = index
        if ch == state and next_green is not None:
            longest = max(longest, next_green - index)
    return longest


def swap_and_delete(s: str) -> int:
    """Return the fewest deletions so that a rearrangement of ``s`` differs from it everywhere."""
    counts = Counter(s)
    ones, zeros = counts["1"], len(s) - counts["1"]
    kept = 0
    for ch in s:
        if ch == "1" and zeros > 0:
            zeros -= 1
        elif ch != "1" and ones > 0:
            ones -= 1
        else:
            break
        kept += 1
    return len(s) - kept