"""Greedy solutions: team forming, news spreading, food piles and array games."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def basketball_together(powers: Iterable[int], enemy_power: int) -> int:
    """Return the largest number of teams that can each beat ``enemy_power``.

    A team beats the enemy when its strongest power times its size exceeds
    ``enemy_power``.  Every team is led by the strongest remaining player,
    who is given just enough of the weakest players to win.
    """
    players = deque(sorted(powers))
    teams = 0
    while players:
        strongest = players.pop()
        if strongest <= 0:
            break
        needed = max(enemy_power // strongest + 1, 1) - 1
        if needed > len(players):
            break
        for _ in range(needed):
            players.popleft()
        teams += 1
    return teams


def helmets_in_the_night(p: int, capacities: Sequence[int], costs: Sequence[int]) -> int:
    """Return the least cost to spread an announcement to every resident.

    Telling a resident directly costs ``p``.  Resident ``i`` can pass it on
    to at most ``capacities[i]`` others at ``costs[i]`` each.
    """
    if len(capacities) != len(costs):
        raise ValueError("capacities and costs must have the same length")
    residents = len(capacities)
    offers = sorted([(p, residents + 1), *zip(costs, capacities)])
    told = 1
    total = p
    for cost, capacity in offers[:residents]:
        spread = min(capacity, residents - told)
        told += spread
        total += cost * spread
    return total


def luke_and_foodie(piles: Sequence[int], x: int) -> int:
    """Return how many times the affinity must change to eat every pile.

    A pile of size ``a`` is edible with affinity ``v`` when ``|v - a| <= x``.
    """
    if not piles:
        raise ValueError("at least one pile is required")
    low, high = piles[0] - x, piles[0] + x
    changes = 0
    for pile in piles[1:]:
        low = max(low, pile - x)
        high = min(high, pile + x)
        if low > high:
            changes += 1
            low, high = pile - x, pile + x
    return changes


def oly_game(arrays: Sequence[Sequence[int]]) -> int:
    """Return the greatest total of array minimums after moving elements.

    Each array may give away one element; all given elements may end in a
    single array.  Every array must hold at least two elements.
    """
    if not arrays:
        return 0
    smallest_pairs = []
    for array in arrays:
        if len(array) < 2:
            raise ValueError("every array must hold at least two elements")
        smallest_pairs.append(heapq.nsmallest(2, array))
    first = min(pair[0] for pair in smallest_pairs)
    seconds = [pair[1] for pair in smallest_pairs]
    return sum(seconds) - min(seconds) + first