import random

import pytest

from rated1000.greedy import (
    basketball_together,
    helmets_in_the_night,
    luke_and_foodie,
    oly_game,
)


def test_basketball_worked_example():
    assert basketball_together([90, 80, 70, 60, 50, 100], 180) == 2


def test_basketball_everyone_alone_beats_enemy():
    powers = [200, 300, 101, 150]
    assert basketball_together(powers, 100) == len(powers)


def test_basketball_order_does_not_matter():
    powers = [90, 80, 70, 60, 50, 100, 10, 30]
    shuffled = powers[:]
    random.Random(3).shuffle(shuffled)
    assert basketball_together(shuffled, 180) == basketball_together(powers, 180)


def test_basketball_more_players_never_fewer_teams():
    powers = [90, 80, 70, 60, 50, 100]
    assert basketball_together(powers + [55], 180) >= basketball_together(powers, 180)


def test_basketball_stronger_enemy_never_more_teams():
    powers = [90, 80, 70, 60, 50, 100, 120, 5]
    results = [basketball_together(powers, d) for d in range(0, 400, 20)]
    assert results == sorted(results, reverse=True)
    assert all(r <= len(powers) for r in results)


def test_helmets_worked_example():
    assert helmets_in_the_night(3, [2, 3, 2, 1, 1, 3], [4, 3, 2, 6, 3, 6]) == 16


def test_helmets_direct_is_cheapest():
    p = 2
    capacities = [1, 1, 1]
    assert helmets_in_the_night(p, capacities, [5, 5, 5]) == p * len(capacities)


def test_helmets_free_sharing_costs_only_first():
    p = 7
    capacities = [4, 4, 4, 4]
    assert helmets_in_the_night(p, capacities, [0, 0, 0, 0]) == p


def test_helmets_never_above_telling_everyone():
    p = 5
    capacities = [3, 1, 2, 5, 1]
    costs = [9, 1, 4, 6, 2]
    assert helmets_in_the_night(p, capacities, costs) <= p * len(capacities)


def test_helmets_mismatched_lengths():
    with pytest.raises(ValueError):
        helmets_in_the_night(1, [1, 2], [1])


def test_luke_worked_example():
    assert luke_and_foodie([3, 10, 9, 8, 7], 3) == 1


def test_luke_zero_tolerance_distinct_piles():
    piles = [1, 5, 2, 8, 3]
    assert luke_and_foodie(piles, 0) == len(piles) - 1


def test_luke_wide_tolerance_matches_single_pile():
    piles = [4, 9, 1, 7]
    assert luke_and_foodie(piles, 100) == luke_and_foodie(piles[:1], 100)


def test_luke_bounded_by_pile_count():
    piles = [1, 20, 3, 40, 5, 60]
    result = luke_and_foodie(piles, 2)
    assert 0 <= result <= len(piles) - 1


def test_luke_empty():
    with pytest.raises(ValueError):
        luke_and_foodie([], 1)


def test_oly_single_array_gives_its_minimum():
    array = [5, 1, 3]
    assert oly_game([array]) == min(array)


def test_oly_bounds():
    arrays = [[10, 20, 30], [1, 50], [7, 8, 9, 100]]
    result = oly_game(arrays)
    assert result >= sum(min(a) for a in arrays)
    assert result <= sum(sorted(a)[1] for a in arrays)


def test_oly_order_invariant():
    arrays = [[10, 20, 30], [1, 50], [7, 8, 9, 100]]
    reordered = [list(reversed(a)) for a in reversed(arrays)]
    assert oly_game(reordered) == oly_game(arrays)


def test_oly_short_array_rejected():
    with pytest.raises(ValueError):
        oly_game([[1, 2], [3]])