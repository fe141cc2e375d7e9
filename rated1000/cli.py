"""Command-line front end reading problem input in the judge's whitespace format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from rated1000.arrays import array_merging, beautiful_array, monsters_order, ski_resort
from rated1000.greedy import (
    basketball_together,
    helmets_in_the_night,
    luke_and_foodie,
    oly_game,
)
from rated1000.numbers import minimum_lcm, raspberries
from rated1000.strings import distinct_split, swap_and_delete, traffic_light


class _Tokens:
    """Whitespace-separated tokens consumed in order."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        value = self.word()
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"expected an integer, got {value!r}") from None

    def integers(self, amount: int) -> list[int]:
        if amount < 0:
            raise ValueError(f"negative count {amount}")
        return [self.integer() for _ in range(amount)]


_Solver = Callable[[_Tokens], str]


def _test_cases(solve: _Solver) -> Callable[[_Tokens], Iterator[str]]:
    """Wrap a single-case solver so it reads a case count first."""

    def solve_all(tokens: _Tokens) -> Iterator[str]:
        for _ in range(tokens.integer()):
            yield solve(tokens)

    return solve_all


def _single_case(solve: _Solver) -> Callable[[_Tokens], Iterator[str]]:
    def solve_one(tokens: _Tokens) -> Iterator[str]:
        yield solve(tokens)

    return solve_one


def _join(values: list[int]) -> str:
    return " ".join(map(str, values))


def _basketball(tokens: _Tokens) -> str:
    n, enemy = tokens.integer(), tokens.integer()
    return str(basketball_together(tokens.integers(n), enemy))


def _beautiful(tokens: _Tokens) -> str:
    n, k, b, s = tokens.integers(4)
    result = beautiful_array(n, k, b, s)
    return "-1" if result is None else _join(result)


def _distinct_split(tokens: _Tokens) -> str:
    tokens.integer()
    return str(distinct_split(tokens.word()))


def _luke(tokens: _Tokens) -> str:
    n, x = tokens.integer(), tokens.integer()
    return str(luke_and_foodie(tokens.integers(n), x))


def _traffic(tokens: _Tokens) -> str:
    tokens.integer()
    state = tokens.word()
    colors = tokens.word()
    return str(traffic_light(state, colors))


def _array_merging(tokens: _Tokens) -> str:
    n = tokens.integer()
    a = tokens.integers(n)
    b = tokens.integers(n)
    return str(array_merging(a, b))


def _helmets(tokens: _Tokens) -> str:
    n, p = tokens.integer(), tokens.integer()
    capacities = tokens.integers(n)
    costs = tokens.integers(n)
    return str(helmets_in_the_night(p, capacities, costs))


def _minimum_lcm(tokens: _Tokens) -> str:
    a, b = minimum_lcm(tokens.integer())
    return f"{a} {b}"


def _monsters(tokens: _Tokens) -> str:
    n, k = tokens.integer(), tokens.integer()
    return _join(monsters_order(tokens.integers(n), k))


def _oly(tokens: _Tokens) -> str:
    arrays = [tokens.integers(tokens.integer()) for _ in range(tokens.integer())]
    return str(oly_game(arrays))


def _raspberries(tokens: _Tokens) -> str:
    n, k = tokens.integer(), tokens.integer()
    return str(raspberries(tokens.integers(n), k))


def _ski(tokens: _Tokens) -> str:
    n, k, q = tokens.integers(3)
    return str(ski_resort(tokens.integers(n), k, q))


def _swap(tokens: _Tokens) -> str:
    return str(swap_and_delete(tokens.word()))


PROBLEMS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "basketball": _single_case(_basketball),
    "beautiful-array": _test_cases(_beautiful),
    "distinct-split": _test_cases(_distinct_split),
    "luke-and-foodie": _test_cases(_luke),
    "traffic-light": _test_cases(_traffic),
    "array-merging": _test_cases(_array_merging),
    "helmets": _test_cases(_helmets),
    "minimum-lcm": _test_cases(_minimum_lcm),
    "monsters": _test_cases(_monsters),
    "oly-game": _test_cases(_oly),
    "raspberries": _test_cases(_raspberries),
    "ski-resort": _test_cases(_ski),
    "swap-and-delete": _test_cases(_swap),
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` on judge-format input ``text`` and return the output text."""
    try:
        solver = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    lines = list(solver(_Tokens(text)))
    return "".join(f"{line}\n" for line in lines)


def _read(source: str, stdin: TextIO) -> str:
    if source == "-":
        return stdin.read()
    with open(source, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="rated1000", description=__doc__)
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, _read(args.input, sys.stdin))
    except (OSError, ValueError) as error:
        print(f"rated1000: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0