# rated1000

A small library of solvers for well-known competitive-programming problems,
grouped by the kind of data they work on, plus a command that reads
judge-style input and prints the answers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

Each solver is a plain function that takes Python values and returns the
answer for a single case.

| Module               | Functions                                                                     |
|----------------------|-------------------------------------------------------------------------------|
| `rated1000.greedy`   | `basketball_together`, `helmets_in_the_night`, `luke_and_foodie`, `oly_game` |
| `rated1000.arrays`   | `beautiful_array`, `array_merging`, `monsters_order`, `ski_resort`           |
| `rated1000.strings`  | `distinct_split`, `traffic_light`, `swap_and_delete`                         |
| `rated1000.numbers`  | `minimum_lcm`, `raspberries`                                                 |

```python
from rated1000.greedy import basketball_together
from rated1000.strings import swap_and_delete
from rated1000.numbers import minimum_lcm

teams = basketball_together([180, 90, 170, 170, 180, 180], 180)
deletions = swap_and_delete("0110")
pair = minimum_lcm(9)
```

`beautiful_array` returns `None` when no array with the requested properties
exists. Malformed inputs, such as an empty list of piles, a non-positive `k`,
or a traffic-light cycle without green, raise `ValueError`.

To solve a whole judge-style input held in a string, use
`rated1000.cli.run(problem, text)`, which returns the output text, one line per
test case. An unknown problem name raises `ValueError`.

## Command line

```
rated1000 PROBLEM [INPUT]
```

`PROBLEM` selects one of the solvers:

`array-merging`, `basketball`, `beautiful-array`, `distinct-split`, `helmets`,
`luke-and-foodie`, `minimum-lcm`, `monsters`, `oly-game`, `raspberries`,
`ski-resort`, `swap-and-delete`, `traffic-light`.

`INPUT` is a file to read; it defaults to `-`, meaning standard input:

```
rated1000 minimum-lcm < input.txt
```

Input is whitespace-separated. Every problem except `basketball` starts with
the number of test cases; `basketball` reads a single case. One answer is
printed per case, and `beautiful-array` prints `-1` for a case with no answer.
On unreadable or malformed input the command prints an error to standard
error and exits with status 1.