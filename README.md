# aoc2022

Solvers for a selection of the 2022 Advent of Code puzzles. Each day is a
small module with plain functions you can call from Python, plus a command
that solves the puzzle for your own input.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

Every command reads the puzzle input from the file given as its first
argument, or from `input.txt` in the current directory when none is given,
and prints its answers.

| Command            | Puzzle                                   | Extra options                 |
|--------------------|------------------------------------------|-------------------------------|
| `aoc2022-ranges`   | Day 4: overlapping cleanup assignments   |                               |
| `aoc2022-crates`   | Day 5: crate stacks                      |                               |
| `aoc2022-marker`   | Day 6: start-of-message marker           | `--window N` (default 14)     |
| `aoc2022-filetree` | Day 7: directory sizes                   |                               |
| `aoc2022-forest`   | Day 8: tree visibility                   |                               |
| `aoc2022-rope`     | Day 9: rope bridge                       |                               |
| `aoc2022-crt`      | Day 10: CPU signal and CRT screen        |                               |
| `aoc2022-monkeys`  | Day 11: monkey business                  |                               |
| `aoc2022-hill`     | Day 12: hill climbing                    |                               |
| `aoc2022-packets`  | Day 13: distress signal packets          |                               |
| `aoc2022-sand`     | Day 14: falling sand                     | `--show` draws the final caves |
| `aoc2022-sensors`  | Day 15: beacon exclusion zone            | `--row`, `--min`, `--max`     |
| `aoc2022-rocks`    | Day 17: falling rock tower               | `--count N` (default 2022)    |

For example:

```
aoc2022-marker day6.txt --window 4
aoc2022-sensors day15.txt --row 10 --min 0 --max 20
```

## Using the library

The solvers take the puzzle text directly, so they are easy to use from your
own scripts or a REPL:

```python
from aoc2022.marker import find_marker
from aoc2022.packets import parse_pairs, right_order_sum
from aoc2022.ranges import count_contained

print(find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 14))
print(count_contained(open("day4.txt").read()))
print(right_order_sum(parse_pairs(open("day13.txt").read())))
```

Other building blocks include `aoc2022.rope.Rope`, `aoc2022.cpu.Interpreter`,
`aoc2022.grid.SparseDefaultGrid` and `aoc2022.cave.Cave`.

Bad input raises an exception that names the problem, for example
`RangeParseError` from `aoc2022.ranges` or `MoveParseError` from
`aoc2022.moves`.

## What it does not do

- Only days 4 to 15 and day 17 are covered; there are no solvers for days 1
  to 3 or day 16, and none past day 17.
- The falling-sand command runs the simulation to the end and prints the
  totals; it has no interactive or animated view.