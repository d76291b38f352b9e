"""Play rounds of monkey keep-away and measure the monkey business level."""

from __future__ import annotations

import argparse
import copy
from collections.abc import Sequence
from pathlib import Path

from aoc2022.monkeys import Monkey, MonkeyParseError, parse_monkeys

ROUNDS = 20
PANIC_ROUNDS = 10_000


def play_round(monkeys: Sequence[Monkey], panic: bool = False) -> None:
    """Let every monkey take its turn once, in order."""
    for monkey in monkeys:
        monkey.monkey_business(monkeys, panic)


def business_level(monkeys: Sequence[Monkey]) -> int:
    """Product of the two highest inspection counts."""
    counts = sorted((m.inspect_count() for m in monkeys), reverse=True)
    if len(counts) < 2:
        raise ValueError("monkey business needs at least two monkeys")
    return counts[0] * counts[1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate monkeys throwing items.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    try:
        monkeys = parse_monkeys(args.input.read_text())
    except MonkeyParseError as err:
        raise ValueError(f"Error while reading monkeys: {err}") from err
    panic_monkeys = copy.deepcopy(monkeys)

    for i in range(ROUNDS):
        print(f"\nRound {i}")
        for monkey in monkeys:
            print(f"  {monkey}")
        play_round(monkeys, False)

    for monkey in monkeys:
        print(f"Monkey {monkey.id} inspected items {monkey.inspect_count()} times")
    print(
        f"Monkey business level after {ROUNDS} rounds (non-panic): "
        f"{business_level(monkeys)}"
    )

    for i in range(PANIC_ROUNDS):
        print(f"\rRound {i}/{PANIC_ROUNDS - 1}", end="")
        play_round(panic_monkeys, True)
    print()
    print(
        f"Monkey business level after {PANIC_ROUNDS} rounds (PANIC): "
        f"{business_level(panic_monkeys)}"
    )
    return 0