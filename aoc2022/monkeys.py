"""Monkeys passing items around according to each one's worry rules."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_MONKEY = re.compile(
    r"Monkey ([0-9]+):\n"
    r"[ \t]+Starting items: ((?:[0-9]+(?:, [0-9]+)*)?)\n"
    r"[ \t]+Operation: new = old (.)[ \t]*([0-9]+|old)\n"
    r"[ \t]+Test: divisible by ([0-9]+)\n"
    r"[ \t]+If true: throw to monkey ([0-9]+)\n"
    r"[ \t]+If false: throw to monkey ([0-9]+)\n"
    r"\n*"
)


class MonkeyNotFoundError(LookupError):
    """Raised when an item is thrown to a monkey that does not exist."""


class MonkeyParseError(ValueError):
    """Raised when the monkey notes cannot be read."""


class InspectOp(Enum):
    """How a monkey changes the worry level while inspecting an item."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, item: int, factor: int) -> int:
        if self is InspectOp.ADD:
            return item + factor
        if self is InspectOp.MUL:
            return item * factor
        if self is InspectOp.SUB:
            if factor > item:
                raise OverflowError(f"worry level {item} - {factor} drops below zero")
            return item - factor
        return item // factor


@dataclass
class Monkey:
    """A monkey with its items and throwing rules.

    ``inspect_value`` of None means the operation uses the old value itself.
    """

    id: int
    items: list[int]
    inspect_op: InspectOp
    inspect_value: int | None
    worrytest_value: int
    target_worried: int
    target_unworried: int
    inspected_items: int = field(default=0)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    def monkey_business(self, monkeys: Sequence[Monkey], panic_mode: bool = False) -> None:
        """Inspect and throw every item this monkey currently holds.

        Without panic the worry level is divided by three after inspection;
        in panic mode it is reduced modulo the product of all divisors.
        """
        modulus = math.prod(m.worrytest_value for m in monkeys) if panic_mode else 0
        for _ in range(len(self.items)):
            item = self.items.pop(0)
            worry = self._inspect(item)
            worry = worry % modulus if panic_mode else worry // 3
            log.info("Monkey %d is done inspecting item %d, worry now %d", self.id, item, worry)
            self._throw(worry, monkeys)

    def _inspect(self, item: int) -> int:
        self.inspected_items += 1
        factor = item if self.inspect_value is None else self.inspect_value
        worry = self.inspect_op.apply(item, factor)
        log.info("Monkey %d inspects item %d, worry rises to %d", self.id, item, worry)
        return worry

    def _throw(self, item: int, monkeys: Sequence[Monkey]) -> None:
        worried = item % self.worrytest_value == 0
        target = self.target_worried if worried else self.target_unworried
        if not 0 <= target < len(monkeys):
            raise MonkeyNotFoundError(f"monkey {target} does not exist")
        log.info("Monkey %d throws item %d to monkey %d", self.id, item, target)
        monkeys[target].take_item(item)

    def take_item(self, item: int) -> None:
        self.items.append(item)

    def inspect_count(self) -> int:
        return self.inspected_items

    def __str__(self) -> str:
        return f"Monkey {self.id}: " + ",".join(str(item) for item in self.items)


def _u32(text: str) -> int:
    value = int(text)
    if value > _U32_MAX:
        raise MonkeyParseError(f"number too large: {text}")
    return value


def _items(text: str) -> Iterable[int]:
    return [_u32(part) for part in text.split(", ")] if text else []


def parse_monkeys(text: str) -> list[Monkey]:
    """Read every monkey block; the whole text must be consumed."""
    monkeys = []
    pos = 0
    while pos < len(text):
        match = _MONKEY.match(text, pos)
        if match is None:
            raise MonkeyParseError(f"cannot read a monkey at {text[pos:pos + 40]!r}")
        ident, items, op, value, test, if_true, if_false = match.groups()
        try:
            inspect_op = InspectOp(op)
        except ValueError:
            raise MonkeyParseError(f"unknown operation {op!r}") from None
        monkeys.append(
            Monkey(
                _u32(ident),
                list(_items(items)),
                inspect_op,
                None if value == "old" else _u32(value),
                _u32(test),
                _u32(if_true),
                _u32(if_false),
            )
        )
        pos = match.end()
    return monkeys