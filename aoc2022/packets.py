"""Distress signal packets: nested lists of integers and their ordering."""

from __future__ import annotations

import argparse
import functools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

Element = Union[int, tuple]


class PacketParseError(ValueError):
    """Raised when packet text cannot be read."""


def compare(left: Element | Packet, right: Element | Packet) -> int:
    """Compare two elements: negative, zero or positive like a classic cmp.

    Two integers compare by value, two lists element by element and then by
    length; an integer facing a list is treated as a one-element list.
    """
    if isinstance(left, Packet):
        left = left.value
    if isinstance(right, Packet):
        right = right.value
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = (left,)
    if isinstance(right, int):
        right = (right,)
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


@functools.total_ordering
@dataclass(frozen=True)
class Packet:
    """A packet: a list whose items are integers or further lists."""

    value: tuple

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare(self.value, other.value) < 0

    def __str__(self) -> str:
        return _render(self.value)


def _render(element: Element) -> str:
    if isinstance(element, int):
        return str(element)
    return "[" + ",".join(_render(item) for item in element) + "]"


def _integer(text: str, pos: int) -> tuple[int, int] | None:
    match = _INTEGER.match(text, pos)
    if match is None:
        return None
    value = int(match.group(0))
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value, match.end()


def _element(text: str, pos: int) -> tuple[Element, int] | None:
    parsed = _list(text, pos)
    if parsed is not None:
        return parsed
    return _integer(text, pos)


def _list(text: str, pos: int) -> tuple[tuple, int] | None:
    if not text.startswith("[", pos):
        return None
    pos += 1
    items: list[Element] = []
    first = _element(text, pos)
    if first is not None:
        item, pos = first
        items.append(item)
        while text.startswith(",", pos):
            following = _element(text, pos + 1)
            if following is None:
                break
            item, pos = following
            items.append(item)
    if not text.startswith("]", pos):
        return None
    return tuple(items), pos + 1


def _packet(text: str, pos: int) -> tuple[Packet, int] | None:
    parsed = _list(text, pos)
    if parsed is None:
        return None
    value, pos = parsed
    return Packet(value), pos


def parse_packet(text: str) -> Packet:
    """Parse a single packet; the whole text must be one list."""
    parsed = _packet(text, 0)
    if parsed is None or parsed[1] != len(text):
        raise PacketParseError(f"invalid packet: {text!r}")
    return parsed[0]


def _pair(text: str, pos: int) -> tuple[tuple[Packet, Packet], int] | None:
    left = _packet(text, pos)
    if left is None or not text.startswith("\n", left[1]):
        return None
    right = _packet(text, left[1] + 1)
    if right is None:
        return None
    return (left[0], right[0]), right[1]


def parse_pairs(text: str) -> list[tuple[Packet, Packet]]:
    """Parse blank-line separated packet pairs ending in one newline."""
    pairs = []
    pos = 0
    parsed = _pair(text, pos)
    if parsed is not None:
        pair, pos = parsed
        pairs.append(pair)
        while text.startswith("\n\n", pos):
            parsed = _pair(text, pos + 2)
            if parsed is None:
                break
            pair, pos = parsed
            pairs.append(pair)
    if not text.startswith("\n", pos) or pos + 1 != len(text):
        raise PacketParseError(f"Parsing Error at {text[pos:pos + 40]!r}")
    return pairs


def right_order_sum(pairs: Iterable[tuple[Packet, Packet]]) -> int:
    """Sum of the 1-based indices of pairs already in the right order."""
    total = 0
    for index, (left, right) in enumerate(pairs, start=1):
        result = compare(left, right)
        if result == 0:
            raise ValueError(f"pair {index} cannot be ordered: {left} vs {right}")
        if result < 0:
            total += index
    return total


def decoder_key(pairs: Iterable[tuple[Packet, Packet]]) -> int:
    """Product of the 1-based positions of the divider packets once sorted."""
    div1 = Packet((2,))
    div2 = Packet((6,))
    packets = [packet for pair in pairs for packet in pair]
    packets.extend((div1, div2))
    packets.sort()
    return (packets.index(div1) + 1) * (packets.index(div2) + 1)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Order distress signal packets.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    pairs = parse_pairs(args.input.read_text())
    print(f"Sum of correct pair indices: {right_order_sum(pairs)}")
    print(f"Decoder Key: {decoder_key(pairs)}")
    return 0