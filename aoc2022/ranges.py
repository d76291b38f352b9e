"""Section assignment ranges: detect pairs where one contains or overlaps the other."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from pathlib import Path

_I32 = re.compile(r"[+-]?[0-9]+")
_U32 = re.compile(r"\+?[0-9]+")
_I32_BOUNDS = (-(2**31), 2**31 - 1)
_U32_BOUNDS = (0, 2**32 - 1)


class RangeParseError(ValueError):
    """Raised for malformed range or line input."""


def _number(text: str, pattern: re.Pattern[str], bounds: tuple[int, int]) -> int:
    if not pattern.fullmatch(text):
        raise RangeParseError(f"invalid number: {text!r}")
    value = int(text)
    low, high = bounds
    if not low <= value <= high:
        raise RangeParseError(f"number out of range: {text}")
    return value


def _split_range(s: str) -> tuple[str, str]:
    low, sep, high = s.partition("-")
    if not sep:
        raise RangeParseError(f"Invalid input: invalid range: {s}")
    return low, high


def range_tuple(s: str) -> tuple[int, int]:
    """Parse ``"a-b"`` into a pair of signed integers."""
    low, high = _split_range(s)
    return _number(low, _I32, _I32_BOUNDS), _number(high, _I32, _I32_BOUNDS)


def range_from_str(s: str) -> range:
    """Parse ``"a-b"`` into the inclusive range a..=b."""
    low, high = _split_range(s)
    return range(_number(low, _U32, _U32_BOUNDS), _number(high, _U32, _U32_BOUNDS) + 1)


def _bounds(r: range) -> tuple[int, int]:
    return r.start, r.stop - 1


def contains_range(outer: range, inner: range) -> bool:
    """True when both ends of ``inner`` lie inside ``outer``."""
    start, end = _bounds(inner)
    return start in outer and end in outer


def intersects_range(a: range, b: range) -> bool:
    """True when either end of ``b`` lies inside ``a``."""
    start, end = _bounds(b)
    return start in a or end in a


def parse_pair(line: str) -> tuple[range, range]:
    """Parse a line of two comma-separated ranges."""
    left, sep, right = line.partition(",")
    if not sep:
        raise RangeParseError(
            f"Invalid line: does not contain two comma-separated ranges: {line}"
        )
    return range_from_str(left), range_from_str(right)


def count_contained(text: str) -> int:
    """Number of pairs in which one range fully contains the other."""
    return sum(
        contains_range(left, right) or contains_range(right, left)
        for left, right in map(parse_pair, text.splitlines())
    )


def count_overlapping(text: str) -> int:
    """Number of pairs whose ranges overlap."""
    return sum(
        intersects_range(left, right) or intersects_range(right, left)
        for left, right in map(parse_pair, text.splitlines())
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare section assignment ranges.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Total number of contained ranges: {count_contained(text)}")
    print(f"Total number of overlapping ranges: {count_overlapping(text)}")
    return 0