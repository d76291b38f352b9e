"""Sensors and beacons on a grid, and the area the sensors can rule out."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from aoc2022.grid import GridCoord, SparseDefaultGrid

ROW_TO_CHECK = 2_000_000
SEARCH_AREA_MIN = 0
SEARCH_AREA_MAX = 4_000_000

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_LINE = re.compile(
    r"Sensor at x=([+-]?[0-9]+), y=([+-]?[0-9]+): "
    r"closest beacon is at x=([+-]?[0-9]+), y=([+-]?[0-9]+)\n?"
)


class SensorParseError(ValueError):
    """Raised when a sensor report line cannot be read."""


def taxicab_distance(a: GridCoord, b: GridCoord) -> int:
    """Manhattan distance between two positions."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def _i32(text: str, line: str) -> int:
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise SensorParseError(f"Failed to parse Sensor Data: number out of range in {line!r}")
    return value


@dataclass(frozen=True)
class Sensor:
    """A sensor and the beacon closest to it."""

    pos: GridCoord
    nearest_beacon: GridCoord

    @classmethod
    def from_line(cls, line: str) -> Sensor:
        """Parse ``Sensor at x=.., y=..: closest beacon is at x=.., y=..``."""
        match = _LINE.fullmatch(line)
        if match is None:
            raise SensorParseError(f"Failed to parse Sensor Data: {line!r}")
        sx, sy, bx, by = (_i32(group, line) for group in match.groups())
        return cls(GridCoord(sx, sy), GridCoord(bx, by))

    def nearest_beacon_distance(self) -> int:
        return taxicab_distance(self.pos, self.nearest_beacon)

    def coverage_by_row(self, row: int) -> range | None:
        """The x positions in ``row`` within reach, or None if none are."""
        reach = self.nearest_beacon_distance()
        if row > self.pos.y + reach or row < self.pos.y - reach:
            return None
        spread = reach - abs(row - self.pos.y)
        return range(self.pos.x - spread, self.pos.x + spread + 1)

    def coverage_by_column(self, col: int) -> range | None:
        """The y positions in column ``col`` within reach, or None if none are."""
        reach = self.nearest_beacon_distance()
        if col > self.pos.x + reach or col < self.pos.x - reach:
            return None
        spread = reach - abs(col - self.pos.x)
        return range(self.pos.y - spread, self.pos.y + spread + 1)

    def in_coverage_range(self, pos: GridCoord) -> bool:
        row = self.coverage_by_row(pos.y)
        col = self.coverage_by_column(pos.x)
        if row is None or col is None:
            return False
        return pos.x in row and pos.y in col


def _merge(spans: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[list[int]] = []
    for start, stop in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], stop)
        else:
            merged.append([start, stop])
    return [(start, stop) for start, stop in merged]


def beacon_free_count(sensors: Iterable[Sensor], row: int) -> int:
    """Number of positions in ``row`` that cannot hold an unseen beacon."""
    sensors = list(sensors)
    spans = _merge(
        (r.start, r.stop)
        for s in sensors
        if (r := s.coverage_by_row(row)) is not None
    )
    beacons = {s.nearest_beacon.x for s in sensors if s.nearest_beacon.y == row}
    covered_beacons = sum(
        any(start <= x < stop for start, stop in spans) for x in beacons
    )
    return sum(stop - start for start, stop in spans) - covered_beacons


def uncovered_positions(
    sensors: Iterable[Sensor], low: int, high: int
) -> Iterator[GridCoord]:
    """Positions in the square ``low..=high`` outside every sensor's reach.

    Columns are scanned left to right, each from top to bottom.
    """
    sensors = list(sensors)
    for x in range(low, high + 1):
        spans = _merge(
            (r.start, r.stop)
            for s in sensors
            if (r := s.coverage_by_column(x)) is not None
        )
        y = low
        for start, stop in spans:
            if start > y:
                for free in range(y, min(start, high + 1)):
                    yield GridCoord(x, free)
            y = max(y, stop)
            if y > high:
                break
        for free in range(y, high + 1):
            yield GridCoord(x, free)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find where beacons cannot be.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--row", type=int, default=ROW_TO_CHECK)
    parser.add_argument("--min", dest="low", type=int, default=SEARCH_AREA_MIN)
    parser.add_argument("--max", dest="high", type=int, default=SEARCH_AREA_MAX)
    args = parser.parse_args(argv)
    sensors = [Sensor.from_line(line) for line in args.input.read_text().splitlines()]

    grid: SparseDefaultGrid[str] = SparseDefaultGrid(".")
    for sensor in sensors:
        grid.set(sensor.pos, "S")
        grid.set(sensor.nearest_beacon, "B")
    if grid.width() < 100 and grid.height() < 100:
        print(f"Sensor Grid:\n{grid}")

    print(f"Coverage for Row {args.row}: {beacon_free_count(sensors, args.row)}")
    for pos in uncovered_positions(sensors, args.low, args.high):
        print(f"Potential canditate: {pos}")
    return 0