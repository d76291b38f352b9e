"""Pour sand into a scanned cave until it stops coming to rest."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from aoc2022.cave import (
    Cave,
    CavePos,
    Element,
    IntoVoidError,
    NotInCaveError,
    OccupiedError,
    parse_rock_formations,
)

SAND_START = CavePos(500, 0)
FLOOR_OFFSET = 2


class CaveBuilder:
    """Builds fresh caves from a rock scan."""

    def __init__(self, text: str) -> None:
        self.text = text

    def _rocks(self) -> list[CavePos]:
        rocks = parse_rock_formations(self.text)
        if not rocks:
            raise ValueError("the scan holds no rocks")
        return rocks

    def _fill(self, cave: Cave, rocks: list[CavePos]) -> Cave:
        for rock in rocks:
            cave.set(rock, Element.ROCK)
        return cave

    def with_floor(self, offset: int = FLOOR_OFFSET) -> Cave:
        """A cave with a floor ``offset`` rows below the lowest rock row count."""
        rocks = self._rocks()
        width = max(p.x for p in rocks) * 2
        height = max(p.y for p in rocks) + 1
        return self._fill(Cave.with_floor(height + offset, width), rocks)

    def without_floor(self) -> Cave:
        """A cave just large enough for the rocks, open at the bottom."""
        rocks = self._rocks()
        width = max(p.x for p in rocks) + 1
        height = max(p.y for p in rocks) + 1
        return self._fill(Cave(height, width), rocks)


class CaveSimulation:
    """Drops sand one unit at a time and counts how much comes to rest."""

    def __init__(
        self,
        builder: CaveBuilder,
        with_floor: bool = False,
        drop_location: CavePos = SAND_START,
    ) -> None:
        self.builder = builder
        self.drop_location = drop_location
        self.reset(with_floor)

    def reset(self, with_floor: bool) -> None:
        """Start over with a new cave."""
        self.cave = self.builder.with_floor() if with_floor else self.builder.without_floor()
        self.total_sand = 0

    def step(self) -> bool:
        """Drop one unit; False once sand no longer settles."""
        try:
            self.cave.drop_sand(self.drop_location)
        except IntoVoidError:
            if self.cave.has_floor():
                raise RuntimeError(
                    "Sand dropping into the void in a cave with a floor"
                ) from None
            return False
        except OccupiedError:
            return False
        except NotInCaveError:
            raise ValueError("Drop location invalid") from None
        self.total_sand += 1
        return True

    def run(self) -> int:
        """Drop sand until it stops settling; return the amount at rest."""
        while self.step():
            pass
        return self.total_sand


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pour sand into a cave.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--show", action="store_true", help="draw the caves")
    args = parser.parse_args(argv)
    builder = CaveBuilder(args.input.read_text())
    for with_floor, label in ((False, "no floor"), (True, "with floor")):
        simulation = CaveSimulation(builder, with_floor)
        total = simulation.run()
        if args.show:
            print(simulation.cave)
        print(f"Fallen Sand ({label}): {total}")
    return 0