"""Falling rocks pushed by jets of gas into a seven-wide chamber."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from pathlib import Path

from aoc2022.grid import GridCoord, Origin, SparseDefaultGrid

log = logging.getLogger(__name__)

NUM_ROCKS = 2022
_EMPTY = "."
_FILLED = "#"


class Direction(Enum):
    """A direction a rock can be pushed."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Rock:
    """A rock made of occupied unit cells."""

    def __init__(self, bits: Iterable[GridCoord]) -> None:
        self._bits = list(bits)

    def push(self, direction: Direction) -> None:
        dx, dy = direction.value
        self._bits = [GridCoord(b.x + dx, b.y + dy) for b in self._bits]

    def push_back(self, direction: Direction) -> None:
        """Undo a push in ``direction``."""
        self.push(direction.opposite)

    def bits(self) -> Iterator[GridCoord]:
        return iter(self._bits)

    def left(self) -> int:
        return min((b.x for b in self._bits), default=0)

    def right(self) -> int:
        return max((b.x for b in self._bits), default=0)

    def top(self) -> int:
        return max((b.y for b in self._bits), default=0)

    def bot(self) -> int:
        return min((b.y for b in self._bits), default=0)

    def collides(self, grid: SparseDefaultGrid) -> bool:
        """True when any cell of the rock is already set in ``grid``."""
        return any(grid.at_non_default(b) is not None for b in self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rock):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"Rock({self._bits!r})"


_SHAPES = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((2, 2), (2, 1), (2, 0), (1, 0), (0, 0)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (0, 1), (1, 1), (1, 0)),
)


class RockBuilder:
    """Hands out the five rock shapes in turn, placed at a given position."""

    def __init__(self) -> None:
        self.counter = 0

    def drop_at_pos(self, pos: GridCoord) -> Rock:
        """A new rock whose bottom-left corner sits at ``pos``."""
        shape = _SHAPES[self.counter % len(_SHAPES)]
        self.counter += 1
        return Rock(GridCoord(x + pos.x, y + pos.y) for x, y in shape)


def parse_jets(text: str) -> list[Direction]:
    """Read ``<`` and ``>`` characters as left and right pushes."""
    jets = []
    for c in text.strip():
        if c == "<":
            jets.append(Direction.LEFT)
        elif c == ">":
            jets.append(Direction.RIGHT)
        else:
            raise ValueError(f"Invalid jetstream input {c}")
    return jets


def tower_height(jets: Sequence[Direction], count: int = NUM_ROCKS) -> int:
    """Height of the tower after ``count`` rocks have come to rest."""
    if count > 0 and not jets:
        raise ValueError("no jets to push the rocks")
    grid: SparseDefaultGrid[str] = SparseDefaultGrid(_EMPTY, Origin.BOT_LEFT)
    dropper = RockBuilder()
    jet_counter = 0
    top = 0
    for i in range(count):
        rock = dropper.drop_at_pos(GridCoord(3, top + 4))
        while True:
            direction = jets[jet_counter % len(jets)]
            log.debug("Rock %d, iteration %d, pushing %s", i, jet_counter, direction)
            jet_counter += 1
            rock.push(direction)
            if rock.collides(grid) or rock.left() <= 0 or rock.right() > 7:
                rock.push_back(direction)
            rock.push(Direction.DOWN)
            if rock.collides(grid) or rock.bot() == 0:
                rock.push(Direction.UP)
                for bit in rock.bits():
                    grid.set(bit, _FILLED)
                top = max(top, rock.top())
                break
    return top


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate falling rocks.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--count", type=int, default=NUM_ROCKS)
    args = parser.parse_args(argv)
    jets = parse_jets(args.input.read_text())
    print(f"Height: {tower_height(jets, args.count)}")
    return 0