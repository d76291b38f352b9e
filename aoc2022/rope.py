"""A rope of knots dragged across a grid by its head."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from aoc2022.moves import Direction, Move, MoveParseError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """A grid position."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


_STEPS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _follow(pos: Cell, leader: Cell) -> Cell:
    """Where a knot at ``pos`` ends up after its leader moved to ``leader``."""
    dx = leader.x - pos.x
    dy = leader.y - pos.y
    reach = max(abs(dx), abs(dy))
    if reach <= 1:
        return pos
    if reach > 2:
        raise RuntimeError(f"knot at {pos} lost touch with its leader at {leader}")
    return Cell(pos.x + _sign(dx), pos.y + _sign(dy))


class _Segment:
    __slots__ = ("pos", "visited")

    def __init__(self, pos: Cell) -> None:
        self.pos = pos
        self.visited = {Cell(0, 0)}


class Rope:
    """A rope of ``length`` knots; the first knot is the head."""

    def __init__(self, length: int = 2) -> None:
        if length < 2:
            raise ValueError(f"a rope needs at least 2 knots, got {length}")
        self.length = length
        self.head = Cell()
        self._head_visited: set[Cell] = set()
        # Longer ropes carry one trailing knot beyond ``length``; it never
        # affects the knots in front of it.
        count = length if length > 2 else 1
        self._segments = [_Segment(Cell()) for _ in range(count)]

    def move_head(self, move: Move) -> None:
        """Move the head step by step, letting every knot follow."""
        dx, dy = _STEPS[move.direction]
        for _ in range(move.amount):
            new_head = Cell(self.head.x + dx, self.head.y + dy)
            log.debug("Moved Head %s -> %s", self.head, new_head)
            self.head = new_head
            self._head_visited.add(new_head)
            leader = new_head
            for segment in self._segments:
                new_pos = _follow(segment.pos, leader)
                if new_pos == segment.pos:
                    break
                segment.pos = new_pos
                segment.visited.add(new_pos)
                leader = new_pos

    def visited_count_head(self) -> int:
        return len(self._head_visited)

    def visited_count_tail(self) -> int:
        return self.visited_count_segment(self.length - 1)

    def visited_count_segment(self, segment: int) -> int:
        """Distinct positions visited by knot ``segment`` (0 is the head)."""
        if not 0 <= segment < self.length:
            raise IndexError(f"rope of length {self.length} has no knot {segment}")
        if segment == 0:
            return len(self._head_visited)
        return len(self._segments[segment - 1].visited)

    def segment_positions(self) -> list[Cell]:
        """Positions of all knots from head to tail."""
        return [self.head, *(segment.pos for segment in self._segments)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Track the knots of a rope.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    try:
        moves = [Move.parse(line) for line in args.input.read_text().splitlines()]
    except MoveParseError as err:
        raise ValueError(f"Error while parsing moves: {err}") from err

    rope = Rope()
    for move in moves:
        rope.move_head(move)
    print(f"2-rope Tail: Visited unique Locations: {rope.visited_count_tail()}")

    long_rope = Rope(10)
    for move in moves:
        long_rope.move_head(move)
    print(f"10-rope Tail: Visited unique Locations: {long_rope.visited_count_tail()}")
    return 0