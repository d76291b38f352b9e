"""A cave slice of rock and falling sand, and the scan that describes its rocks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_FORMATION = re.compile(r"((?:[0-9]+,[0-9]+)(?: -> [0-9]+,[0-9]+)*)?\n")


@dataclass(frozen=True)
class CavePos:
    """A position in the cave; y grows downwards."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Element(Enum):
    """What fills a cave position."""

    VOID = "Void"
    SAND = "Sand"
    ROCK = "Rock"

    def symbol(self) -> str:
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {Element.VOID: ".", Element.SAND: "o", Element.ROCK: "#"}


class DropError(Exception):
    """Raised when a unit of sand cannot come to rest."""


class IntoVoidError(DropError):
    """The sand fell out of the cave."""

    def __init__(self) -> None:
        super().__init__("There is no floor for the sand to land on")


class OccupiedError(DropError):
    """The drop point is already filled."""

    def __init__(self, element: Element) -> None:
        self.element = element
        super().__init__(f"The drop point is occupied by `{element}`")


class NotInCaveError(DropError):
    """The drop point lies outside the cave."""

    def __init__(self, pos: CavePos) -> None:
        self.pos = pos
        super().__init__(f"Drop point `{pos}` not inside cave")


class Cave:
    """A ``height`` by ``width`` cave, optionally with an endless floor."""

    def __init__(self, height: int, width: int, floor: int | None = None) -> None:
        self.height = height
        self.width = width
        self._floor = floor
        self._elements = [Element.VOID] * (height * width)

    @classmethod
    def with_floor(cls, height: int, width: int) -> Cave:
        """A cave whose bottom row is a floor."""
        return cls(height, width, floor=height - 1)

    def has_floor(self) -> bool:
        return self._floor is not None

    def _index(self, pos: CavePos) -> int | None:
        if pos.x < 0 or pos.y < 0:
            return None
        index = self.width * pos.y + pos.x
        return index if index < len(self._elements) else None

    def at(self, pos: CavePos) -> Element | None:
        """The element at ``pos``, or None outside the cave's storage."""
        index = self._index(pos)
        return None if index is None else self._elements[index]

    def set(self, pos: CavePos, element: Element) -> None:
        """Place ``element`` at ``pos``; positions out of bounds are ignored."""
        if 0 <= pos.x < self.width and 0 <= pos.y < self.height:
            self._elements[self.width * pos.y + pos.x] = element

    def drop_sand(self, pos: CavePos) -> CavePos:
        """Drop a unit of sand at ``pos`` and return where it settles."""
        here = self.at(pos)
        if here is None:
            raise NotInCaveError(pos)
        if here is not Element.VOID:
            raise OccupiedError(here)
        log.info("Dropping Sand at %s", pos)
        floor = self._floor if self._floor is not None else 0
        current = pos
        while current.y + 1 != floor:
            below = current.y + 1
            options = (
                CavePos(current.x, below),
                CavePos(current.x - 1, below),
                CavePos(current.x + 1, below),
            )
            following = None
            for option in options:
                element = self.at(option)
                if element is None:
                    log.info("Sand drops into the endless abyss...")
                    raise IntoVoidError()
                if element is Element.VOID:
                    following = option
                    break
            if following is None:
                break
            current = following
        self.set(current, Element.SAND)
        log.info("Sand has settled at %s", current)
        return current

    def __str__(self) -> str:
        xs = [i % self.width for i, e in enumerate(self._elements) if e is not Element.VOID]
        if not xs:
            raise ValueError("the cave holds nothing to draw")
        first, last = min(xs), max(xs)
        lines = []
        for y in range(self.height):
            if self._floor == y:
                cells = Element.ROCK.symbol() * max(last - first, 0)
            else:
                cells = "".join(
                    self._elements[self.width * y + x].symbol() for x in range(first, last)
                )
            left = "**" if first != 0 else ""
            right = "**" if last + 1 != self.width else ""
            lines.append(f"|{left}{cells}{right}|\n")
        return "".join(lines)


def _u32(text: str) -> int:
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"coordinate too large: {text}")
    return value


def _segment(start: CavePos, end: CavePos) -> list[CavePos]:
    if start.x != end.x:
        return [CavePos(x, start.y) for x in range(min(start.x, end.x), max(start.x, end.x) + 1)]
    return [CavePos(start.x, y) for y in range(min(start.y, end.y), max(start.y, end.y) + 1)]


def parse_rock_formations(text: str) -> list[CavePos]:
    """Every rock position drawn by the scan, without repeats, in drawing order.

    Each line is a path of ``x,y`` points joined by `` -> `` and must end in a
    newline; the whole text must be consumed.
    """
    rocks: dict[CavePos, None] = {}
    pos = 0
    while pos < len(text):
        match = _FORMATION.match(text, pos)
        if match is None:
            raise ValueError(f"Error while reading rocks at {text[pos:pos + 40]!r}")
        points = []
        if match.group(1):
            for pair in match.group(1).split(" -> "):
                x, y = pair.split(",")
                points.append(CavePos(_u32(x), _u32(y)))
        for start, end in zip(points, points[1:]):
            rocks.update(dict.fromkeys(_segment(start, end)))
        pos = match.end()
    return list(rocks)