"""A sparse grid that answers a default value for every unset position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GridCoord:
    """An integer grid position."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Origin(Enum):
    """Where row zero is drawn: at the bottom or at the top."""

    BOT_LEFT = "bot_left"
    TOP_LEFT = "top_left"


def border_line(width: int, indent: int) -> str:
    """A frame line such as ``    +---+`` followed by a newline."""
    return " " * indent + "+" + "-" * max(width, 0) + "+\n"


class SparseDefaultGrid(Generic[T]):
    """Only set positions are stored; the rest read as ``default``."""

    def __init__(self, default: T, origin: Origin = Origin.TOP_LEFT) -> None:
        self.default = default
        self.origin = origin
        self._elements: dict[GridCoord, T] = {}

    def at(self, pos: GridCoord) -> T:
        """The element at ``pos``, or the default."""
        return self._elements.get(pos, self.default)

    def at_non_default(self, pos: GridCoord) -> T | None:
        """The element stored at ``pos``, or None if nothing was set there."""
        return self._elements.get(pos)

    def set(self, pos: GridCoord, element: T) -> T:
        """Store ``element`` and return what was there before."""
        old = self._elements.pop(pos, self.default)
        self._elements[pos] = element
        return old

    def __iter__(self) -> Iterator[GridCoord]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def y_min(self) -> int:
        return min((pos.y for pos in self._elements), default=0)

    def y_max(self) -> int:
        return max((pos.y for pos in self._elements), default=0)

    def x_min(self) -> int:
        return min((pos.x for pos in self._elements), default=0)

    def x_max(self) -> int:
        return max((pos.x for pos in self._elements), default=0)

    def width(self) -> int:
        return abs(self.x_max() - self.x_min())

    def height(self) -> int:
        return abs(self.y_max() - self.y_min())

    def __str__(self) -> str:
        x_min, x_max = self.x_min(), self.x_max()
        rows = range(self.y_min(), self.y_max() + 1)
        if self.origin is Origin.BOT_LEFT:
            rows = reversed(rows)
        border = border_line(x_max - x_min + 1, 4)
        lines = [border]
        for y in rows:
            cells = "".join(
                str(self.at(GridCoord(x, y))) for x in range(x_min, x_max + 1)
            )
            lines.append(f"{y:>3} |{cells}|\n")
        lines.append(border)
        return "".join(lines)