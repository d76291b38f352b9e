"""A grid of tree heights and line-of-sight checks between trees."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple


class _Visibility(NamedTuple):
    range: int
    to_edge: bool


class TreeGrid:
    """Trees laid out in rows; rows may differ in length."""

    def __init__(self, matrix: Iterable[Sequence[int]]) -> None:
        self._grid = [
            [Tree(r, c, height) for c, height in enumerate(row)]
            for r, row in enumerate(matrix)
        ]
        if not self._grid:
            raise ValueError("a tree grid needs at least one row")
        self._rows = len(self._grid)
        self._cols = max(len(row) for row in self._grid)

    def at(self, row: int, col: int) -> Tree | None:
        """The tree at ``(row, col)``, or None outside the grid."""
        if row < 0 or col < 0:
            return None
        try:
            return self._grid[row][col]
        except IndexError:
            return None

    def height(self) -> int:
        return self._rows

    def width(self) -> int:
        return self._cols

    def __str__(self) -> str:
        return "".join(
            "".join(str(tree.height) for tree in row) + "\n" for row in self._grid
        )


@dataclass(frozen=True)
class Tree:
    """A tree at a grid position with a height."""

    row: int
    col: int
    height: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"

    def is_visible(self, grid: TreeGrid) -> bool:
        """True when the tree can be seen from outside the grid."""
        if (
            self.col == 0
            or self.row == 0
            or grid.at(self.row, self.col + 1) is None
            or grid.at(self.row + 1, self.col) is None
        ):
            return True
        return any(view.to_edge for view in self._views(grid))

    def visibility_score(self, grid: TreeGrid) -> int:
        """Product of the viewing distances in all four directions."""
        return math.prod(view.range for view in self._views(grid))

    def _views(self, grid: TreeGrid) -> list[_Visibility]:
        left = ((self.row, c) for c in range(self.col - 1, -1, -1))
        right = ((self.row, c) for c in itertools.count(self.col + 1))
        top = ((r, self.col) for r in range(self.row - 1, -1, -1))
        bot = ((r, self.col) for r in itertools.count(self.row + 1))
        return [self._look(grid, cells) for cells in (left, right, top, bot)]

    def _look(self, grid: TreeGrid, cells: Iterable[tuple[int, int]]) -> _Visibility:
        seen = 0
        for row, col in cells:
            other = grid.at(row, col)
            if other is None:
                break
            if other.height >= self.height:
                return _Visibility(seen + 1, False)
            seen += 1
        return _Visibility(seen, True)