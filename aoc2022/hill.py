"""Hill climbing: find the shortest climb on an elevation map."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

LOWEST_ELEVATION = ord("a")


@dataclass(frozen=True)
class Cell:
    """A map position with its elevation as a character code."""

    x: int
    y: int
    elevation: int

    def cost_to(self, other: Cell) -> int | None:
        """Step cost to a neighbouring cell, or None when it cannot be climbed."""
        if other.elevation > self.elevation + 1 or not self.is_neighbor(other):
            return None
        return 1

    def is_neighbor(self, other: Cell) -> bool:
        return (abs(self.x - other.x), abs(self.y - other.y)) in {(0, 1), (1, 0)}

    def __str__(self) -> str:
        return f"({self.x},{self.y}):{self.elevation}"


class Grid:
    """Cells stored row by row, with optional start and end positions."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: list[Cell] = []
        self._start: tuple[int, int] | None = None
        self._end: tuple[int, int] | None = None

    def insert_cell(self, x: int, y: int, elevation: int) -> Cell:
        """Add a cell; a cell already stored at that position is kept."""
        index = y * self.width + x
        if x < 0 or y < 0 or index > len(self._cells):
            raise IndexError(f"cannot insert a cell at ({x},{y})")
        if index == len(self._cells):
            self._cells.append(Cell(x, y, elevation))
        return self._cells[index]

    def start(self) -> Cell | None:
        return None if self._start is None else self.cell_at(*self._start)

    def set_start(self, x: int, y: int) -> None:
        self._start = (x, y)

    def end(self) -> Cell | None:
        return None if self._end is None else self.cell_at(*self._end)

    def set_end(self, x: int, y: int) -> None:
        self._end = (x, y)

    def cell_at(self, x: int, y: int) -> Cell | None:
        """The cell at row-major index ``y * width + x``, or None."""
        if x < 0 or y < 0:
            return None
        return self.cell_by_id(y * self.width + x)

    def cell_by_id(self, id: int) -> Cell | None:
        if 0 <= id < len(self._cells):
            return self._cells[id]
        return None

    def cells(self) -> Iterator[Cell]:
        return iter(self._cells)

    def cell_top(self, cell: Cell) -> Cell | None:
        return None if cell.y == 0 else self.cell_at(cell.x, cell.y - 1)

    def cell_bot(self, cell: Cell) -> Cell | None:
        return self.cell_at(cell.x, cell.y + 1)

    def cell_left(self, cell: Cell) -> Cell | None:
        return None if cell.x == 0 else self.cell_at(cell.x - 1, cell.y)

    def cell_right(self, cell: Cell) -> Cell | None:
        return self.cell_at(cell.x + 1, cell.y)

    def __str__(self) -> str:
        if self.width <= 0:
            return ""
        full = len(self._cells) - len(self._cells) % self.width
        return "".join(
            "|" + "".join(chr(c.elevation) for c in self._cells[start:start + self.width]) + "|\n"
            for start in range(0, full, self.width)
        )


def parse_grid(text: str) -> Grid:
    """Read the map; ``S`` is the start at elevation a, ``E`` the end at z."""
    lines = text.splitlines()
    grid = Grid(len(lines[0]) if lines else 0, len(lines))
    for y, line in enumerate(lines):
        for x, c in enumerate(line):
            if c == "S":
                grid.set_start(x, y)
                elevation = ord("a")
            elif c == "E":
                grid.set_end(x, y)
                elevation = ord("z")
            elif "a" <= c <= "z":
                elevation = ord(c)
            else:
                raise ValueError(f"invalid map character {c!r} at ({x},{y})")
            grid.insert_cell(x, y, elevation)
    return grid


def _neighbors(grid: Grid, cell: Cell) -> Iterator[Cell]:
    for step in (grid.cell_top, grid.cell_bot, grid.cell_left, grid.cell_right):
        other = step(cell)
        if other is not None and cell.cost_to(other) is not None:
            yield other


def shortest_path(grid: Grid, start: Cell) -> tuple[int, list[Cell]] | None:
    """Cost and cells of a cheapest climb from ``start`` to the end, or None."""
    end = grid.end()
    if end is None:
        raise ValueError("the grid has no end")
    parents: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            path = []
            node: Cell | None = cell
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return len(path) - 1, path
        for other in _neighbors(grid, cell):
            if other not in parents:
                parents[other] = cell
                queue.append(other)
    return None


def best_trail(grid: Grid) -> int:
    """Lowest climb cost from any cell at the lowest elevation."""
    costs = [
        result[0]
        for cell in grid.cells()
        if cell.elevation == LOWEST_ELEVATION
        and (result := shortest_path(grid, cell)) is not None
    ]
    if not costs:
        raise ValueError("no trail from the lowest elevation reaches the end")
    return min(costs)


def format_path(path: Sequence[Cell]) -> str:
    return " -> ".join(str(cell) for cell in path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the shortest climb up the hill.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    grid = parse_grid(args.input.read_text())
    start = grid.start()
    if start is None:
        raise ValueError("the grid has no start")
    result = shortest_path(grid, start)
    if result is None:
        raise ValueError("no path leads up the hill")
    cost, path = result
    print(f"Total Cost: {cost}")
    print(f"Path up the hill: {format_path(path)}")
    print(f"Best hiking trail cost: {best_trail(grid)}")
    return 0