"""Report tree visibility and scenic scores for a forest map."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from aoc2022.forest import TreeGrid

_PALETTE = ("red", "yellow", "green", "blue")
_FALLBACK = "white"
_ANSI = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "white": 37,
}


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_heights(text: str) -> list[list[int]]:
    """Read one row of single-digit heights per line."""
    rows = []
    for line in _lines(text):
        row = []
        for c in line:
            if c not in "0123456789":
                raise ValueError(f"Parsing char {c} as height")
            row.append(int(c))
        rows.append(row)
    return rows


def visibility_map(grid: TreeGrid) -> list[list[bool]]:
    """Whether each position in the grid's bounding box holds a visible tree."""
    return [
        [
            tree.is_visible(grid) if (tree := grid.at(row, col)) else False
            for col in range(grid.width())
        ]
        for row in range(grid.height())
    ]


def score_map(grid: TreeGrid) -> list[list[int]]:
    """The scenic score of each position; zero where there is no tree."""
    return [
        [
            tree.visibility_score(grid) if (tree := grid.at(row, col)) else 0
            for col in range(grid.width())
        ]
        for row in range(grid.height())
    ]


def count_visible(visibility: Sequence[Sequence[bool]]) -> int:
    return sum(sum(row) for row in visibility)


def highest_score(scores: Sequence[Sequence[int]]) -> int:
    flat = [score for row in scores for score in row]
    if not flat:
        raise ValueError("no scores")
    return max(flat)


def color_buckets(scores: Sequence[Sequence[int]]) -> list[tuple[int, int, str]]:
    """Split the distinct scores into equal runs, each with a colour name.

    Runs beyond the four palette colours are white.
    """
    unique = sorted({score for row in scores for score in row})
    size = len(unique) // len(_PALETTE)
    if size == 0:
        raise ValueError(f"need at least {len(_PALETTE)} distinct scores")
    chunks = [unique[start:start + size] for start in range(0, len(unique), size)]
    return [
        (chunk[0], chunk[-1], _PALETTE[i] if i < len(_PALETTE) else _FALLBACK)
        for i, chunk in enumerate(chunks)
    ]


def render_visibility(visibility: Sequence[Sequence[bool]]) -> str:
    return "".join(
        "".join("X" if visible else "-" for visible in row) + "\n"
        for row in visibility
    )


def _paint(color: str) -> str:
    return f"\x1b[{_ANSI[color]}mX\x1b[0m"


def render_colors(scores: Sequence[Sequence[int]]) -> str:
    """Draw each score as a coloured ``X`` according to its bucket."""
    buckets = color_buckets(scores)
    lines = []
    for row in scores:
        cells = []
        for score in row:
            color = next(
                (name for low, high, name in buckets if low <= score <= high), None
            )
            if color is not None:
                cells.append(_paint(color))
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Report on tree visibility.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    grid = TreeGrid(parse_heights(args.input.read_text()))
    visibility = visibility_map(grid)
    print(f"Visibility:\n{render_visibility(visibility)}")
    print(f"Total amount of visible trees: {count_visible(visibility)}")
    scores = score_map(grid)
    print(f"Highest Visibility: {highest_score(scores)}")
    print(f"Visibility Score:\n{render_colors(scores)}")
    return 0