"""Tuning trouble: find the first run of distinct characters in a datastream."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

WINDOW_SIZE = 14


def find_marker(text: str, window: int = WINDOW_SIZE) -> int:
    """Return the position just after the first ``window`` distinct characters."""
    if window < 1:
        raise ValueError("window must be positive")
    for start in range(len(text) - window + 1):
        if len(set(text[start:start + window])) == window:
            return start + window
    raise ValueError("No marker found")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the start-of-message marker.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--window", type=int, default=WINDOW_SIZE)
    args = parser.parse_args(argv)
    print(f"Offset: {find_marker(args.input.read_text(), args.window)}")
    return 0