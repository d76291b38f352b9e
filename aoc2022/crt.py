"""A cathode-ray screen drawn by a sprite that follows the CPU's X register."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from aoc2022.cpu import Command, Interpreter, parse_commands

log = logging.getLogger(__name__)

DARK = "."
LIT = "#"
SPRITE_SIZE = 3
LINE_LENGTH = 40
HEIGHT = 6
SIGNAL_CYCLES = frozenset({20, 60, 100, 140, 180, 220})


class Crt:
    """A screen whose beam sweeps one pixel per tick, writing a framebuffer."""

    def __init__(self) -> None:
        self._beam = 0
        self._line = 0
        self._fb = [False] * (LINE_LENGTH * HEIGHT)

    def tick(self, sprite_pos: int) -> None:
        """Light the pixel under the beam if the sprite covers it, then advance."""
        index = self._beam + self._line * LINE_LENGTH
        self._fb[index] = abs(sprite_pos - self._beam) <= SPRITE_SIZE // 2
        log.debug("Sprite at %d, beam at %d", sprite_pos, self._beam)
        self._beam = (self._beam + 1) % LINE_LENGTH
        if self._beam == 0:
            self._line = (self._line + 1) % HEIGHT

    def __str__(self) -> str:
        rows = (
            self._fb[start:start + LINE_LENGTH]
            for start in range(0, len(self._fb), LINE_LENGTH)
        )
        return "".join(
            "|" + "".join(LIT if pixel else DARK for pixel in row) + "|\n"
            for row in rows
        )


def run_program(commands: Iterable[Command]) -> tuple[int, Crt]:
    """Run a program, returning the summed signal strength and the screen."""
    interpreter = Interpreter(commands)
    crt = Crt()
    total = 0
    clock = 1
    while True:
        x = interpreter.x()
        if clock in SIGNAL_CYCLES:
            log.info("Signal Strength at Cycle %d: %d", clock, x * clock)
            total += x * clock
        crt.tick(x)
        if interpreter.tick():
            break
        clock += 1
    return total, crt


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the handheld CPU program.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    try:
        commands = parse_commands(args.input.read_text().lower())
    except ValueError as err:
        raise ValueError(f"Error while parsing commands: {err}") from err
    print(f"Initial CRT Screen:\n{Crt()}")
    total, crt = run_program(commands)
    print(f"Combined Signal Strength: {total}")
    print(f"Final CRT Screen:\n{crt}")
    return 0