"""Supply stacks: parse the crate drawing and rearrange crates one at a time."""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

_INSTRUCTION = re.compile(r"move ([0-9]+) from ([0-9]+) to ([0-9]+)(?:\r\n|\n)")
_U32_MAX = 2**32 - 1


class CrateParseError(ValueError):
    """Raised for malformed stack drawings or instructions."""


@dataclass(frozen=True)
class Instruction:
    """Move ``amount`` crates from stack ``source`` to ``target`` (zero-based)."""

    source: int
    target: int
    amount: int

    def __str__(self) -> str:
        return f"{self.source + 1} -> {self.amount} -> {self.target + 1}"


def parse_instructions(text: str) -> list[Instruction]:
    """Parse leading ``move N from A to B`` lines; at least one is required."""
    instructions = []
    pos = 0
    while match := _INSTRUCTION.match(text, pos):
        amount, source, target = map(int, match.groups())
        if max(amount, source, target) > _U32_MAX:
            raise CrateParseError(f"number too large in {match.group(0)!r}")
        if source == 0 or target == 0:
            raise CrateParseError(f"stacks are numbered from 1: {match.group(0)!r}")
        instructions.append(Instruction(source - 1, target - 1, amount))
        pos = match.end()
    if not instructions:
        raise CrateParseError(f"no instructions found at {text[:40]!r}")
    return instructions


def _crate_line(text: str, pos: int) -> tuple[list[str | None], int] | None:
    """Parse one drawing line starting at ``pos``; None when it is not one."""
    row: list[str | None] = []
    while True:
        chunk = text[pos:pos + 3]
        if len(chunk) == 3 and chunk[0] == "[" and chunk[2] == "]":
            row.append(None if chunk[1].isspace() else chunk[1])
        elif chunk == "   ":
            row.append(None)
        else:
            return None
        pos += 3
        for ending in ("\n", "\r\n"):
            if text.startswith(ending, pos):
                return row, pos + len(ending)
        if not text.startswith(" ", pos):
            return None
        pos += 1


def parse_stacks(text: str) -> list[list[str]]:
    """Parse the crate drawing into stacks listed bottom to top."""
    rows = []
    pos = 0
    while (parsed := _crate_line(text, pos)) is not None:
        row, pos = parsed
        rows.append(row)
    if not rows:
        raise CrateParseError(f"no crate lines found at {text[:40]!r}")
    rows.reverse()

    stacks = []
    for idx in range(len(rows[0])):
        stack = []
        for row in rows:
            if idx >= len(row):
                raise CrateParseError("crate line is shorter than the bottom line")
            crate = row[idx]
            if crate is None:
                break
            stack.append(crate)
        stacks.append(stack)
    return stacks


def format_stack(stack: Sequence[str]) -> str:
    """Render a stack bottom to top as ``[A][B]...``."""
    return "".join(f"[{crate}]" for crate in stack)


def apply_instruction(stacks: list[list[str]], instruction: Instruction) -> None:
    """Move crates one at a time, so the moved crates end up reversed."""
    source = list(stacks[instruction.source])
    target = list(stacks[instruction.target])
    log.debug("Instruction: %s", instruction)
    for _ in range(instruction.amount):
        if not source:
            raise ValueError(f"stack {instruction.source + 1} has too few crates")
        target.append(source.pop())
    stacks[instruction.source] = source
    stacks[instruction.target] = target


def top_crates(text: str) -> str:
    """Run the whole puzzle input and return the crates left on top."""
    stack_text, sep, instruction_text = text.partition("\n\n")
    if not sep:
        raise CrateParseError(
            "Malformed input, initial stacks and instructions must be separated by empty newline"
        )
    stacks = parse_stacks(stack_text)
    for instruction in parse_instructions(instruction_text):
        apply_instruction(stacks, instruction)
    if any(not stack for stack in stacks):
        raise ValueError("a stack ended up empty")
    return "".join(stack[-1] for stack in stacks)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rearrange crate stacks.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(f"Final tops: {top_crates(args.input.read_text())}")
    return 0