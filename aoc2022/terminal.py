"""Parse a recorded terminal session of ``cd`` and ``ls`` commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_CD = re.compile(r"\$ cd ([^\n]+)\n")
_LS = re.compile(r"\$ ls\n")
_DIR = re.compile(r"dir ([^\n]+)\n")
_FILE = re.compile(r"([0-9]+) ([^\n]+)\n")
_U64_MAX = 2**64 - 1


class TerminalParseError(ValueError):
    """Raised when no command can be read from the session."""


@dataclass(frozen=True)
class File:
    """A file reported by ``ls``."""

    name: str
    size: int


@dataclass(frozen=True)
class DirListing:
    """A sub-directory reported by ``ls``."""

    name: str


@dataclass(frozen=True)
class ChangeDir:
    """A ``cd`` command; a ``target`` of None means ``cd ..``."""

    target: str | None

    @property
    def is_out(self) -> bool:
        return self.target is None

    def __str__(self) -> str:
        return f"cd {'..' if self.target is None else self.target}"


@dataclass(frozen=True)
class ListDir:
    """An ``ls`` command with the entries it printed."""

    entries: tuple[Union[File, DirListing], ...] = ()

    def __str__(self) -> str:
        return f"ls: {list(self.entries)!r}"


Command = Union[ChangeDir, ListDir]


def _listing(text: str, pos: int) -> tuple[File | DirListing, int] | None:
    if match := _DIR.match(text, pos):
        return DirListing(match.group(1)), match.end()
    if match := _FILE.match(text, pos):
        size = int(match.group(1))
        if size > _U64_MAX:
            return None
        return File(match.group(2), size), match.end()
    return None


def _command(text: str, pos: int) -> tuple[Command, int] | None:
    if match := _CD.match(text, pos):
        path = match.group(1)
        return ChangeDir(None if path == ".." else path), match.end()
    if match := _LS.match(text, pos):
        entries = []
        pos = match.end()
        while (parsed := _listing(text, pos)) is not None:
            entry, pos = parsed
            entries.append(entry)
        return ListDir(tuple(entries)), pos
    return None


def parse_terminal(text: str) -> list[Command]:
    """Read commands from the start of ``text`` until one cannot be parsed.

    Whatever follows the last readable command is ignored; at least one
    command is required.
    """
    commands: list[Command] = []
    pos = 0
    while (parsed := _command(text, pos)) is not None:
        command, pos = parsed
        commands.append(command)
    if not commands:
        raise TerminalParseError(f"no command found at {text[:40]!r}")
    return commands