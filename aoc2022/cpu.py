"""A two-instruction CPU and the parser for its programs."""

from __future__ import annotations

import logging
import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

log = logging.getLogger(__name__)

_COMMAND = re.compile(r"noop\n|addx ([+-]?[0-9]+)\n")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


class CpuBusyError(RuntimeError):
    """Raised when a command is given while another is still running."""


class CommandParseError(ValueError):
    """Raised when a program holds no readable command."""


@dataclass(frozen=True)
class Noop:
    """Do nothing for one cycle."""

    def __str__(self) -> str:
        return "NOP"


@dataclass(frozen=True)
class Addx:
    """Add ``value`` to the X register after two cycles."""

    value: int

    def __str__(self) -> str:
        return f"ADDX {self.value}"


Command = Union[Noop, Addx]


class _Cpu:
    def __init__(self) -> None:
        self.x = 1
        self.current: Command = Noop()
        self.cycles_left = 0

    @property
    def busy(self) -> bool:
        return self.cycles_left > 0

    def set_command(self, command: Command) -> None:
        if self.busy:
            raise CpuBusyError(f"still running {self.current}")
        self.current = command
        self.cycles_left = 2 if isinstance(command, Addx) else 1
        log.debug("New CPU command (%d cycles): %s", self.cycles_left, command)

    def tick(self) -> None:
        self.cycles_left -= 1
        if self.cycles_left == 0:
            log.debug("Command %s has finished", self.current)
            if isinstance(self.current, Addx):
                self.x += self.current.value


class Interpreter:
    """Feeds queued commands to the CPU one clock cycle at a time."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._cpu = _Cpu()
        self._queue: deque[Command] = deque(commands)

    def x(self) -> int:
        """Current value of the X register."""
        return self._cpu.x

    def push_command(self, command: Command) -> None:
        self._queue.append(command)

    def tick(self) -> bool:
        """Advance one cycle; True once the queue was already empty.

        The program counts as finished as soon as no command is waiting,
        even if the last one taken is still running.
        """
        if not self._queue:
            log.debug("Program has finished executing")
            return True
        if not self._cpu.busy:
            self._cpu.set_command(self._queue.popleft())
        self._cpu.tick()
        return False


def parse_commands(text: str) -> list[Command]:
    """Read commands from the start of ``text``; what follows is ignored.

    Every command must end with a newline and at least one is required.
    """
    commands: list[Command] = []
    pos = 0
    while match := _COMMAND.match(text, pos):
        if match.group(1) is None:
            commands.append(Noop())
        else:
            value = int(match.group(1))
            if not _I32_MIN <= value <= _I32_MAX:
                break
            commands.append(Addx(value))
        pos = match.end()
    if not commands:
        raise CommandParseError(f"no command found at {text[:40]!r}")
    return commands