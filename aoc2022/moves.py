"""Rope moves such as ``R 4``: a direction and a number of steps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U32 = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1

_NO_WHITESPACE = "No whitespace between direction and amount"
_INVALID_DIRECTION = "Direction invalid (must be U,D,L,R)"
_INVALID_AMOUNT = "Amount is not a valid number"


class MoveParseError(ValueError):
    """Raised when a move line cannot be read."""


class Direction(Enum):
    """A direction the rope's head can be moved in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Accept a one-letter or full name in any case (``U``, ``up``, ...)."""
        key = text.lower()
        for direction in cls:
            if key in (direction.value, direction.value[0]):
                return direction
        raise MoveParseError(_INVALID_DIRECTION)


@dataclass(frozen=True)
class Move:
    """Move the head ``amount`` steps in ``direction``."""

    direction: Direction
    amount: int

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``"<direction> <amount>"``; the amount is checked first."""
        dir_str, sep, amount_str = text.partition(" ")
        if not sep:
            raise MoveParseError(_NO_WHITESPACE)
        if not _U32.fullmatch(amount_str) or int(amount_str) > _U32_MAX:
            raise MoveParseError(_INVALID_AMOUNT)
        return cls(Direction.parse(dir_str), int(amount_str))