"""An immutable row/column position and a hash-combining helper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

_MASK64 = (1 << 64) - 1
_GOLDEN = 0x9E3779B9


def hash_combine(seed: int, value: Hashable) -> int:
    """Mix the hash of value into seed and return the new 64-bit seed."""
    seed &= _MASK64
    mixed = (hash(value) & _MASK64) + _GOLDEN + ((seed << 6) & _MASK64) + (seed >> 2)
    return (seed ^ mixed) & _MASK64


@dataclass(frozen=True, order=True)
class Position:
    """A grid location as (row, col); ordering is row first, then column."""

    row: int = 0
    col: int = 0

    def __getitem__(self, index: int) -> int:
        return (self.row, self.col)[index]

    def __add__(self, other: Position) -> Position:
        return Position(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Position) -> Position:
        return Position(self.row - other.row, self.col - other.col)

    def __mul__(self, scalar: int) -> Position:
        return Position(self.row * scalar, self.col * scalar)

    __rmul__ = __mul__

    def manhattan_to(self, other: Position) -> tuple[int, int]:
        """Return the absolute row and column distances to other."""
        return abs(self.row - other.row), abs(self.col - other.col)

    @staticmethod
    def all_dirs() -> list[tuple[Position, str]]:
        """Return the four unit steps with their arrow characters."""
        return [
            (Position(0, 1), ">"),
            (Position(0, -1), "<"),
            (Position(-1, 0), "^"),
            (Position(1, 0), "v"),
        ]


DIRECTIONS: tuple[Position, ...] = (
    Position(-1, 0),
    Position(0, 1),
    Position(1, 0),
    Position(0, -1),
)