"""Helpers shared by several puzzle solutions: report checks, print orders, maze moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence

from adventkit.position import DIRECTIONS, Position

STEP_COST = 1
TURN_COST = 1000


def is_safe(differences: Sequence[int]) -> bool:
    """Tell whether all differences rise by 1..3 or all fall by 1..3."""
    rising = sum(1 for diff in differences if 1 <= diff <= 3)
    falling = sum(1 for diff in differences if -3 <= diff <= -1)
    total = len(differences)
    return rising == total or falling == total


def calculate_difference(values: Sequence[int]) -> list[int]:
    """Return the differences between neighbouring values."""
    return [after - before for before, after in zip(values, values[1:])]


@dataclass
class PrintOrder:
    """A list of pages to print and whether it obeys the ordering rules."""

    pages: list[int] = field(default_factory=list)
    is_good: bool = True


def get_prints(orders: Iterable[PrintOrder], status: bool) -> list[PrintOrder]:
    """Return the orders whose is_good flag equals status, keeping their order."""
    return [order for order in orders if order.is_good == status]


def concatenate(a: int, b: int) -> int:
    """Join the decimal digits of a and b into one number."""
    if a < 0 or b < 0:
        raise ValueError("only non-negative numbers can be concatenated")
    return int(f"{a}{b}")


class Heading(IntEnum):
    """The four compass headings, in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass(frozen=True, order=True)
class MazeState:
    """A position in a maze together with the heading."""

    pos: Position
    heading: Heading

    def next(self) -> list[tuple[MazeState, int]]:
        """Return the states reachable in one move with their costs:
        forward, then turn left, then turn right."""
        forward = MazeState(self.pos + DIRECTIONS[self.heading], self.heading)
        left = MazeState(self.pos, Heading((self.heading + 3) % 4))
        right = MazeState(self.pos, Heading((self.heading + 1) % 4))
        return [(forward, STEP_COST), (left, TURN_COST), (right, TURN_COST)]