"""A grid position that also carries a facing, with turning and stepping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Facing(IntEnum):
    """The four compass headings, in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


_SYMBOLS = {Facing.NORTH: "^", Facing.EAST: ">", Facing.SOUTH: "v", Facing.WEST: "<"}


@dataclass
class Vector2D:
    """A mutable point with a heading; x grows southwards and y grows eastwards."""

    x: int = 0
    y: int = 0
    facing: Facing = field(default=Facing.NORTH)

    def __post_init__(self) -> None:
        self.facing = Facing(self.facing)

    def __hash__(self) -> int:
        return hash((self.x, self.y, int(self.facing)))

    def __lt__(self, other: Vector2D) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y, self.facing)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y, self.facing)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: int) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __mod__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x % other.x, self.y % other.y)

    def __str__(self) -> str:
        return f"X={self.x} Y={self.y} Facing={int(self.facing)}"

    def turn_left(self) -> None:
        """Rotate a quarter turn anticlockwise."""
        self.facing = Facing((self.facing + 3) % 4)

    def turn_right(self) -> None:
        """Rotate a quarter turn clockwise."""
        self.facing = Facing((self.facing + 1) % 4)

    def go_forward(self) -> None:
        """Take one step in the current heading."""
        {
            Facing.NORTH: self.go_north,
            Facing.EAST: self.go_east,
            Facing.SOUTH: self.go_south,
            Facing.WEST: self.go_west,
        }[self.facing]()

    def go_north(self) -> None:
        self.x -= 1

    def go_east(self) -> None:
        self.y += 1

    def go_south(self) -> None:
        self.x += 1

    def go_west(self) -> None:
        self.y -= 1

    def facing_symbol(self) -> str:
        """Return the arrow character for the heading."""
        return _SYMBOLS[self.facing]

    def look_ahead(self) -> Vector2D:
        """Return the position one step ahead, leaving this one unchanged."""
        ahead = Vector2D(self.x, self.y, self.facing)
        ahead.go_forward()
        return ahead

    def cord(self, facing: bool = False) -> str:
        """Format as "(x,y)", or "(x,y,facing)" when asked."""
        return self._format(self.x, self.y, facing)

    def cord_rev(self, facing: bool = False) -> str:
        """Format as "(y,x)", or "(y,x,facing)" when asked."""
        return self._format(self.y, self.x, facing)

    def _format(self, first: int, second: int, facing: bool) -> str:
        parts = [str(first), str(second)]
        if facing:
            parts.append(str(int(self.facing)))
        return "(" + ",".join(parts) + ")"