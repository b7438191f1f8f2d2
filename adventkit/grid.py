"""A fixed-size two-dimensional grid addressed by (row, column)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Sequence, TypeVar

from adventkit.position import Position
from adventkit.vector2d import Vector2D

T = TypeVar("T")


class GridLookupError(LookupError):
    """Raised when a value that must be present in a grid is not found."""


@dataclass
class Overlay(Generic[T]):
    """A value to draw over a set of locations when rendering."""

    positions: list[Any] = field(default_factory=list)
    value: Any = None


def _coords(location: Any) -> tuple[int, int]:
    """Return (row, column) for a Vector2D (x is the row) or any indexable pair."""
    if isinstance(location, Vector2D):
        return location.x, location.y
    return location[0], location[1]


class Grid(Generic[T]):
    """A rectangular grid of cells stored row by row.

    Reads outside the grid return the grid's default value; writes outside it
    are ignored.
    """

    def __init__(
        self,
        rows: int = 0,
        columns: int = 0,
        fill: T | None = None,
        cells: Iterable[T] | None = None,
    ) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("grid dimensions must not be negative")
        self.default = fill
        self._rows = rows
        self._columns = columns
        if cells is None:
            self._cells: list[Any] = [fill] * (rows * columns)
        else:
            self._cells = list(cells)
            if len(self._cells) != rows * columns:
                raise ValueError(
                    f"expected {rows * columns} cells, got {len(self._cells)}"
                )

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def cells(self) -> tuple[Any, ...]:
        """The cells in row-major order."""
        return tuple(self._cells)

    def __getitem__(self, location: Any) -> Any:
        return self.get(*_coords(location))

    def __setitem__(self, location: Any, value: Any) -> None:
        self.set(*_coords(location), value)

    def exists(self, row: int, column: int) -> bool:
        """Tell whether (row, column) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= column < self._columns

    def get(self, row: int, column: int) -> Any:
        """Return the cell at (row, column), or the default when outside."""
        if self.exists(row, column):
            return self._cells[self._columns * row + column]
        return self.default

    def all_exist(self, locations: Iterable[Any]) -> bool:
        """Tell whether every location lies inside the grid."""
        return all(self.exists(*_coords(location)) for location in locations)

    def column_as_string(self, column: int) -> str:
        """Join the cells of one column, top to bottom."""
        return "".join(str(self.get(row, column)) for row in range(self._rows))

    def row_as_string(self, row: int) -> str:
        """Join the cells of one row, left to right."""
        return "".join(str(self.get(row, column)) for column in range(self._columns))

    def sector_as_string(self, start: Any, stop: Any) -> str:
        """Join the cells of the inclusive rectangle between two (row, column) corners."""
        first_row, first_col = _coords(start)
        last_row, last_col = _coords(stop)
        return "".join(
            str(self.get(row, column))
            for row in range(first_row, last_row + 1)
            for column in range(first_col, last_col + 1)
        )

    def reset(self, rows: int, columns: int, value: Any = None) -> None:
        """Resize the grid and fill every cell with value (the default if None)."""
        if rows < 0 or columns < 0:
            raise ValueError("grid dimensions must not be negative")
        fill = self.default if value is None else value
        self._rows = rows
        self._columns = columns
        self._cells = [fill] * (rows * columns)

    def index_to_location(self, index: int) -> Position:
        """Turn a row-major cell index into a Position."""
        if not 0 <= index < len(self._cells):
            raise IndexError(f"cell index {index} out of range")
        row, column = divmod(index, self._columns)
        return Position(row, column)

    def set(self, row: int, column: int, value: Any) -> None:
        """Store value at (row, column); outside the grid nothing happens."""
        if self.exists(row, column):
            self._cells[self._columns * row + column] = value

    def set_all(self, value: Any) -> None:
        """Fill every cell with value."""
        self._cells = [value] * len(self._cells)

    def set_row(self, row: int, value: Any) -> None:
        """Fill one row with value."""
        for column in range(self._columns):
            self.set(row, column, value)

    def set_column(self, column: int, value: Any) -> None:
        """Fill one column with value."""
        for row in range(self._rows):
            self.set(row, column, value)

    def count(self, value: Any) -> int:
        """Return how many cells equal value."""
        return self._cells.count(value)

    def _lines(self) -> list[str]:
        return [self.row_as_string(row) for row in range(self._rows)]

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "\n".join(self._lines())

    def render_with_overlays(self, overlays: Sequence[Overlay]) -> str:
        """Render with overlay values drawn on top; the grid itself is left unchanged."""
        saved: dict[tuple[int, int], Any] = {}
        for overlay in overlays:
            for location in overlay.positions:
                row, column = _coords(location)
                saved.setdefault((row, column), self.get(row, column))
                self.set(row, column, overlay.value)
        try:
            return self.render()
        finally:
            for (row, column), value in saved.items():
                self.set(row, column, value)

    def find(self, value: Any) -> Position:
        """Return the location of the first cell equal to value."""
        try:
            index = self._cells.index(value)
        except ValueError:
            raise GridLookupError(f"{value!r} not found in grid") from None
        return self.index_to_location(index)

    def find_all(self, value: Any) -> list[Position]:
        """Return the locations of every cell equal to value, in row-major order."""
        return [
            self.index_to_location(index)
            for index, cell in enumerate(self._cells)
            if cell == value
        ]