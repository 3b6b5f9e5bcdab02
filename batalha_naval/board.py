"""The battleship board: ship placement, ability areas and text rendering."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, IntEnum

DEFAULT_SIZE = 10

Position = tuple[int, int]


class Cell(IntEnum):
    """Contents of one board cell, with the numeric codes shown in digit mode."""

    WATER = 0
    SHIP = 3
    ABILITY = 5

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.WATER: ".", Cell.SHIP: "N", Cell.ABILITY: "*"}


class Orientation(str, Enum):
    """Direction of a straight ship, extending right or down from its start."""

    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def step(self) -> Position:
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)


class Diagonal(str, Enum):
    """Direction of a diagonal ship, always extending downwards."""

    DOWN_RIGHT = "D"
    DOWN_LEFT = "E"

    @property
    def step(self) -> Position:
        return (1, 1) if self is Diagonal.DOWN_RIGHT else (1, -1)


class PlacementError(ValueError):
    """Raised when a ship would leave the board or overlap another cell in use."""


class Board:
    """A square grid of cells, initially all water."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._cells = [[Cell.WATER] * size for _ in range(size)]

    def __getitem__(self, position: Position) -> Cell:
        row, column = position
        if not self._inside(row, column):
            raise IndexError(f"position {position} is outside the board")
        return self._cells[row][column]

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Return a snapshot of the board, row by row."""
        return tuple(tuple(row) for row in self._cells)

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size

    @staticmethod
    def _trace(row: int, column: int, length: int, step: Position) -> list[Position]:
        if length < 1:
            raise ValueError(f"ship length must be positive, got {length}")
        d_row, d_column = step
        return [(row + d_row * i, column + d_column * i) for i in range(length)]

    def _fits(self, cells: list[Position]) -> bool:
        return all(
            self._inside(r, c) and self._cells[r][c] is Cell.WATER for r, c in cells
        )

    def _place(self, cells: list[Position], description: str) -> tuple[Position, ...]:
        if not self._fits(cells):
            raise PlacementError(f"cannot place {description}")
        for r, c in cells:
            self._cells[r][c] = Cell.SHIP
        return tuple(cells)

    def can_place_linear(
        self, row: int, column: int, length: int, orientation: Orientation | str
    ) -> bool:
        """Tell whether a straight ship fits on water inside the board."""
        step = Orientation(orientation).step
        return self._fits(self._trace(row, column, length, step))

    def place_linear(
        self, row: int, column: int, length: int, orientation: Orientation | str
    ) -> tuple[Position, ...]:
        """Place a straight ship and return the cells it occupies."""
        orientation = Orientation(orientation)
        cells = self._trace(row, column, length, orientation.step)
        return self._place(
            cells,
            f"{orientation.name.lower()} ship of length {length} at ({row}, {column})",
        )

    def can_place_diagonal(
        self, row: int, column: int, length: int, direction: Diagonal | str
    ) -> bool:
        """Tell whether a diagonal ship fits on water inside the board."""
        step = Diagonal(direction).step
        return self._fits(self._trace(row, column, length, step))

    def place_diagonal(
        self, row: int, column: int, length: int, direction: Diagonal | str
    ) -> tuple[Position, ...]:
        """Place a diagonal ship and return the cells it occupies."""
        direction = Diagonal(direction)
        cells = self._trace(row, column, length, direction.step)
        return self._place(
            cells,
            f"diagonal ({direction.name.lower()}) ship of length {length} "
            f"at ({row}, {column})",
        )

    def apply_ability(
        self, mask: Sequence[Sequence[int]], origin_row: int, origin_column: int
    ) -> int:
        """Mark water cells covered by a mask centred on the origin.

        Parts of the mask outside the board are ignored and ships are never
        overwritten. Returns the number of cells newly marked.
        """
        half = len(mask) // 2
        marked = 0
        for i, mask_row in enumerate(mask):
            for j, flag in enumerate(mask_row):
                r = origin_row - half + i
                c = origin_column - half + j
                if flag and self._inside(r, c) and self._cells[r][c] is Cell.WATER:
                    self._cells[r][c] = Cell.ABILITY
                    marked += 1
        return marked

    def render_digits(self) -> str:
        """Render each cell as its numeric code, one board row per line."""
        return "".join(
            "".join(f"{int(cell)} " for cell in row) + "\n" for row in self._cells
        )

    def render_symbols(self) -> str:
        """Render water, ships and ability cells as '.', 'N' and '*'."""
        return "".join(
            "".join(f"{cell.symbol} " for cell in row) + "\n" for row in self._cells
        )