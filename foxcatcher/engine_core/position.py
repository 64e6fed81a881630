"""
Board coordinates and diagonal directions.

Positions are immutable values: translating one yields a new Position.
The board is fixed at BOARD_SIZE x BOARD_SIZE, row 0 at the top.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidDirectionError


BOARD_SIZE = 8


class Direction(Enum):
    """The four diagonal unit steps, valued (row_change, col_change)."""
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def row_change(self) -> int:
        return self.value[0]

    @property
    def col_change(self) -> int:
        return self.value[1]

    @classmethod
    def from_delta(cls, row_change: int, col_change: int) -> Direction:
        """
        Get the direction for an exact (row_change, col_change) pair.

        Only unit diagonals are accepted; (2, 2) or (0, 1) raise
        InvalidDirectionError.
        """
        for direction in cls:
            if direction.value == (row_change, col_change):
                return direction
        raise InvalidDirectionError(row_change, col_change)

    @classmethod
    def between(cls, source: Position, destination: Position) -> Direction:
        """Direction of a single diagonal step from source to destination."""
        return cls.from_delta(destination.row - source.row, destination.col - source.col)


@dataclass(frozen=True)
class Position:
    """A square on the board. May lie off the board; see is_on_board."""
    row: int
    col: int

    def translated_by(self, direction: Direction) -> Position:
        """Return the position one step away in direction (no bounds check)."""
        return Position(self.row + direction.row_change, self.col + direction.col_change)

    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
