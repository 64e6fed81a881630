"""
Pieces - the fox and the dogs.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum

from .position import Direction, Position


class PieceType(Enum):
    """Which side a piece belongs to."""
    FOX = "fox"
    DOG = "dog"

    @property
    def opponent(self) -> PieceType:
        """The side that moves after this one."""
        if self is PieceType.FOX:
            return PieceType.DOG
        return PieceType.FOX

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Piece:
    """
    A piece on the board.

    Pieces are owned by a BoardState. They are immutable, so a copy never
    shares state with the original; moving a piece produces a new one.
    """
    piece_type: PieceType
    position: Position

    @property
    def is_fox(self) -> bool:
        return self.piece_type is PieceType.FOX

    def moved(self, direction: Direction) -> Piece:
        """Return this piece translated one step in direction."""
        return replace(self, position=self.position.translated_by(direction))

    def clone(self) -> Piece:
        return replace(self)

    def __str__(self) -> str:
        return f"{self.piece_type}: {self.position}"
