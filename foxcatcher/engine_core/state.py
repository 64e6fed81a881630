"""
Board State - the Fox Catcher rules engine.

The state is five pieces (one fox, four dogs) plus the side to move.
Pieces are addressed by their index, which never changes for the
lifetime of a state.

Rules:
- The fox moves one square diagonally in any direction.
- Dogs move one square diagonally, upwards only.
- The destination must be on the board and empty.
- Sides alternate; the dogs move first in a new game.
- The fox wins once it is below every dog; the dogs win once the fox
  has no move left.
"""

from __future__ import annotations
from copy import deepcopy
from typing import Iterable

from loguru import logger

from .errors import InvalidBoardError, PieceIndexError
from .piece import Piece, PieceType
from .position import Direction, Position


PIECE_COUNT = 5

INITIAL_LAYOUT: tuple[Piece, ...] = (
    Piece(PieceType.FOX, Position(0, 2)),
    Piece(PieceType.DOG, Position(7, 1)),
    Piece(PieceType.DOG, Position(7, 3)),
    Piece(PieceType.DOG, Position(7, 5)),
    Piece(PieceType.DOG, Position(7, 7)),
)

# Directions each side may step in, in the order moves are reported.
ALLOWED_DIRECTIONS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.FOX: (
        Direction.UP_LEFT,
        Direction.UP_RIGHT,
        Direction.DOWN_LEFT,
        Direction.DOWN_RIGHT,
    ),
    PieceType.DOG: (
        Direction.UP_LEFT,
        Direction.UP_RIGHT,
    ),
}


def validate_layout(pieces: Iterable[Piece]) -> None:
    """
    Check the piece invariants of a board layout.

    Raises InvalidBoardError unless there are exactly five pieces, exactly
    one of them is the fox, and all of them stand on distinct squares of
    the board.
    """
    pieces = list(pieces)
    reason = None

    if len(pieces) != PIECE_COUNT:
        reason = f"expected {PIECE_COUNT} pieces, got {len(pieces)}"
    elif any(not piece.position.is_on_board() for piece in pieces):
        reason = "a piece is placed outside the board"
    elif len({piece.position for piece in pieces}) != len(pieces):
        reason = "two pieces share a square"
    else:
        fox_count = sum(1 for piece in pieces if piece.is_fox)
        if fox_count == 0:
            reason = "no fox among the pieces"
        elif fox_count > 1:
            reason = f"expected one fox, got {fox_count}"

    if reason is not None:
        logger.error("Rejected board layout: {}", reason)
        raise InvalidBoardError(reason)


class BoardState:
    """
    Mutable state of one Fox Catcher game.

    Usage:
        state = BoardState()                  # canonical start, dogs to move
        if state.can_move(1, Direction.UP_LEFT):
            before = state.clone()
            state.move(1, Direction.UP_LEFT)
        if state.is_goal():
            ...

    A custom layout is given as the side to move followed by the five
    pieces; with no pieces the canonical layout is used.
    """

    def __init__(self, to_move: PieceType = PieceType.DOG, *pieces: Piece):
        if not pieces:
            pieces = INITIAL_LAYOUT
        validate_layout(pieces)
        self._to_move = to_move
        self._pieces: tuple[Piece, ...] = tuple(pieces)

    @classmethod
    def initial(cls, to_move: PieceType = PieceType.DOG) -> BoardState:
        """Create the canonical starting position."""
        return cls(to_move, *INITIAL_LAYOUT)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def to_move(self) -> PieceType:
        """The side allowed to make the next move."""
        return self._to_move

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self._pieces

    def piece_count(self) -> int:
        return len(self._pieces)

    def piece_at(self, index: int) -> Piece:
        """Get the piece at index. Negative indices are rejected."""
        self._check_index(index, "piece_at")
        return self._pieces[index].clone()

    def index_at(self, position: Position) -> int | None:
        """
        Get the index of the piece standing on position.

        Returns None for an empty square or a position off the board.
        """
        if not position.is_on_board():
            return None
        for index, piece in enumerate(self._pieces):
            if piece.position == position:
                return index
        return None

    def fox_index(self) -> int:
        return next(index for index, piece in enumerate(self._pieces) if piece.is_fox)

    def is_square_empty(self, position: Position) -> bool:
        """
        True if no piece stands on position.

        Off-board positions are reported as empty too; callers that care
        must check Position.is_on_board themselves.
        """
        return all(piece.position != position for piece in self._pieces)

    # =========================================================================
    # Legality
    # =========================================================================

    def can_move(self, index: int, direction: Direction) -> bool:
        """
        Check whether the piece at index may step in direction now.

        Unlike get_possible_moves this also requires the piece's side to
        be the one to move.
        """
        self._check_index(index, "can_move")
        piece = self._pieces[index]
        if piece.piece_type is not self._to_move:
            logger.debug("It is not the {}'s turn to move", piece.piece_type.value)
            return False
        return self._is_step_open(index, direction)

    def get_possible_moves(self, index: int) -> list[Direction]:
        """
        List the directions the piece at index could step in.

        Only the board geometry and occupancy are considered; whose turn it
        is does not matter here.
        """
        self._check_index(index, "get_possible_moves")
        piece_type = self._pieces[index].piece_type
        return [
            direction for direction in ALLOWED_DIRECTIONS[piece_type]
            if self._is_step_open(index, direction)
        ]

    def _is_step_open(self, index: int, direction: Direction) -> bool:
        piece = self._pieces[index]
        if direction not in ALLOWED_DIRECTIONS[piece.piece_type]:
            return False
        destination = piece.position.translated_by(direction)
        return destination.is_on_board() and self.is_square_empty(destination)

    # =========================================================================
    # Transitions
    # =========================================================================

    def move(self, index: int, direction: Direction) -> None:
        """
        Move the piece at index one step in direction and pass the turn.

        An illegal move (see can_move) leaves the state untouched and
        raises nothing. Only a bad index raises.
        """
        self._check_index(index, "move")
        if not self.can_move(index, direction):
            logger.debug("Ignoring illegal move of piece {} {}", index, direction.name)
            return

        pieces = list(self._pieces)
        pieces[index] = pieces[index].moved(direction)
        self._pieces = tuple(pieces)
        self._to_move = self._to_move.opponent
        logger.debug("Moved piece {} {}, {} to move", index, direction.name, self._to_move)

    def moved(self, index: int, direction: Direction) -> BoardState:
        """Return a new state with the move applied; this state is unchanged."""
        new_state = self.clone()
        new_state.move(index, direction)
        return new_state

    # =========================================================================
    # Terminal detection
    # =========================================================================

    def fox_wins(self) -> bool:
        """True if the fox stands on a lower row than all four dogs."""
        fox_row = self._pieces[self.fox_index()].position.row
        bypassed = sum(1 for piece in self._pieces if piece.position.row < fox_row)
        return bypassed == PIECE_COUNT - 1

    def dog_wins(self) -> bool:
        """True if the fox cannot move in any direction."""
        return not self.get_possible_moves(self.fox_index())

    def is_goal(self) -> bool:
        return self.fox_wins() or self.dog_wins()

    def winner(self) -> PieceType | None:
        """The winning side, or None while the game is still open."""
        if self.fox_wins():
            return PieceType.FOX
        if self.dog_wins():
            return PieceType.DOG
        return None

    # =========================================================================
    # Helpers
    # =========================================================================

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self._pieces):
            logger.error("Index {} passed to {}() does not address a piece", index, operation)
            raise PieceIndexError(index, len(self._pieces))

    def clone(self) -> BoardState:
        """Deep copy the state."""
        return deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._to_move is other._to_move and self._pieces == other._pieces

    def __hash__(self) -> int:
        """
        Hash of the current contents.

        The hash changes with every move, so only a state that is no longer
        moved (a clone() snapshot, say) belongs in a set or as a dict key.
        """
        return hash((self._to_move, self._pieces))

    def __str__(self) -> str:
        pieces = ", ".join(f"[{piece}]" for piece in self._pieces)
        return f"{{{self._to_move}, {pieces}}}"

    def __repr__(self) -> str:
        return f"BoardState({self})"
