"""
Engine errors.

All of these are caller errors raised immediately; nothing in the
engine retries or recovers from them. An illegal move is NOT an error,
see BoardState.move.
"""


class FoxCatcherError(Exception):
    """Base class for all Fox Catcher errors."""


class InvalidBoardError(FoxCatcherError, ValueError):
    """Raised when a board layout breaks the piece invariants."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid board layout: {reason}")


class PieceIndexError(FoxCatcherError, IndexError):
    """Raised when a piece index does not address a piece on the board."""

    def __init__(self, index: int, piece_count: int):
        self.index = index
        self.piece_count = piece_count
        super().__init__(f"Piece index {index} out of range [0, {piece_count})")


class InvalidDirectionError(FoxCatcherError, ValueError):
    """Raised when a delta is not one of the four diagonal unit steps."""

    def __init__(self, row_change: int, col_change: int):
        self.row_change = row_change
        self.col_change = col_change
        super().__init__(f"No diagonal direction for delta ({row_change},{col_change})")
