"""
Engine Core - the Fox Catcher rules engine.

The engine:
1. Holds the board (five pieces and the side to move)
2. Answers legality queries (can_move, get_possible_moves)
3. Applies moves
4. Detects the end of the game (fox_wins, dog_wins, is_goal)

It performs no I/O and owns no file format.
"""

from .errors import FoxCatcherError, InvalidBoardError, PieceIndexError, InvalidDirectionError
from .position import BOARD_SIZE, Direction, Position
from .piece import Piece, PieceType
from .state import BoardState, INITIAL_LAYOUT, PIECE_COUNT, validate_layout

__all__ = [
    "FoxCatcherError",
    "InvalidBoardError",
    "PieceIndexError",
    "InvalidDirectionError",
    "BOARD_SIZE",
    "Direction",
    "Position",
    "Piece",
    "PieceType",
    "BoardState",
    "INITIAL_LAYOUT",
    "PIECE_COUNT",
    "validate_layout",
]
