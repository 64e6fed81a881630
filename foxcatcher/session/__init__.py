"""
Session Module - runs games between two players.

A GameLoop represents one sitting at the board:
- Created with the two player names
- Holds the current BoardState
- Turns square selections into moves
- Records the result when a game ends

reset() starts a new game with the same players.
"""

from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "GameLoop",
    "LoopState",
    "TurnResult",
]
