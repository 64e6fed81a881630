"""
Game Loop - drives one game between two players.

The loop:
1. A player selects a square holding a piece
2. The player selects the empty square to move it to
3. The engine validates and applies the move
4. The loop counts the move and checks for the end of the game
5. On a goal state the result is recorded and the loop stops

Player one plays the dogs (who move first), player two the fox.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from loguru import logger

from ..engine_core import (
    BoardState,
    Direction,
    InvalidDirectionError,
    PieceType,
    Position,
)
from ..results import DEFAULT_RESULTS_FILE, GameResult, GameResultRepository


class LoopState(Enum):
    """State of the game loop."""
    WAITING_SELECTION = "waiting_selection"
    PIECE_SELECTED = "piece_selected"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of selecting a square.

    previous_state is the snapshot taken just before a move, so the caller
    can tell which squares changed.
    """
    moved: bool
    loop_state: LoopState

    source: Position | None = None
    destination: Position | None = None
    previous_state: BoardState | None = None

    warnings: list[str] = field(default_factory=list)

    # Game over info
    winner: str | None = None


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop("Alice", "Bob")

        loop.select_square(Position(7, 1))
        result = loop.select_square(Position(6, 0))

        if result.loop_state == LoopState.GAME_OVER:
            print(result.winner)
    """

    def __init__(
        self,
        player_one: str,
        player_two: str,
        repository: GameResultRepository | None = None,
        results_file: str | Path | None = DEFAULT_RESULTS_FILE,
    ):
        self.player_one = player_one
        self.player_two = player_two
        self.results_file = Path(results_file) if results_file is not None else None
        self.repository = repository if repository is not None else self._load_results()

        self.state = BoardState()
        self.loop_state = LoopState.WAITING_SELECTION
        self.number_of_moves = 0
        self.selected: Position | None = None
        self.winner_name: str | None = None
        self.last_result: GameResult | None = None

    # =========================================================================
    # Players
    # =========================================================================

    def player_for(self, piece_type: PieceType) -> str:
        """Name of the player controlling piece_type."""
        if piece_type is PieceType.DOG:
            return self.player_one
        return self.player_two

    @property
    def current_player(self) -> str:
        return self.player_for(self.state.to_move)

    @property
    def is_over(self) -> bool:
        return self.loop_state == LoopState.GAME_OVER

    # =========================================================================
    # Input
    # =========================================================================

    def select_square(self, position: Position) -> TurnResult:
        """
        Handle a selected square.

        A square holding a piece selects that piece. An empty square, once
        a piece is selected, is taken as the move target.
        """
        logger.info("Square selected at {}", position)
        if self.is_over:
            return TurnResult(moved=False, loop_state=self.loop_state, warnings=["The game is over"])

        if not self.state.is_square_empty(position):
            self.selected = position
            self.loop_state = LoopState.PIECE_SELECTED
            logger.debug("Piece chosen at {}", position)
            return TurnResult(moved=False, loop_state=self.loop_state, source=position)

        if self.selected is None:
            return TurnResult(moved=False, loop_state=self.loop_state)

        try:
            direction = Direction.between(self.selected, position)
        except InvalidDirectionError as e:
            logger.warning("Direction is not valid: {}", e)
            return TurnResult(
                moved=False,
                loop_state=self.loop_state,
                source=self.selected,
                destination=position,
                warnings=[str(e)],
            )

        result = self._make_move(self.selected, direction)
        self.selected = None
        if not self.is_over:
            self.loop_state = LoopState.WAITING_SELECTION
        result.loop_state = self.loop_state
        return result

    def try_move(self, source: Position, destination: Position) -> TurnResult:
        """
        Select source, then destination.

        An empty source is refused before any selection is made, so a piece
        left selected by an earlier click never moves onto it.
        """
        if self.is_over:
            return self.select_square(source)
        if self.state.index_at(source) is None:
            return TurnResult(
                moved=False,
                loop_state=self.loop_state,
                source=source,
                warnings=[f"No piece at {source}"],
            )
        self.select_square(source)
        return self.select_square(destination)

    def hints(self) -> list[Direction]:
        """Directions the selected piece could step in."""
        if self.selected is None:
            return []
        index = self.state.index_at(self.selected)
        if index is None:
            return []
        return self.state.get_possible_moves(index)

    def reset(self):
        """Start a new game with the same players."""
        self.state = BoardState()
        self.loop_state = LoopState.WAITING_SELECTION
        self.number_of_moves = 0
        self.selected = None
        self.winner_name = None
        self.last_result = None
        logger.debug("Game has been reset")

    # =========================================================================
    # Moves
    # =========================================================================

    def _make_move(self, source: Position, direction: Direction) -> TurnResult:
        destination = source.translated_by(direction)
        index = self.state.index_at(source)
        if index is None or not self.state.can_move(index, direction):
            logger.debug("The move from {} to {} is not possible", source, destination)
            return TurnResult(
                moved=False,
                loop_state=self.loop_state,
                source=source,
                destination=destination,
                warnings=[f"Cannot move from {source} to {destination}"],
            )

        previous_state = self.state.clone()
        self.state.move(index, direction)
        self.number_of_moves += 1
        logger.info("The new state after moving: {}", self.state)

        if self.state.is_goal():
            logger.info("Goal state reached")
            self._finish()

        return TurnResult(
            moved=True,
            loop_state=self.loop_state,
            source=source,
            destination=destination,
            previous_state=previous_state,
            winner=self.winner_name,
        )

    def _finish(self):
        if self.state.fox_wins():
            self.winner_name = self.player_two
        else:
            self.winner_name = self.player_one
        self.loop_state = LoopState.GAME_OVER
        logger.info("{} wins in {} moves", self.winner_name, self.number_of_moves)

        self.last_result = GameResult(
            player_one=self.player_one,
            player_two=self.player_two,
            winner=self.winner_name,
            number_of_moves=self.number_of_moves,
            time_of_play=datetime.now(timezone.utc).astimezone(),
        )
        self.repository.add(self.last_result)
        self._save_results()

    # =========================================================================
    # Results
    # =========================================================================

    def _load_results(self) -> GameResultRepository:
        if self.results_file is None:
            return GameResultRepository()
        try:
            return GameResultRepository.from_file(self.results_file)
        except (OSError, ValueError) as e:
            logger.warning("Results could not be loaded from {}: {}", self.results_file, e)
            return GameResultRepository()

    def _save_results(self):
        if self.results_file is None:
            return
        try:
            self.repository.save_to_file(self.results_file)
            logger.debug("Game result saved to {}", self.results_file)
        except OSError as e:
            logger.warning("Results could not be saved to {}: {}", self.results_file, e)
