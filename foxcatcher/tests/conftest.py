"""
Pytest fixtures for Fox Catcher tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from ..engine_core import BoardState, Piece, PieceType, Position
from ..results import GameResult, GameResultRepository


def make_state(to_move: PieceType, fox: tuple[int, int], *dogs: tuple[int, int]) -> BoardState:
    """Build a state from a fox square and dog squares, fox at index 0."""
    pieces = [Piece(PieceType.FOX, Position(*fox))]
    pieces += [Piece(PieceType.DOG, Position(*dog)) for dog in dogs]
    return BoardState(to_move, *pieces)


@pytest.fixture
def initial_state() -> BoardState:
    """The canonical starting position, dogs to move."""
    return BoardState()


@pytest.fixture
def midgame_state() -> BoardState:
    """A position where neither side has won."""
    return make_state(PieceType.DOG, (1, 1), (5, 1), (4, 2), (6, 6), (4, 6))


@pytest.fixture
def fox_wins_state() -> BoardState:
    """The fox has passed every dog."""
    return make_state(PieceType.DOG, (6, 4), (5, 1), (4, 2), (5, 3), (4, 4))


@pytest.fixture
def dogs_win_state() -> BoardState:
    """The fox is boxed in on the top row."""
    return make_state(PieceType.FOX, (0, 4), (2, 4), (1, 3), (3, 3), (1, 5))


@pytest.fixture
def results_file(tmp_path):
    """Path for a results file that does not exist yet."""
    return tmp_path / "results.json"


@pytest.fixture
def sample_results() -> list[GameResult]:
    """A handful of finished games with distinct move counts and times."""
    base = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    return [
        GameResult(player_one="Ann", player_two="Ben", winner="Ann",
                   number_of_moves=20, time_of_play=base),
        GameResult(player_one="Cat", player_two="Dan", winner="Dan",
                   number_of_moves=12, time_of_play=base + timedelta(days=1)),
        GameResult(player_one="Ann", player_two="Dan", winner="Dan",
                   number_of_moves=12, time_of_play=base + timedelta(days=2)),
        GameResult(player_one="Ben", player_two="Cat", winner="Ben",
                   number_of_moves=31, time_of_play=base + timedelta(days=3)),
    ]


@pytest.fixture
def saved_results(results_file, sample_results):
    """A results file holding sample_results."""
    repository = GameResultRepository()
    for result in sample_results:
        repository.add(result)
    repository.save_to_file(results_file)
    return results_file
