"""
Results Module - records of finished games.

Each finished game yields a GameResult (players, winner, move count,
time of play). Results are kept in a GameResultRepository and stored in
a JSON file, from which the ranked results table is built.
"""

from .models import GameResult
from .repository import (
    DEFAULT_RESULTS_FILE,
    GameResultRepository,
    JsonRepository,
    Repository,
)

__all__ = [
    "GameResult",
    "Repository",
    "JsonRepository",
    "GameResultRepository",
    "DEFAULT_RESULTS_FILE",
]
