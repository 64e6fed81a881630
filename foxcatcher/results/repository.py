"""
Result Repository - in-memory collections with JSON file storage.

The results file is the only persistence in the system:
- Loaded before a game starts and before the results table is shown
- Rewritten after every finished game
- Missing file means no results yet
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Callable, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, TypeAdapter

from .models import GameResult


DEFAULT_RESULTS_FILE = os.getenv("FOXCATCHER_RESULTS_FILE", "results.json")

T = TypeVar("T", bound=BaseModel)


class Repository(Generic[T]):
    """A plain in-memory collection of elements."""

    def __init__(self, element_type: type[T]):
        self.element_type = element_type
        self.elements: list[T] = []

    def size(self) -> int:
        return len(self.elements)

    def add(self, element: T):
        self.elements.append(element)

    def remove(self, element: T):
        self.elements.remove(element)

    def clear(self):
        self.elements.clear()

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        return [element for element in self.elements if predicate(element)]

    def find_all(self) -> list[T]:
        """Get a copy of all elements."""
        return list(self.elements)


class JsonRepository(Repository[T]):
    """
    Repository that loads and saves its elements as a JSON array.

    Usage:
        repo = JsonRepository(GameResult)
        repo.load_from_file("results.json")
        repo.add(result)
        repo.save_to_file("results.json")

    OSError and pydantic.ValidationError propagate to the caller.
    """

    def __init__(self, element_type: type[T]):
        super().__init__(element_type)
        self._adapter = TypeAdapter(list[element_type])

    def load_from_file(self, path: str | Path):
        """Replace the elements with the contents of path."""
        data = Path(path).read_bytes()
        self.elements = self._adapter.validate_json(data)
        logger.debug("Loaded {} element(s) from {}", len(self.elements), path)

    def save_to_file(self, path: str | Path):
        """Write all elements to path, pretty-printed."""
        data = self._adapter.dump_json(self.elements, indent=2, by_alias=True)
        Path(path).write_bytes(data)
        logger.debug("Saved {} element(s) to {}", len(self.elements), path)


class GameResultRepository(JsonRepository[GameResult]):
    """Repository of finished games."""

    def __init__(self):
        super().__init__(GameResult)

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_RESULTS_FILE) -> GameResultRepository:
        """Create a repository from path; a missing file gives an empty one."""
        repository = cls()
        if Path(path).exists():
            repository.load_from_file(path)
        return repository

    def find_best_results(self, limit: int) -> list[GameResult]:
        """
        Rank results for the results table.

        Fewest moves first; among equal move counts the most recent game
        comes first. A negative limit raises ValueError.
        """
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        newest_first = sorted(self.elements, key=lambda r: r.time_of_play, reverse=True)
        ranked = sorted(newest_first, key=lambda r: r.number_of_moves)
        return ranked[:limit]
