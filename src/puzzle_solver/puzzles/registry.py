"""Explicit registry mapping puzzle days to solver classes."""

import logging
from typing import Dict, List, Optional, Type

from omegaconf import DictConfig

from puzzle_solver.core.exceptions import UnknownPuzzle
from puzzle_solver.puzzles.base import Puzzle
from puzzle_solver.search.astar import SearchConfig

logger = logging.getLogger(__name__)


class PuzzleRegistry:
    """Mapping from day number to a :class:`Puzzle` subclass."""

    def __init__(self):
        self._puzzles: Dict[int, Type[Puzzle]] = {}

    def register(self, puzzle_class: Type[Puzzle]) -> Type[Puzzle]:
        """Register a puzzle class under its ``day``; usable as a decorator.

        Raises:
            ValueError: If the day is already taken by another class
        """
        day = puzzle_class.day
        existing = self._puzzles.get(day)
        if existing is not None and existing is not puzzle_class:
            raise ValueError(f"Day {day} already registered to {existing.__name__}")
        self._puzzles[day] = puzzle_class
        logger.debug(f"Registered day {day}: {puzzle_class.__name__}")
        return puzzle_class

    def get(self, day: int) -> Type[Puzzle]:
        try:
            return self._puzzles[day]
        except KeyError:
            raise UnknownPuzzle(f"Day {day} not implemented yet") from None

    def create(self,
               day: int,
               config: Optional[DictConfig] = None,
               search_config: Optional[SearchConfig] = None) -> Puzzle:
        """Instantiate the solver for ``day``."""
        return self.get(day)(config, search_config)

    def days(self) -> List[int]:
        return sorted(self._puzzles)

    def __contains__(self, day: int) -> bool:
        return day in self._puzzles

    def __len__(self) -> int:
        return len(self._puzzles)


def create_default_registry() -> PuzzleRegistry:
    """Registry populated with every search-based puzzle shipped here."""
    from puzzle_solver.puzzles.elevator import ElevatorPuzzle
    from puzzle_solver.puzzles.storage_grid import StorageGridPuzzle
    from puzzle_solver.puzzles.vault import VaultPuzzle

    registry = PuzzleRegistry()
    for puzzle_class in (ElevatorPuzzle, VaultPuzzle, StorageGridPuzzle):
        registry.register(puzzle_class)
    return registry
