"""Base class shared by every registered puzzle."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from omegaconf import DictConfig, OmegaConf

from puzzle_solver.search.astar import AStarSearcher, SearchConfig

logger = logging.getLogger(__name__)


class Puzzle(ABC):
    """A puzzle with two parts, each mapping raw input text to an answer string.

    Subclasses set ``day``, ``title`` and ``config_key``; the latter names the
    ``puzzles.<key>`` configuration section that :meth:`option` reads from.
    """

    day: int = 0
    title: str = ""
    config_key: Optional[str] = None

    def __init__(self,
                 config: Optional[DictConfig] = None,
                 search_config: Optional[SearchConfig] = None):
        """Initialize puzzle.

        Args:
            config: Loaded configuration; puzzle options come from
                ``puzzles.<config_key>``
            search_config: Search budget; defaults to ``search.astar`` of ``config``
        """
        self.config = config
        self.search_config = search_config or SearchConfig.from_config(config)

    def option(self, key: str, default: Any = None) -> Any:
        """Read a puzzle option, falling back to ``default``."""
        if self.config is None or self.config_key is None:
            return default
        return OmegaConf.select(self.config, f"puzzles.{self.config_key}.{key}", default=default)

    def create_searcher(self) -> AStarSearcher:
        return AStarSearcher(self.search_config)

    @abstractmethod
    def part_1(self, text: str, extra: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def part_2(self, text: str, extra: Optional[str] = None) -> str:
        pass

    def solve(self, part: int, text: str, extra: Optional[str] = None) -> str:
        """Dispatch to :meth:`part_1` or :meth:`part_2`.

        Raises:
            ValueError: If ``part`` is not 1 or 2
        """
        logger.info(f"Solving day {self.day} part {part} ({self.title})")
        if part == 1:
            return self.part_1(text, extra)
        if part == 2:
            return self.part_2(text, extra)
        raise ValueError(f"Invalid part {part}")
