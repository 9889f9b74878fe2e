"""Exception types raised by the search engine and the puzzle solvers."""

from typing import Any, Dict, Optional


class PuzzleSolverError(Exception):
    """Base class for all solver errors."""
    pass


class InvalidInput(PuzzleSolverError, ValueError):
    """Raised when puzzle text cannot be turned into a puzzle state."""
    pass


class NoSolution(PuzzleSolverError):
    """Raised when a search exhausts its frontier without reaching a goal."""

    def __init__(self, message: str = "no solution found",
                 statistics: Optional[Any] = None):
        super().__init__(message)
        self.statistics = statistics

    def stats_dict(self) -> Dict[str, Any]:
        """Statistics gathered before the search gave up, as a dictionary."""
        if self.statistics is None:
            return {}
        return self.statistics.to_dict()


class SearchBudgetExceeded(NoSolution):
    """Raised when a search hits its node or time budget."""

    def __init__(self, reason: str, statistics: Optional[Any] = None):
        super().__init__(f"search budget exceeded: {reason}", statistics)
        self.reason = reason


class EmptyFrontier(PuzzleSolverError, IndexError):
    """Raised when popping from an empty priority frontier."""
    pass


class UnknownPuzzle(PuzzleSolverError, KeyError):
    """Raised when no solver is registered for a puzzle identifier."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else "unknown puzzle"
