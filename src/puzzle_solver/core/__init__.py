"""Core data models and error types shared by every solver."""

from .exceptions import (
    PuzzleSolverError, InvalidInput, NoSolution, SearchBudgetExceeded,
    EmptyFrontier, UnknownPuzzle
)
from .data_models import InputSelection, PuzzleRequest

__all__ = [
    'PuzzleSolverError',
    'InvalidInput',
    'NoSolution',
    'SearchBudgetExceeded',
    'EmptyFrontier',
    'UnknownPuzzle',
    'InputSelection',
    'PuzzleRequest'
]
