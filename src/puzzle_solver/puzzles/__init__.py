"""Puzzle solvers built on the shared A* engine."""

from .base import Puzzle
from .registry import PuzzleRegistry, create_default_registry
from .elevator import ElevatorState, ElevatorPuzzle, MoveRules, minimum_moves, parse_assignments
from .vault import Vault, VaultState, VaultPuzzle
from .storage_grid import StorageGrid, StorageGridPuzzle

__all__ = [
    'Puzzle',
    'PuzzleRegistry',
    'create_default_registry',
    'ElevatorState',
    'ElevatorPuzzle',
    'MoveRules',
    'minimum_moves',
    'parse_assignments',
    'Vault',
    'VaultState',
    'VaultPuzzle',
    'StorageGrid',
    'StorageGridPuzzle'
]
