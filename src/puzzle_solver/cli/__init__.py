"""Command-line interface for the puzzle solver.

This module provides CLI commands for solving a puzzle of the day and
inspecting configuration.
"""

from .main import main_cli
from .commands import solve_command, list_command, config_command
from .utils import setup_logging, read_puzzle_input, save_results

__all__ = [
    'main_cli',
    'solve_command',
    'list_command',
    'config_command',
    'setup_logging',
    'read_puzzle_input',
    'save_results'
]
