"""Puzzle solvers built around a reusable A* search engine.

The search engine lives in :mod:`puzzle_solver.search`; individual puzzles
are registered in :mod:`puzzle_solver.puzzles.registry` and driven from the
command line through :mod:`puzzle_solver.cli`.
"""

__version__ = "0.1.0"
