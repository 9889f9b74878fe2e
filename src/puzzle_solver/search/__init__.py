"""Search algorithms shared by the puzzle solvers.

This module implements a generic A* engine over hashable states with a
lazily-pruned priority frontier.
"""

from .frontier import PriorityFrontier
from .astar import (
    AStarSearcher, SearchConfig, SearchResult, SearchStatistics, astar, create_astar_searcher
)

__all__ = [
    'PriorityFrontier',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'astar',
    'create_astar_searcher'
]
