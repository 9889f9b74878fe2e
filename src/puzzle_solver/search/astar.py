"""Generic A* search engine.

This module implements best-first A* search over any hashable state type.
Domains plug in through three callables: a neighbor function returning
``(state, edge_cost)`` pairs, an admissible heuristic and a goal predicate.
Stale frontier entries are discarded lazily by re-checking the best known
cost of a state after it is popped.
"""

import time
import logging
from typing import (
    Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar
)
from dataclasses import dataclass, field

from omegaconf import DictConfig, OmegaConf

from puzzle_solver.core.exceptions import NoSolution, SearchBudgetExceeded
from puzzle_solver.search.frontier import PriorityFrontier

logger = logging.getLogger(__name__)

State = TypeVar('State', bound=Hashable)

NeighborsFn = Callable[[State], Iterable[Tuple[State, float]]]
HeuristicFn = Callable[[State], float]
GoalFn = Callable[[State], bool]


@dataclass
class SearchStatistics:
    """Counters collected during one search."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_entries: int = 0  # popped entries superseded by a cheaper path
    max_frontier_size: int = 0
    states_seen: int = 0
    computation_time: float = 0.0

    @property
    def average_branching_factor(self) -> float:
        if self.nodes_expanded == 0:
            return 0.0
        return self.nodes_generated / self.nodes_expanded

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_entries': self.stale_entries,
            'max_frontier_size': self.max_frontier_size,
            'states_seen': self.states_seen,
            'average_branching_factor': self.average_branching_factor,
            'computation_time': self.computation_time
        }


@dataclass
class SearchResult(Generic[State]):
    """Result of a successful A* search."""
    path: List[State]
    cost: float
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    computation_time: float = 0.0
    termination_reason: str = "goal_reached"

    @property
    def start(self) -> State:
        return self.path[0]

    @property
    def goal(self) -> State:
        return self.path[-1]

    @property
    def steps(self) -> int:
        """Number of transitions on the path."""
        return len(self.path) - 1


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    max_nodes_expanded: Optional[int] = None  # None means unbounded
    max_computation_time: Optional[float] = None  # seconds, None means unbounded
    log_interval: int = 10000  # expansions between progress lines

    @classmethod
    def from_config(cls, cfg: Optional[DictConfig]) -> 'SearchConfig':
        """Build a search configuration from the ``search.astar`` section.

        Args:
            cfg: Loaded configuration, or None for defaults

        Returns:
            SearchConfig with values taken from the configuration
        """
        if cfg is None:
            return cls()
        astar_cfg = OmegaConf.select(cfg, 'search.astar', default=None)
        if astar_cfg is None:
            return cls()
        max_nodes = astar_cfg.get('max_nodes_expanded', None)
        max_time = astar_cfg.get('max_computation_time', None)
        return cls(
            max_nodes_expanded=int(max_nodes) if max_nodes is not None else None,
            max_computation_time=float(max_time) if max_time is not None else None,
            log_interval=int(astar_cfg.get('log_interval', 10000))
        )


class AStarSearcher:
    """Domain-agnostic A* search.

    Edge costs must be non-negative and the heuristic must never overestimate
    the remaining cost for the returned cost to be optimal. Neither
    precondition is checked at runtime.

    Each call to :meth:`search` owns a fresh frontier and cost map, so one
    searcher can be reused for independent searches.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters. When omitted the
                ``search.astar`` section of the global configuration is used
                if one has been loaded.
        """
        if config is None:
            from puzzle_solver.config import get_config
            config = SearchConfig.from_config(get_config())
        self.config = config
        self.statistics = SearchStatistics()

        logger.debug(f"A* searcher initialized with max_nodes={self.config.max_nodes_expanded}, "
                     f"max_time={self.config.max_computation_time}")

    def search(self,
               start: State,
               neighbors: NeighborsFn,
               heuristic: HeuristicFn,
               goal: GoalFn) -> SearchResult:
        """Find a cheapest path from ``start`` to a state satisfying ``goal``.

        Args:
            start: Initial state
            neighbors: Returns ``(successor, edge_cost)`` pairs for a state
            heuristic: Admissible estimate of the remaining cost
            goal: Goal predicate

        Returns:
            SearchResult with the path (start first) and its total cost

        Raises:
            NoSolution: If the frontier empties without reaching a goal
            SearchBudgetExceeded: If the node or time budget runs out
        """
        start_time = time.perf_counter()
        self.statistics = stats = SearchStatistics()

        deadline = None
        if self.config.max_computation_time is not None:
            deadline = start_time + self.config.max_computation_time
        max_nodes = self.config.max_nodes_expanded
        log_interval = self.config.log_interval

        best_cost: Dict[State, float] = {start: 0}
        parents: Dict[State, State] = {}
        expanded: Dict[State, float] = {}

        frontier: PriorityFrontier[Tuple[State, float]] = PriorityFrontier()
        start_h = heuristic(start)
        frontier.push((start, 0), start_h, start_h)
        stats.max_frontier_size = 1

        logger.info(f"Starting A* search (initial estimate {start_h})")

        while frontier:
            (state, g_cost), f_cost = frontier.pop_min()

            if g_cost > best_cost[state]:
                stats.stale_entries += 1
                continue
            if state in expanded and expanded[state] <= g_cost:
                stats.stale_entries += 1
                continue

            if goal(state):
                path = self._reconstruct_path(parents, state)
                stats.states_seen = len(best_cost)
                stats.computation_time = time.perf_counter() - start_time
                logger.info(f"A* search reached goal: cost={g_cost}, "
                            f"expanded={stats.nodes_expanded}, "
                            f"time={stats.computation_time:.3f}s")
                return SearchResult(
                    path=path,
                    cost=g_cost,
                    statistics=stats,
                    computation_time=stats.computation_time
                )

            if max_nodes is not None and stats.nodes_expanded >= max_nodes:
                self._raise_budget("max_nodes_reached", best_cost, start_time)
            if deadline is not None and time.perf_counter() > deadline:
                self._raise_budget("timeout", best_cost, start_time)

            expanded[state] = g_cost
            stats.nodes_expanded += 1

            for neighbor, edge_cost in neighbors(state):
                stats.nodes_generated += 1
                candidate = g_cost + edge_cost
                known = best_cost.get(neighbor)
                if known is not None and candidate >= known:
                    continue
                best_cost[neighbor] = candidate
                parents[neighbor] = state
                h_value = heuristic(neighbor)
                frontier.push((neighbor, candidate), candidate + h_value, h_value)

            if len(frontier) > stats.max_frontier_size:
                stats.max_frontier_size = len(frontier)

            if log_interval and stats.nodes_expanded % log_interval == 0:
                logger.debug(f"A* progress: expanded={stats.nodes_expanded}, "
                             f"frontier={len(frontier)}, f={f_cost}, g={g_cost}")

        stats.states_seen = len(best_cost)
        stats.computation_time = time.perf_counter() - start_time
        logger.info(f"A* search exhausted after {stats.nodes_expanded} expansions")
        raise NoSolution(
            f"search exhausted after expanding {stats.nodes_expanded} states",
            statistics=stats
        )

    def _raise_budget(self, reason: str, best_cost: Dict[State, float], start_time: float) -> None:
        self.statistics.states_seen = len(best_cost)
        self.statistics.computation_time = time.perf_counter() - start_time
        logger.warning(f"A* search stopped ({reason}) after "
                       f"{self.statistics.nodes_expanded} expansions")
        raise SearchBudgetExceeded(reason, statistics=self.statistics)

    @staticmethod
    def _reconstruct_path(parents: Dict[State, State], state: State) -> List[State]:
        path = [state]
        while state in parents:
            state = parents[state]
            path.append(state)
        path.reverse()
        return path

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the most recent search."""
        return {
            **self.statistics.to_dict(),
            'config': {
                'max_nodes_expanded': self.config.max_nodes_expanded,
                'max_computation_time': self.config.max_computation_time
            }
        }


def astar(start: State,
          neighbors: NeighborsFn,
          heuristic: HeuristicFn,
          goal: GoalFn,
          config: Optional[SearchConfig] = None) -> Tuple[List[State], float]:
    """Run A* and return ``(path, cost)``.

    Raises:
        NoSolution: If no goal state is reachable
    """
    result = AStarSearcher(config).search(start, neighbors, heuristic, goal)
    return result.path, result.cost


def create_astar_searcher(max_nodes_expanded: Optional[int] = None,
                          max_computation_time: Optional[float] = None,
                          log_interval: int = 10000) -> AStarSearcher:
    """Factory function to create A* searcher with custom configuration.

    Args:
        max_nodes_expanded: Maximum nodes to expand, None for no limit
        max_computation_time: Time budget in seconds, None for no limit
        log_interval: Expansions between DEBUG progress lines

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        max_nodes_expanded=max_nodes_expanded,
        max_computation_time=max_computation_time,
        log_interval=log_interval
    )

    return AStarSearcher(config)
