"""Min-priority frontier used by the A* search engine."""

import heapq
import itertools
from typing import Generic, List, Tuple, TypeVar

from puzzle_solver.core.exceptions import EmptyFrontier

T = TypeVar('T')


class PriorityFrontier(Generic[T]):
    """Binary heap of items ordered by estimated total cost.

    Entries are never removed except through :meth:`pop_min`. The same item
    may be pushed several times with different costs; callers are expected to
    discard stale entries after popping.

    Ordering is ``(f_cost, tie_breaker, insertion order)`` so equal-cost
    entries come out in a fixed order for a fixed sequence of pushes.
    """

    def __init__(self):
        self._heap: List[Tuple[float, float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, f_cost: float, tie_breaker: float = 0) -> None:
        """Add an item.

        Args:
            item: Payload to store
            f_cost: Estimated total cost; lower pops first
            tie_breaker: Secondary key for equal ``f_cost``; lower pops first
        """
        heapq.heappush(self._heap, (f_cost, tie_breaker, next(self._counter), item))

    def pop_min(self) -> Tuple[T, float]:
        """Remove and return ``(item, f_cost)`` with the lowest cost.

        Raises:
            EmptyFrontier: If no entries remain
        """
        if not self._heap:
            raise EmptyFrontier("pop from an empty frontier")
        f_cost, _, _, item = heapq.heappop(self._heap)
        return item, f_cost

    def peek_cost(self) -> float:
        """Lowest ``f_cost`` currently queued."""
        if not self._heap:
            raise EmptyFrontier("peek into an empty frontier")
        return self._heap[0][0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self._heap)})"
