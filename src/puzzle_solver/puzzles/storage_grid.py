"""Grid Computing (day 22).

Storage nodes are parsed from ``df -h`` style output into numpy arrays
indexed ``[y, x]``. Moving the goal data from the top-right node to the
top-left node is solved by first walking the single empty node next to the
goal data with A*, then shuffling the goal data left along the top row, which
costs five moves per column.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from puzzle_solver.core.exceptions import InvalidInput
from puzzle_solver.puzzles.base import Puzzle
from puzzle_solver.search.astar import AStarSearcher

logger = logging.getLogger(__name__)

NODE_PATTERN = re.compile(
    r"^/dev/grid/node-x(\d+)-y(\d+)\s+(\d+)T\s+(\d+)T\s+(\d+)T\s+\d+%\s*$"
)

# Moving the goal data one column left: four moves to bring the empty node
# around to its left side, one to swap.
MOVES_PER_COLUMN = 5

Coordinate = Tuple[int, int]  # (x, y)


@dataclass
class StorageGrid:
    """Size, used and available terabytes of every node, indexed ``[y, x]``."""
    size: np.ndarray
    used: np.ndarray
    available: np.ndarray

    @classmethod
    def parse(cls, text: str) -> 'StorageGrid':
        """Parse node listing lines; the header lines are ignored.

        Raises:
            InvalidInput: If no node lines are found or the grid has holes
        """
        nodes = []
        for line in text.splitlines():
            match = NODE_PATTERN.match(line.strip())
            if match:
                nodes.append(tuple(int(value) for value in match.groups()))
            elif line.startswith('/dev/grid'):
                raise InvalidInput(f"Malformed node line: {line!r}")
        if not nodes:
            raise InvalidInput("No storage nodes found")

        width = max(node[0] for node in nodes) + 1
        height = max(node[1] for node in nodes) + 1
        if len(nodes) != width * height:
            raise InvalidInput(f"Expected {width * height} nodes for a {width}x{height} grid, got {len(nodes)}")

        size = np.zeros((height, width), dtype=np.int64)
        used = np.zeros_like(size)
        available = np.zeros_like(size)
        for x, y, node_size, node_used, node_available in nodes:
            size[y, x] = node_size
            used[y, x] = node_used
            available[y, x] = node_available
        return cls(size, used, available)

    @property
    def width(self) -> int:
        return self.used.shape[1]

    @property
    def height(self) -> int:
        return self.used.shape[0]

    def viable_pairs(self) -> int:
        """Count ordered pairs (A, B), A != B, A non-empty, A's data fits in B."""
        used = self.used.ravel()
        available = self.available.ravel()
        fits = (used[:, None] <= available[None, :]) & (used[:, None] > 0)
        np.fill_diagonal(fits, False)
        return int(fits.sum())

    def empty_node(self) -> Coordinate:
        """Coordinate of the node with no data.

        Raises:
            InvalidInput: If there is not exactly one empty node
        """
        ys, xs = np.nonzero(self.used == 0)
        if len(xs) != 1:
            raise InvalidInput(f"Expected exactly one empty node, found {len(xs)}")
        return int(xs[0]), int(ys[0])

    def passable(self) -> np.ndarray:
        """Nodes whose data fits into the empty node, excluding the goal data node."""
        x, y = self.empty_node()
        mask = self.used <= self.size[y, x]
        mask[0, self.width - 1] = False
        return mask

    def fewest_moves(self, searcher: Optional[AStarSearcher] = None) -> int:
        """Moves needed to bring the goal data to the top-left node.

        Raises:
            InvalidInput: If the grid is narrower than two columns
            NoSolution: If the empty node cannot reach the goal data
        """
        if self.width < 2:
            raise InvalidInput("Grid must have at least two columns")
        passable = self.passable()
        target = (self.width - 2, 0)
        width, height = self.width, self.height

        def neighbors(coord: Coordinate) -> List[Tuple[Coordinate, int]]:
            x, y = coord
            result = []
            for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
                if 0 <= nx < width and 0 <= ny < height and passable[ny, nx]:
                    result.append(((nx, ny), 1))
            return result

        def distance(coord: Coordinate) -> int:
            return abs(coord[0] - target[0]) + abs(coord[1] - target[1])

        searcher = searcher or AStarSearcher()
        result = searcher.search(self.empty_node(), neighbors, distance, lambda coord: coord == target)
        steps = int(result.cost)
        logger.debug(f"Empty node reaches {target} in {steps} moves")
        return steps + 1 + (self.width - 2) * MOVES_PER_COLUMN


class StorageGridPuzzle(Puzzle):
    """Grid Computing."""

    day = 22
    title = "Grid Computing"
    config_key = None

    def part_1(self, text: str, extra: Optional[str] = None) -> str:
        return str(StorageGrid.parse(text).viable_pairs())

    def part_2(self, text: str, extra: Optional[str] = None) -> str:
        return str(StorageGrid.parse(text).fewest_moves(self.create_searcher()))
