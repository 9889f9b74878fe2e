"""Two Steps Forward (day 17).

A grid of rooms whose doors open depending on the MD5 hash of a passcode
followed by the path taken so far. The path is part of the state, so the
same room reached by different routes is a different state.
"""

import hashlib
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from puzzle_solver.core.exceptions import InvalidInput, NoSolution
from puzzle_solver.puzzles.base import Puzzle
from puzzle_solver.search.astar import AStarSearcher

logger = logging.getLogger(__name__)

# Hash digit order: up, down, left, right
DIRECTIONS = (('U', 0, -1), ('D', 0, 1), ('L', -1, 0), ('R', 1, 0))
OPEN_DOOR = frozenset('bcdef')


@dataclass(frozen=True)
class VaultState:
    """Position in the room grid and the moves that led there."""
    x: int
    y: int
    path: str = ""


@dataclass(frozen=True)
class Vault:
    """Room grid for one passcode; the vault is the bottom-right room."""

    passcode: str
    width: int = 4
    height: int = 4

    @property
    def start(self) -> VaultState:
        return VaultState(0, 0)

    def open_doors(self, state: VaultState) -> List[Tuple[str, int, int]]:
        digest = hashlib.md5((self.passcode + state.path).encode()).hexdigest()
        return [direction for direction, char in zip(DIRECTIONS, digest) if char in OPEN_DOOR]

    def neighbors(self, state: VaultState) -> List[Tuple[VaultState, int]]:
        result = []
        for step, dx, dy in self.open_doors(state):
            x, y = state.x + dx, state.y + dy
            if 0 <= x < self.width and 0 <= y < self.height:
                result.append((replace(state, x=x, y=y, path=state.path + step), 1))
        return result

    def is_vault(self, state: VaultState) -> bool:
        return state.x == self.width - 1 and state.y == self.height - 1

    def distance_to_vault(self, state: VaultState) -> int:
        return (self.width - 1 - state.x) + (self.height - 1 - state.y)

    def shortest_path(self, searcher: Optional[AStarSearcher] = None) -> str:
        """Shortest sequence of moves reaching the vault.

        Raises:
            NoSolution: If every route is blocked
        """
        searcher = searcher or AStarSearcher()
        result = searcher.search(self.start, self.neighbors, self.distance_to_vault, self.is_vault)
        return result.goal.path

    def longest_path_length(self) -> int:
        """Length of the longest route ending at the vault.

        Reaching the vault ends a route, so each layer only expands rooms
        other than the vault. The search terminates because every route
        eventually runs into locked doors.

        Raises:
            NoSolution: If no route reaches the vault
        """
        layer = [self.start]
        longest = None
        depth = 0
        while layer:
            depth += 1
            next_layer = []
            for state in layer:
                for neighbor, _ in self.neighbors(state):
                    if self.is_vault(neighbor):
                        longest = depth
                    else:
                        next_layer.append(neighbor)
            layer = next_layer
        logger.debug(f"Exhausted vault routes after {depth} layers")
        if longest is None:
            raise NoSolution(f"No route reaches the vault for passcode {self.passcode!r}")
        return longest


class VaultPuzzle(Puzzle):
    """Two Steps Forward."""

    day = 17
    title = "Two Steps Forward"
    config_key = 'vault'

    def vault(self, text: str) -> Vault:
        passcode = text.strip()
        if not passcode:
            raise InvalidInput("Passcode is empty")
        return Vault(
            passcode,
            width=int(self.option('width', 4)),
            height=int(self.option('height', 4))
        )

    def part_1(self, text: str, extra: Optional[str] = None) -> str:
        return self.vault(text).shortest_path(self.create_searcher())

    def part_2(self, text: str, extra: Optional[str] = None) -> str:
        return str(self.vault(text).longest_path_length())
