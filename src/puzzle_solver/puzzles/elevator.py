"""Radioisotope elevator puzzle (day 11).

Generators and their matching microchips must all be carried to the top
floor. The elevator holds one or two items, needs at least one item to move,
and stops at every floor. A microchip left on a floor with a foreign
generator and without its own generator is destroyed, so such
configurations are never enqueued.

States are canonical: element names are dropped after parsing and only the
sorted multiset of ``(chip_floor, generator_floor)`` pairs is kept, because
which isotope sits where has no effect on reachability.
"""

import re
import logging
from dataclasses import dataclass, field, replace
from itertools import combinations
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from puzzle_solver.core.exceptions import InvalidInput
from puzzle_solver.puzzles.base import Puzzle
from puzzle_solver.search.astar import AStarSearcher

logger = logging.getLogger(__name__)

DEFAULT_FLOOR_COUNT = 4

CHIP = 'M'
GENERATOR = 'G'

HEURISTICS = ('crossings', 'remaining_floors')

ITEM_PATTERN = re.compile(r"\b([a-z]+)(-compatible microchip| generator)\b", re.IGNORECASE)

Item = Tuple[int, str]  # (pair index, CHIP or GENERATOR)


@dataclass(frozen=True)
class MoveRules:
    """Move-generation pruning and heuristic selection."""
    skip_empty_floors: bool = True  # never descend when every floor below is empty
    prefer_pair_up: bool = True  # carry two items up when possible
    heuristic: str = 'crossings'

    def __post_init__(self) -> None:
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"Unknown heuristic {self.heuristic!r}, expected one of {HEURISTICS}")


DEFAULT_RULES = MoveRules()


def parse_assignments(text: str, floor_count: int = DEFAULT_FLOOR_COUNT) -> Dict[str, Tuple[int, int]]:
    """Parse floor descriptions into ``element -> (chip_floor, generator_floor)``.

    Line ``i`` describes floor ``i``. Lines that mention no items are empty
    floors.

    Raises:
        InvalidInput: On blank text, too many floors, duplicated items or an
            element missing its chip or its generator
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise InvalidInput("Puzzle text is empty")
    if len(lines) > floor_count:
        raise InvalidInput(f"Puzzle describes {len(lines)} floors, expected at most {floor_count}")

    chips: Dict[str, int] = {}
    generators: Dict[str, int] = {}
    for floor, line in enumerate(lines):
        for match in ITEM_PATTERN.finditer(line):
            element = match.group(1).lower()
            target = chips if match.group(2).lower().endswith('microchip') else generators
            if element in target:
                raise InvalidInput(f"Item for element {element!r} listed twice (floor {floor})")
            target[element] = floor

    unmatched = sorted(set(chips) ^ set(generators))
    if unmatched:
        raise InvalidInput(f"Elements without both a chip and a generator: {', '.join(unmatched)}")

    return {element: (chips[element], generators[element]) for element in sorted(chips)}


@dataclass(frozen=True)
class ElevatorState:
    """Floor assignment of every chip/generator pair plus the elevator floor.

    ``pairs`` is stored sorted, so states that differ only by which element
    is which compare and hash equal.
    """

    pairs: Tuple[Tuple[int, int], ...]
    elevator: int = 0
    floor_count: int = DEFAULT_FLOOR_COUNT
    rules: MoveRules = field(default=DEFAULT_RULES, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Canonicalize pair order and check floor ranges."""
        canonical = tuple(sorted((int(chip), int(gen)) for chip, gen in self.pairs))
        object.__setattr__(self, 'pairs', canonical)
        if self.floor_count < 1:
            raise InvalidInput(f"floor_count must be positive, got {self.floor_count}")
        floors = range(self.floor_count)
        if self.elevator not in floors:
            raise InvalidInput(f"Elevator floor {self.elevator} outside 0..{self.floor_count - 1}")
        for chip, gen in canonical:
            if chip not in floors or gen not in floors:
                raise InvalidInput(f"Pair {(chip, gen)} outside 0..{self.floor_count - 1}")

    @classmethod
    def from_assignments(cls,
                         assignments: Mapping[str, Tuple[int, int]],
                         elevator: int = 0,
                         floor_count: int = DEFAULT_FLOOR_COUNT,
                         rules: MoveRules = DEFAULT_RULES) -> 'ElevatorState':
        return cls(tuple(assignments.values()), elevator, floor_count, rules)

    @classmethod
    def parse(cls,
              text: str,
              floor_count: int = DEFAULT_FLOOR_COUNT,
              rules: MoveRules = DEFAULT_RULES) -> 'ElevatorState':
        """Build the initial state (elevator on floor 0) from puzzle text."""
        assignments = parse_assignments(text, floor_count)
        logger.debug(f"Parsed {len(assignments)} elements: {assignments}")
        return cls.from_assignments(assignments, 0, floor_count, rules)

    def with_extra_pairs(self, count: int, floor: int = 0) -> 'ElevatorState':
        """Copy of this state with ``count`` more pairs on ``floor``."""
        return replace(self, pairs=self.pairs + ((floor, floor),) * count)

    @property
    def top_floor(self) -> int:
        return self.floor_count - 1

    def items_on_floor(self, floor: int) -> List[Item]:
        items = []
        for index, (chip, gen) in enumerate(self.pairs):
            if chip == floor:
                items.append((index, CHIP))
            if gen == floor:
                items.append((index, GENERATOR))
        return items

    def is_valid(self) -> bool:
        """True when no chip shares a floor with a foreign generator unprotected."""
        generator_floors = {gen for _, gen in self.pairs}
        return all(chip == gen or chip not in generator_floors for chip, gen in self.pairs)

    def finished(self) -> bool:
        top = self.top_floor
        return all(chip == top and gen == top for chip, gen in self.pairs)

    def heuristic(self) -> int:
        if self.rules.heuristic == 'remaining_floors':
            return self.remaining_floors()
        return self.crossing_bound()

    def remaining_floors(self) -> int:
        """Total floors every item still has to climb.

        Overestimates when items can share the elevator, so it does not
        guarantee optimal answers when used as the search heuristic.
        """
        top = self.top_floor
        return sum((top - chip) + (top - gen) for chip, gen in self.pairs)

    def crossing_bound(self) -> int:
        """Lower bound on moves counted per boundary between adjacent floors.

        Every move crosses exactly one boundary. With ``n`` items on or below
        floor ``f``, an elevator starting on or below ``f`` needs at least
        ``max(1, 2n - 3)`` crossings of the boundary above ``f``; one starting
        above it needs ``2n``.
        """
        counts = [0] * self.floor_count
        for chip, gen in self.pairs:
            counts[chip] += 1
            counts[gen] += 1

        total = 0
        below = 0
        for floor in range(self.top_floor):
            below += counts[floor]
            if below == 0:
                continue
            if self.elevator <= floor:
                total += max(1, 2 * below - 3)
            else:
                total += 2 * below
        return total

    def neighbors(self) -> List[Tuple['ElevatorState', int]]:
        """Valid states one elevator move away, each with cost 1."""
        current = self.elevator
        items = self.items_on_floor(current)
        if not items:
            return []

        destinations = []
        if current < self.top_floor:
            destinations.append(current + 1)
        if current > 0 and not (self.rules.skip_empty_floors and self._floors_below_empty()):
            destinations.append(current - 1)

        lift_sets = self._lift_sets(items)
        candidates = []
        for destination in destinations:
            going_up = destination > current
            for lift in lift_sets:
                candidate = self._move(lift, destination)
                if candidate.is_valid():
                    candidates.append((candidate, going_up, len(lift)))

        if self.rules.prefer_pair_up:
            candidates = self._prefer_pairs_up(candidates)

        seen = {}
        for candidate, _, _ in candidates:
            seen.setdefault(candidate, 1)
        return list(seen.items())

    @staticmethod
    def _lift_sets(items: List[Item]) -> List[Tuple[Item, ...]]:
        # Any single item; two chips; two generators; or a chip with its own generator
        lift_sets: List[Tuple[Item, ...]] = [(item,) for item in items]
        for first, second in combinations(items, 2):
            if first[1] == second[1] or first[0] == second[0]:
                lift_sets.append((first, second))
        return lift_sets

    def _move(self, lift: Iterable[Item], destination: int) -> 'ElevatorState':
        pairs = [list(pair) for pair in self.pairs]
        for index, kind in lift:
            pairs[index][0 if kind == CHIP else 1] = destination
        return replace(self, pairs=tuple(tuple(pair) for pair in pairs), elevator=destination)

    def _floors_below_empty(self) -> bool:
        current = self.elevator
        return all(chip >= current and gen >= current for chip, gen in self.pairs)

    @staticmethod
    def _prefer_pairs_up(candidates):
        # Only ascents are pruned
        can_lift_two = any(up and size == 2 for _, up, size in candidates)
        return [
            (state, up, size) for state, up, size in candidates
            if not (up and size == 1 and can_lift_two)
        ]

    def render(self) -> str:
        """Floor diagram, top floor first, pairs numbered by canonical index."""
        rows = []
        for floor in reversed(range(self.floor_count)):
            marker = 'E' if floor == self.elevator else '.'
            cells = []
            for index, (chip, gen) in enumerate(self.pairs):
                cells.append(f"{index}G" if gen == floor else ' .')
                cells.append(f"{index}M" if chip == floor else ' .')
            rows.append(f"F{floor + 1} {marker} " + ' '.join(cells))
        return '\n'.join(rows)


def minimum_moves(state: ElevatorState, searcher: Optional[AStarSearcher] = None) -> int:
    """Fewest elevator moves bringing everything in ``state`` to the top floor.

    Raises:
        NoSolution: If the top floor cannot be reached
    """
    searcher = searcher or AStarSearcher()
    result = searcher.search(
        state,
        ElevatorState.neighbors,
        ElevatorState.heuristic,
        ElevatorState.finished
    )
    if logger.isEnabledFor(logging.DEBUG):
        for step, path_state in enumerate(result.path):
            logger.debug(f"Step {step}:\n{path_state.render()}")
    return int(result.cost)


class ElevatorPuzzle(Puzzle):
    """Radioisotope Thermoelectric Generators."""

    day = 11
    title = "Radioisotope Thermoelectric Generators"
    config_key = 'elevator'

    def rules(self) -> MoveRules:
        return MoveRules(
            skip_empty_floors=bool(self.option('skip_empty_floors', True)),
            prefer_pair_up=bool(self.option('prefer_pair_up', True)),
            heuristic=str(self.option('heuristic', 'crossings'))
        )

    def initial_state(self, text: str) -> ElevatorState:
        floor_count = int(self.option('floor_count', DEFAULT_FLOOR_COUNT))
        return ElevatorState.parse(text, floor_count, self.rules())

    def part_1(self, text: str, extra: Optional[str] = None) -> str:
        state = self.initial_state(text)
        return str(minimum_moves(state, self.create_searcher()))

    def part_2(self, text: str, extra: Optional[str] = None) -> str:
        extra_elements = list(self.option('extra_elements', ['elerium', 'dilithium']))
        state = self.initial_state(text).with_extra_pairs(len(extra_elements))
        logger.info(f"Added {len(extra_elements)} pairs on the first floor: {', '.join(extra_elements)}")
        return str(minimum_moves(state, self.create_searcher()))
