"""Core data models describing which puzzle input to solve."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union


@dataclass(frozen=True)
class InputSelection:
    """Selects the real puzzle input or one of the numbered test inputs."""

    test_number: Optional[int] = None  # None selects the real input

    @classmethod
    def parse(cls, value: str) -> 'InputSelection':
        """Parse ``real`` or a test number.

        Raises:
            ValueError: If the value is neither ``real`` nor an integer
        """
        if value == 'real':
            return cls()
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(f"Data selection must be 'real' or an integer, got {value!r}")

    @property
    def is_real(self) -> bool:
        return self.test_number is None

    @property
    def suffix(self) -> str:
        """File-name suffix: empty for the real input, the number otherwise."""
        return "" if self.test_number is None else str(self.test_number)

    def __str__(self) -> str:
        if self.test_number is None:
            return "real data"
        return f"test data {self.test_number}"


@dataclass
class PuzzleRequest:
    """One invocation of a puzzle solver."""

    day: int
    part: int
    data: InputSelection = field(default_factory=InputSelection)
    extra: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate day and part ranges."""
        if not 1 <= self.day <= 25:
            raise ValueError(f"Day must be between 1 and 25, got {self.day}")
        if self.part not in (1, 2):
            raise ValueError(f"Part must be 1 or 2, got {self.part}")

    def input_path(self, inputs_dir: Union[str, Path]) -> Path:
        """Location of the input file, ``<inputs_dir>/day<N>/data<suffix>.txt``."""
        return Path(inputs_dir) / f"day{self.day}" / f"data{self.data.suffix}.txt"

    @property
    def extra_param(self) -> Optional[str]:
        """Extra command-line words joined into one parameter, if any."""
        return " ".join(self.extra) if self.extra else None
