"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from puzzle_solver.core.data_models import PuzzleRequest


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Hydra logs its own composition steps at INFO
    logging.getLogger('hydra').setLevel(max(level, logging.WARNING))


def read_puzzle_input(request: PuzzleRequest, inputs_dir: Union[str, Path]) -> str:
    """Read the input file selected by ``request``.

    Args:
        request: Day, part and data selection
        inputs_dir: Directory holding ``day<N>/data<suffix>.txt`` files

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the input file doesn't exist
    """
    path = request.input_path(inputs_dir)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text()


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(results, f, indent=2, sort_keys=True)
        else:
            json.dump(results, f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, seconds = divmod(seconds, 60)
    return f"{int(minutes)}m {seconds:.1f}s"
