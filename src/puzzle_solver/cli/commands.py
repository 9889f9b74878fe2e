"""CLI command implementations."""

import logging
import time
from typing import List

from omegaconf import DictConfig, OmegaConf

from puzzle_solver.config import load_config, validate_config, ConfigValidationError
from puzzle_solver.core.data_models import InputSelection, PuzzleRequest
from puzzle_solver.core.exceptions import InvalidInput, NoSolution, UnknownPuzzle
from puzzle_solver.puzzles.registry import create_default_registry
from puzzle_solver.search.astar import SearchConfig

from .utils import read_puzzle_input, save_results, format_duration, setup_logging

logger = logging.getLogger(__name__)


def _solve_overrides(args) -> List[str]:
    overrides = list(getattr(args, 'config', None) or [])
    if getattr(args, 'max_nodes', None) is not None:
        overrides.append(f"search.astar.max_nodes_expanded={args.max_nodes}")
    if getattr(args, 'timeout', None) is not None:
        overrides.append(f"search.astar.max_computation_time={args.timeout}")
    return overrides


def _apply_log_level(config: DictConfig, args) -> None:
    """Use ``logging.level`` from the configuration unless -v or -q was given."""
    if getattr(args, 'verbose', 0) or getattr(args, 'quiet', False):
        return
    level = OmegaConf.select(config, 'logging.level', default=None)
    if level:
        setup_logging(getattr(logging, str(level).upper()))


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config = load_config(overrides=_solve_overrides(args))
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1
    _apply_log_level(config, args)

    try:
        data = InputSelection.parse(args.data or str(config.solver.default_data))
        request = PuzzleRequest(args.day, args.part, data, list(args.extra or []))
    except ValueError as e:
        print(f"Problem parsing arguments: {e}")
        return 1

    registry = create_default_registry()
    try:
        puzzle = registry.create(request.day, config, SearchConfig.from_config(config))
    except UnknownPuzzle as e:
        print(str(e))
        return 1

    inputs_dir = args.inputs_dir or str(config.solver.inputs_dir)
    try:
        text = read_puzzle_input(request, inputs_dir)
    except OSError as e:
        print(f"Cannot read input file: {e}")
        return 1

    logger.info(f"Solving day {request.day} part {request.part} on {request.data}")
    start_time = time.perf_counter()
    try:
        solution = puzzle.solve(request.part, text, request.extra_param)
    except InvalidInput as e:
        logger.error(f"Invalid puzzle input: {e}")
        return 1
    except NoSolution as e:
        logger.error(f"No solution: {e}")
        stats = e.stats_dict()
        if stats:
            logger.error(f"Search statistics: {stats}")
        return 1
    total_time = time.perf_counter() - start_time

    print(f"The solution for day {request.day} part {request.part} is: {solution}!")
    if not args.quiet:
        logger.info(f"Solved in {format_duration(total_time)}")

    if args.output:
        save_results({
            'day': request.day,
            'part': request.part,
            'data': str(request.data),
            'solution': solution,
            'total_time': total_time,
            'timestamp': time.time()
        }, args.output)
        logger.info(f"Results saved to {args.output}")

    return 0


def list_command(args) -> int:
    """Handle list command."""
    registry = create_default_registry()
    for day in registry.days():
        puzzle_class = registry.get(day)
        print(f"day {day:2d}  {puzzle_class.title}")
    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = list(getattr(args, 'config', None) or [])
    try:
        if args.config_action == 'show':
            config = load_config(overrides=overrides)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config: DictConfig = load_config(overrides=overrides, validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
