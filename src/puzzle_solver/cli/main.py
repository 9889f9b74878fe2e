"""Main CLI entry point for the puzzle solver."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='puzzle-solver',
        description='Puzzle solvers sharing an A* search engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  puzzle-solver solve 11 1                      # Day 11 part 1, real input
  puzzle-solver solve 11 1 1                    # Day 11 part 1, test input 1
  puzzle-solver -c search.astar.max_nodes_expanded=100000 solve 11 2
  puzzle-solver list                            # Show registered puzzles
  puzzle-solver config show                     # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        action='append',
        default=[],
        metavar='OVERRIDE',
        help='Configuration override (e.g., puzzles.elevator.floor_count=4); repeatable'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve one part of a puzzle',
        description='Solve one part of a puzzle from inputs/day<DAY>/data<SUFFIX>.txt'
    )

    solve_parser.add_argument('day', type=int, help='Puzzle day (1-25)')
    solve_parser.add_argument('part', type=int, help='Puzzle part (1 or 2)')
    solve_parser.add_argument(
        'data',
        nargs='?',
        default=None,
        help="'real' or a test input number (default: solver.default_data)"
    )
    solve_parser.add_argument(
        'extra',
        nargs='*',
        help='Extra parameters passed to the puzzle'
    )

    solve_parser.add_argument(
        '--inputs-dir',
        type=str,
        help='Directory containing day<N>/ input folders (default: solver.inputs_dir)'
    )

    solve_parser.add_argument(
        '--max-nodes',
        type=int,
        help='Stop the search after expanding this many states'
    )

    solve_parser.add_argument(
        '--timeout', '-t',
        type=float,
        help='Search time budget in seconds'
    )

    # List command
    subparsers.add_parser(
        'list',
        help='List registered puzzles'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Manage solver configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'list':
            return commands.list_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
