"""Configuration validation for the puzzle solver."""

import logging
from typing import Any
from omegaconf import DictConfig, ListConfig

logger = logging.getLogger(__name__)

KNOWN_HEURISTICS = ('crossings', 'remaining_floors')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_solver_config(config.get('solver', {}))
        validate_search_config(config.get('search', {}))
        validate_puzzles_config(config.get('puzzles', {}))
        validate_logging_config(config.get('logging', {}))

        logger.debug("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_solver_config(solver_config: DictConfig) -> None:
    """Validate solver configuration section."""
    if not solver_config:
        return

    inputs_dir = solver_config.get('inputs_dir', 'inputs')
    if not isinstance(inputs_dir, str) or not inputs_dir:
        raise ConfigValidationError(f"solver.inputs_dir must be a non-empty string, got {inputs_dir!r}")

    default_data = str(solver_config.get('default_data', 'real'))
    if default_data != 'real' and not default_data.isdigit():
        raise ConfigValidationError(
            f"solver.default_data must be 'real' or a test number, got {default_data!r}"
        )


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Budgets may be null (unbounded) or positive.
    """
    if not search_config:
        return

    astar_config = search_config.get('astar', {})
    if not astar_config:
        return

    max_nodes = astar_config.get('max_nodes_expanded', None)
    if max_nodes is not None and (not _is_int(max_nodes) or max_nodes <= 0):
        raise ConfigValidationError(
            f"astar.max_nodes_expanded must be null or a positive integer, got {max_nodes}"
        )

    max_time = astar_config.get('max_computation_time', None)
    if max_time is not None and (not _is_number(max_time) or max_time <= 0):
        raise ConfigValidationError(
            f"astar.max_computation_time must be null or a positive number, got {max_time}"
        )

    log_interval = astar_config.get('log_interval', 10000)
    if not _is_int(log_interval) or log_interval < 0:
        raise ConfigValidationError(
            f"astar.log_interval must be a non-negative integer, got {log_interval}"
        )


def validate_puzzles_config(puzzles_config: DictConfig) -> None:
    """Validate per-puzzle option sections."""
    if not puzzles_config:
        return

    elevator_config = puzzles_config.get('elevator', {})
    if elevator_config:
        floor_count = elevator_config.get('floor_count', 4)
        if not _is_int(floor_count) or floor_count < 2:
            raise ConfigValidationError(
                f"elevator.floor_count must be an integer of at least 2, got {floor_count}"
            )

        heuristic = elevator_config.get('heuristic', 'crossings')
        if heuristic not in KNOWN_HEURISTICS:
            raise ConfigValidationError(
                f"elevator.heuristic must be one of {KNOWN_HEURISTICS}, got {heuristic!r}"
            )
        if heuristic != 'crossings':
            logger.warning(f"elevator.heuristic={heuristic} is not admissible; answers may not be minimal")

        for flag in ('skip_empty_floors', 'prefer_pair_up'):
            value = elevator_config.get(flag, True)
            if not isinstance(value, bool):
                raise ConfigValidationError(f"elevator.{flag} must be a boolean, got {value!r}")

        extra = elevator_config.get('extra_elements', [])
        if not isinstance(extra, (list, ListConfig)):
            raise ConfigValidationError(f"elevator.extra_elements must be a list, got {extra!r}")

    vault_config = puzzles_config.get('vault', {})
    if vault_config:
        for key in ('width', 'height'):
            value = vault_config.get(key, 4)
            if not _is_int(value) or value <= 0:
                raise ConfigValidationError(f"vault.{key} must be a positive integer, got {value}")


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = str(logging_config.get('level', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}")
