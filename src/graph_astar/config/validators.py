"""Configuration validation for graph-astar."""

import logging
from typing import List

from omegaconf import DictConfig

from graph_astar.core.exceptions import GraphAStarError

logger = logging.getLogger(__name__)

VALID_QUEUES = ('lazy', 'dynamic')
VALID_TIE_BREAKING = ('fifo', 'lifo')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
VALID_CONNECTIVITY = (4, 8)
VALID_HEURISTICS = ('zero', 'manhattan', 'euclidean', 'chebyshev', 'octile')


class ConfigValidationError(GraphAStarError):
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
        validate_search_config(config.get('search', {}))
        validate_graph_config(config.get('graph', {}))
        validate_logging_config(config.get('logging', {}))
        validate_grid_config(config.get('grid', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    queue = search_config.get('queue', 'lazy')
    if queue not in VALID_QUEUES:
        raise ConfigValidationError(
            f"search.queue must be one of {VALID_QUEUES}, got {queue}"
        )

    tie_breaking = search_config.get('tie_breaking', 'fifo')
    if tie_breaking not in VALID_TIE_BREAKING:
        raise ConfigValidationError(
            f"search.tie_breaking must be one of {VALID_TIE_BREAKING}, got {tie_breaking}"
        )

    log_summary = search_config.get('log_path_summary', True)
    if not isinstance(log_summary, bool):
        raise ConfigValidationError(
            f"search.log_path_summary must be boolean, got {log_summary}"
        )

    zero = search_config.get('zero', 0)
    if isinstance(zero, bool) or not isinstance(zero, (int, float)):
        raise ConfigValidationError(
            f"search.zero must be a number, got {zero}"
        )


def validate_graph_config(graph_config: DictConfig) -> None:
    """Validate graph configuration section."""
    if not graph_config:
        return

    check_range = graph_config.get('check_identity_range', True)
    if not isinstance(check_range, bool):
        raise ConfigValidationError(
            f"graph.check_identity_range must be boolean, got {check_range}"
        )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = str(logging_config.get('level', 'WARNING')).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {VALID_LOG_LEVELS}, got {level}"
        )


def validate_grid_config(grid_config: DictConfig) -> None:
    """Validate grid demo configuration section.

    Args:
        grid_config: Grid configuration section
    """
    if not grid_config:
        return

    for key in ['width', 'height']:
        value = grid_config.get(key, 1)
        if not isinstance(value, int) or value <= 0:
            raise ConfigValidationError(
                f"grid.{key} must be positive integer, got {value}"
            )

    ratio = grid_config.get('obstacle_ratio', 0.0)
    if not isinstance(ratio, (int, float)) or not 0 <= ratio < 1:
        raise ConfigValidationError(
            f"grid.obstacle_ratio must be in [0, 1), got {ratio}"
        )

    connectivity = grid_config.get('connectivity', 4)
    if connectivity not in VALID_CONNECTIVITY:
        raise ConfigValidationError(
            f"grid.connectivity must be 4 or 8, got {connectivity}"
        )

    heuristic = grid_config.get('heuristic', 'manhattan')
    if heuristic not in VALID_HEURISTICS:
        raise ConfigValidationError(
            f"grid.heuristic must be one of {VALID_HEURISTICS}, got {heuristic}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    grid_config = config.get('grid', {}) or {}
    connectivity = grid_config.get('connectivity', 4)
    heuristic = grid_config.get('heuristic', 'manhattan')

    # Manhattan overestimates once diagonal moves are allowed.
    if connectivity == 8 and heuristic == 'manhattan':
        issues.append(
            "grid.heuristic 'manhattan' is not admissible with 8-connectivity; use 'octile'"
        )

    return issues
