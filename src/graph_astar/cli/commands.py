"""CLI command implementations."""

import logging
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig, OmegaConf

from graph_astar.config import (
    load_config, validate_config, check_config_consistency, ConfigValidationError
)
from graph_astar.core.data_models import GridCell
from graph_astar.graph import Graph
from graph_astar.grid import OccupancyGrid
from graph_astar.search import SearchConfig, AStarSearcher, get_heuristic
from .utils import parse_edge, save_results, format_duration, format_path, setup_logging

logger = logging.getLogger(__name__)


def load_cli_config(args) -> DictConfig:
    """Load configuration applying comma-separated ``--config`` overrides.

    The ``logging`` section takes effect unless -v or -q was given.
    """
    overrides: Optional[List[str]] = None
    if getattr(args, 'config', None):
        overrides = [item.strip() for item in args.config.split(',') if item.strip()]
    cfg = load_config(overrides=overrides)

    log_cfg = cfg.get('logging')
    if log_cfg and not getattr(args, 'verbose', 0) and not getattr(args, 'quiet', False):
        level = getattr(logging, str(log_cfg.get('level', 'WARNING')).upper())
        setup_logging(level, log_cfg.get('format'))

    return cfg


def _search_config(cfg: DictConfig, args) -> SearchConfig:
    search_config = SearchConfig.from_config(cfg.get('search'))
    queue = getattr(args, 'queue', None)
    if queue:
        search_config.queue = queue
    return search_config


def _report(result_dict: Dict[str, Any], path_text: str, args) -> None:
    if not getattr(args, 'quiet', False):
        if result_dict['success']:
            print(f"Path: {path_text}")
            print(f"Cost: {result_dict['cost']}")
        else:
            print(f"No path found ({result_dict['termination_reason']})")
        print(f"Expanded {result_dict['nodes_expanded']} vertices in "
              f"{format_duration(result_dict['computation_time'])}")

    if getattr(args, 'output', None):
        save_results(result_dict, args.output)
        logger.info(f"Results saved to {args.output}")


def search_command(args) -> int:
    """Handle search command: batch A* over edges given on the command line.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        cfg = load_cli_config(args)
        graph = Graph(check_identity_range=cfg.graph.check_identity_range)

        for values in args.edge or []:
            src, dst, cost = parse_edge(values)
            if args.undirected:
                graph.add_undirected_edge(src, dst, cost)
            else:
                graph.add_edge(src, dst, cost)

        logger.info(f"Built graph with {graph.get_graph_vertex_number()} vertices "
                    f"and {graph.get_graph_edge_number()} edges")

        searcher = AStarSearcher(_search_config(cfg, args))
        result = searcher.search(graph, args.start, args.goal)

        result_dict = result.to_dict()
        result_dict['path'] = list(result.path)
        _report(result_dict, format_path(result.path), args)
        return 0 if result.success else 2

    except Exception as e:
        logger.error(f"Search command failed: {e}")
        return 1


def grid_command(args) -> int:
    """Handle grid command: incremental A* across a random occupancy grid.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        cfg = load_cli_config(args)
        grid_cfg = cfg.grid

        width = args.width if args.width is not None else grid_cfg.width
        height = args.height if args.height is not None else grid_cfg.height
        ratio = args.obstacle_ratio if args.obstacle_ratio is not None else grid_cfg.obstacle_ratio
        seed = args.seed if args.seed is not None else grid_cfg.seed
        connectivity = args.connectivity if args.connectivity is not None else grid_cfg.connectivity
        heuristic_name = args.heuristic if args.heuristic is not None else grid_cfg.heuristic

        start = GridCell(0, 0)
        goal = GridCell(width - 1, height - 1)
        grid = OccupancyGrid.random(width, height, ratio, seed, connectivity, keep_free=(start, goal))

        searcher = AStarSearcher(_search_config(cfg, args))
        result = searcher.inc_search(start, goal, grid.neighbours, get_heuristic(heuristic_name))

        if not args.quiet:
            print(grid.render(result.path))
            print(f"Materialized {result.graph.get_graph_vertex_number()} of "
                  f"{width * height} cells")

        result_dict = result.to_dict()
        result_dict['path'] = [cell.as_tuple() for cell in result.path]
        result_dict['grid'] = grid.cells
        _report(result_dict, format_path([cell.as_tuple() for cell in result.path]), args)
        return 0 if result.success else 2

    except Exception as e:
        logger.error(f"Grid command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = load_cli_config(args)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_cli_config(args)
                validate_config(config)
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

            issues = check_config_consistency(config)
            for issue in issues:
                print(f"Warning: {issue}")
            print("Configuration is valid")
            return 0

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
