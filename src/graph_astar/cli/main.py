"""Main CLI entry point for graph-astar."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='graph-astar',
        description='graph-astar - generic graph container with A* shortest-path search',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graph-astar search --edge 1 2 1 --edge 2 3 1 --start 1 --goal 3
  graph-astar grid --width 30 --height 12 --seed 7
  graph-astar --config search.queue=dynamic config show
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Comma-separated configuration overrides (e.g., search.queue=dynamic)'
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
        help='Suppress all output except errors'
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

    # Search command
    search_parser = subparsers.add_parser(
        'search',
        help='Run A* on a graph given as edges',
        description='Build an integer-vertex graph from --edge triples and run A*'
    )

    search_parser.add_argument(
        '--edge', '-e',
        nargs=3,
        action='append',
        metavar=('SRC', 'DST', 'COST'),
        help='Directed edge (repeatable)'
    )

    search_parser.add_argument('--start', '-s', type=int, required=True, help='Start vertex id')
    search_parser.add_argument('--goal', '-g', type=int, required=True, help='Goal vertex id')

    search_parser.add_argument(
        '--undirected',
        action='store_true',
        help='Add every edge in both directions'
    )

    search_parser.add_argument(
        '--queue',
        choices=['lazy', 'dynamic'],
        help='Open-list implementation (default: from configuration)'
    )

    # Grid command
    grid_parser = subparsers.add_parser(
        'grid',
        help='Run incremental A* across a random occupancy grid',
        description='Search from the top-left to the bottom-right corner of a random grid'
    )

    grid_parser.add_argument('--width', type=int, help='Grid width')
    grid_parser.add_argument('--height', type=int, help='Grid height')
    grid_parser.add_argument('--obstacle-ratio', type=float, help='Fraction of occupied cells')
    grid_parser.add_argument('--seed', type=int, help='Random seed')
    grid_parser.add_argument('--connectivity', type=int, choices=[4, 8], help='Neighbourhood size')
    grid_parser.add_argument(
        '--heuristic',
        choices=['zero', 'manhattan', 'euclidean', 'chebyshev', 'octile'],
        help='Heuristic function'
    )
    grid_parser.add_argument(
        '--queue',
        choices=['lazy', 'dynamic'],
        help='Open-list implementation (default: from configuration)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser('show', help='Show current configuration')
    config_subparsers.add_parser('validate', help='Validate configuration')

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 2 when no path exists, 1 for errors)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
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

        if parsed_args.command == 'search':
            return commands.search_command(parsed_args)
        if parsed_args.command == 'grid':
            return commands.grid_command(parsed_args)
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
