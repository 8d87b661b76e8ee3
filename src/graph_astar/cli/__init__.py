"""Command-line interface for graph-astar.

This module provides CLI commands for running searches and inspecting configuration.
"""

from .main import main_cli, main
from .commands import search_command, grid_command, config_command
from .utils import setup_logging, save_results

__all__ = [
    'main_cli',
    'main',
    'search_command',
    'grid_command',
    'config_command',
    'setup_logging',
    'save_results'
]
