"""A* search over graphs.

Batch and incremental A* search, the open-list queues they run on, and
ready-made heuristics.
"""

from .heuristics import (
    zero_heuristic, manhattan_distance, euclidean_distance, chebyshev_distance,
    octile_distance, get_heuristic, CountingHeuristic
)
from .priority_queue import PriorityQueue, DynamicPriorityQueue
from .astar import (
    AStarSearcher, SearchConfig, SearchResult, SearchStatistics,
    search, inc_search, reconstruct_path, create_astar_searcher
)

__all__ = [
    'zero_heuristic',
    'manhattan_distance',
    'euclidean_distance',
    'chebyshev_distance',
    'octile_distance',
    'get_heuristic',
    'CountingHeuristic',
    'PriorityQueue',
    'DynamicPriorityQueue',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'search',
    'inc_search',
    'reconstruct_path',
    'create_astar_searcher'
]
