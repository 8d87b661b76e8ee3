"""graph-astar: generic graph container and A* shortest-path search."""

from graph_astar.core import (
    GraphAStarError, IndexerError, StateIndexer, DefaultIndexer, AttributeIndexer
)
from graph_astar.graph import Graph, Vertex, Edge
from graph_astar.search import (
    AStarSearcher, SearchConfig, SearchResult, search, inc_search, zero_heuristic
)

__version__ = "1.0.0"

__all__ = [
    'GraphAStarError',
    'IndexerError',
    'StateIndexer',
    'DefaultIndexer',
    'AttributeIndexer',
    'Graph',
    'Vertex',
    'Edge',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'search',
    'inc_search',
    'zero_heuristic'
]
