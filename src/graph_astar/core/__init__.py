"""Core capabilities shared by the graph container and search engine."""

from .exceptions import GraphAStarError, IndexerError
from .indexer import (
    StateIndexer, DefaultIndexer, AttributeIndexer, resolve_indexer, check_identity, is_integral
)

__all__ = [
    'GraphAStarError',
    'IndexerError',
    'StateIndexer',
    'DefaultIndexer',
    'AttributeIndexer',
    'resolve_indexer',
    'check_identity',
    'is_integral'
]
