"""Graph container with identity-keyed vertices and owned edges."""

from .vertex import Vertex, Edge
from .graph import Graph

__all__ = [
    'Vertex',
    'Edge',
    'Graph'
]
