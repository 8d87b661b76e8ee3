"""Vertex and edge types stored inside a :class:`~graph_astar.graph.graph.Graph`.

A vertex wraps one state together with the identity derived from it. Both are
fixed at construction: there is no setter for either, and changing a state
means removing the vertex and inserting a new one. Besides its domain data a
vertex carries the scratch fields A* writes during a search.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from graph_astar.core.indexer import is_integral

logger = logging.getLogger(__name__)

State = TypeVar('State')
Transition = TypeVar('Transition')


@dataclass(eq=False)
class Edge(Generic[State, Transition]):
    """Directed edge owned by its source vertex."""
    src: 'Vertex'
    dst: 'Vertex'
    cost: Transition

    def __eq__(self, other: object) -> bool:
        """Edges are identical when source, destination and cost all match."""
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.src.vertex_id == other.src.vertex_id and
                self.dst.vertex_id == other.dst.vertex_id and
                self.cost == other.cost)

    __hash__ = None

    def describe(self) -> str:
        """One-line summary of the edge."""
        return f"Edge: src - {self.src.vertex_id} , dst - {self.dst.vertex_id} , cost - {self.cost}"

    def __repr__(self) -> str:
        return f"Edge({self.src.vertex_id} -> {self.dst.vertex_id}, cost={self.cost!r})"


class Vertex(Generic[State, Transition]):
    """Graph vertex.

    Attributes:
        edges_to: Outgoing edges, owned by this vertex
        vertices_from: Vertices holding an edge that points at this vertex
        is_checked: Vertex has been expanded (closed list)
        is_in_openlist: Vertex sits on the search frontier
        g_cost: Best known cost from the search start
        h_cost: Heuristic estimate to the search goal
        f_cost: ``g_cost + h_cost``
        search_parent: Predecessor on the best known path
    """

    __slots__ = (
        '_state', '_vertex_id', '_indexer',
        'edges_to', 'vertices_from',
        'is_checked', 'is_in_openlist', 'g_cost', 'h_cost', 'f_cost', 'search_parent',
    )

    def __init__(self, state: State, vertex_id: int, indexer: Callable[[Any], int]):
        self._state = state
        self._vertex_id = vertex_id
        self._indexer = indexer

        self.edges_to: List[Edge] = []
        self.vertices_from: List['Vertex'] = []

        self.clear_vertex_search_info()

    @property
    def state(self) -> State:
        return self._state

    @property
    def vertex_id(self) -> int:
        return self._vertex_id

    def get_vertex_id(self) -> int:
        return self._vertex_id

    def __eq__(self, other: object) -> bool:
        """Two vertices are equal when they share the same id."""
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._vertex_id == other._vertex_id

    def __hash__(self) -> int:
        return hash(self._vertex_id)

    def __repr__(self) -> str:
        return f"Vertex(id={self._vertex_id}, state={self._state!r})"

    def _target_id(self, dst: Any) -> int:
        """Resolve a vertex, an id or a state to an id."""
        if isinstance(dst, Vertex):
            return dst.vertex_id
        if is_integral(dst):
            return operator.index(dst)
        return self._indexer(dst)

    def find_edge(self, dst: Any) -> Optional[Edge]:
        """Look for the edge connecting to the vertex with given id, state or vertex.

        Returns:
            The edge, or None if this vertex has no edge to ``dst``
        """
        dst_id = self._target_id(dst)
        for edge in self.edges_to:
            if edge.dst.vertex_id == dst_id:
                return edge
        return None

    def check_neighbour(self, dst: Any) -> bool:
        """Check if the vertex with given id or state is a neighbour of this vertex."""
        return self.find_edge(dst) is not None

    def get_neighbours(self) -> List['Vertex']:
        """Get all successor vertices of this vertex."""
        return [edge.dst for edge in self.edges_to]

    def get_edge_cost(self, dst: Any) -> Optional[Transition]:
        """Cost of the edge to ``dst``, or None when no such edge exists."""
        edge = self.find_edge(dst)
        return edge.cost if edge is not None else None

    @property
    def out_degree(self) -> int:
        return len(self.edges_to)

    @property
    def in_degree(self) -> int:
        return len(self.vertices_from)

    @property
    def degree(self) -> int:
        return self.out_degree + self.in_degree

    def clear_vertex_search_info(self) -> None:
        """Clear existing search info before a new search."""
        self.is_checked = False
        self.is_in_openlist = False
        self.g_cost = None
        self.h_cost = None
        self.f_cost = None
        self.search_parent = None
