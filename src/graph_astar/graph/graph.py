"""Generic directed graph container.

The graph owns every vertex, stored in a dictionary keyed by identity.
Each vertex owns its outgoing edges. The destination of an edge keeps a
non-owning back-reference to the source in ``vertices_from``. All mutators
keep the two sides consistent within a single call.

States are opaque to the graph. Only the identity produced by the indexer is
ever used as a key, and the graph never manages memory held by a state.
"""

import logging
import operator
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from graph_astar.core.exceptions import IndexerError
from graph_astar.core.indexer import IndexerLike, check_identity, is_integral, resolve_indexer
from .vertex import Edge, Vertex

logger = logging.getLogger(__name__)

State = TypeVar('State')
Transition = TypeVar('Transition')


class Graph(Generic[State, Transition]):
    """Graph of states connected by weighted, directed edges."""

    def __init__(self, indexer: Optional[IndexerLike] = None, check_identity_range: bool = True):
        """Initialize an empty graph.

        Args:
            indexer: Callable mapping a state to its 64-bit identity.
                Defaults to :class:`~graph_astar.core.indexer.DefaultIndexer`.
            check_identity_range: Verify each identity is a 64-bit integer

        Raises:
            IndexerError: If ``indexer`` is not callable
        """
        self._indexer = resolve_indexer(indexer)
        self.check_identity_range = check_identity_range
        self._vertex_map: Dict[int, Vertex] = {}

    @property
    def indexer(self) -> IndexerLike:
        return self._indexer

    def get_state_index(self, state: State) -> int:
        """Return the identity of ``state``."""
        identity = self._indexer(state)
        if self.check_identity_range:
            return check_identity(identity, state)
        return operator.index(identity) if is_integral(identity) else identity

    def _resolve_id(self, key: Any) -> int:
        if is_integral(key):
            return operator.index(key)
        return self.get_state_index(key)

    # Vertex access

    def __len__(self) -> int:
        return len(self._vertex_map)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertex_map.values())

    def __contains__(self, key: Any) -> bool:
        try:
            return self.find_vertex(key) is not None
        except IndexerError:
            return False

    def vertices(self) -> List[Vertex]:
        return list(self._vertex_map.values())

    def vertex_ids(self) -> List[int]:
        return list(self._vertex_map.keys())

    def find_vertex(self, key: Any) -> Optional[Vertex]:
        """Return the vertex with the given id or state.

        An ``int`` argument is treated as an identity. Anything else is
        passed through the indexer first.

        Returns:
            The vertex, or None if the graph does not contain it
        """
        return self._vertex_map.get(self._resolve_id(key))

    # Graph operations

    def add_vertex(self, state: State) -> Vertex:
        """Create a vertex for ``state``, or return the existing one.

        An existing vertex keeps its original state.
        """
        vertex_id = self.get_state_index(state)
        vertex = self._vertex_map.get(vertex_id)
        if vertex is None:
            vertex = Vertex(state, vertex_id, self._indexer)
            self._vertex_map[vertex_id] = vertex
            logger.debug(f"Added vertex {vertex_id}")
        return vertex

    def remove_vertex(self, key: Any) -> bool:
        """Remove the vertex with the given id or state, if present.

        All edges touching the vertex are removed, whichever vertex owns them.

        Returns:
            True if a vertex was removed
        """
        vertex = self._vertex_map.pop(self._resolve_id(key), None)
        if vertex is None:
            return False

        vertex_id = vertex.vertex_id
        for other in self._vertex_map.values():
            other.edges_to[:] = [e for e in other.edges_to if e.dst.vertex_id != vertex_id]
            other.vertices_from[:] = [v for v in other.vertices_from if v.vertex_id != vertex_id]

        vertex.edges_to.clear()
        vertex.vertices_from.clear()
        logger.debug(f"Removed vertex {vertex_id}")
        return True

    def add_edge(self, src_state: State, dst_state: State, cost: Transition) -> Edge:
        """Add a directed edge, or update the cost of the existing one.

        Missing endpoint vertices are created.

        Raises:
            ValueError: If both states map to the same identity
        """
        src_id = self.get_state_index(src_state)
        dst_id = self.get_state_index(dst_state)
        if src_id == dst_id:
            raise ValueError(f"Self-loop on vertex {src_id} is not allowed")

        src = self.add_vertex(src_state)
        dst = self.add_vertex(dst_state)

        edge = src.find_edge(dst)
        if edge is not None:
            edge.cost = cost
            return edge

        edge = Edge(src, dst, cost)
        src.edges_to.append(edge)
        if src not in dst.vertices_from:
            dst.vertices_from.append(src)
        return edge

    def remove_edge(self, src_state: State, dst_state: State) -> bool:
        """Remove the directed edge from ``src_state`` to ``dst_state``.

        Returns:
            True if an edge was removed
        """
        src = self._vertex_map.get(self.get_state_index(src_state))
        dst = self._vertex_map.get(self.get_state_index(dst_state))
        if src is None or dst is None:
            return False

        edge = src.find_edge(dst)
        if edge is None:
            return False

        src.edges_to.remove(edge)
        dst.vertices_from[:] = [v for v in dst.vertices_from if v.vertex_id != src.vertex_id]
        return True

    def has_edge(self, src_state: State, dst_state: State) -> bool:
        src = self._vertex_map.get(self.get_state_index(src_state))
        return src is not None and src.check_neighbour(self.get_state_index(dst_state))

    def add_undirected_edge(self, src_state: State, dst_state: State, cost: Transition) -> None:
        """Add edges in both directions with the same cost."""
        self.add_edge(src_state, dst_state, cost)
        self.add_edge(dst_state, src_state, cost)

    def remove_undirected_edge(self, src_state: State, dst_state: State) -> bool:
        """Remove edges in both directions.

        Returns:
            True if at least one direction was removed
        """
        removed_forward = self.remove_edge(src_state, dst_state)
        removed_backward = self.remove_edge(dst_state, src_state)
        return removed_forward or removed_backward

    def get_all_edges(self) -> List[Edge]:
        """Return every directed edge in vertex iteration order."""
        return [edge for vertex in self._vertex_map.values() for edge in vertex.edges_to]

    def get_graph_vertex_number(self) -> int:
        return len(self._vertex_map)

    def get_graph_edge_number(self) -> int:
        return sum(len(vertex.edges_to) for vertex in self._vertex_map.values())

    def reset_graph_vertices(self) -> None:
        """Reset search info of all vertices before a new search."""
        for vertex in self._vertex_map.values():
            vertex.clear_vertex_search_info()

    def clear_graph(self) -> None:
        """Remove all edges and vertices."""
        for vertex in self._vertex_map.values():
            vertex.edges_to.clear()
            vertex.vertices_from.clear()
        self._vertex_map = {}

    # Copy and move

    def copy(self) -> 'Graph':
        """Deep-copy vertices and edges into a new, independent graph.

        States are shared with the source graph, everything else is rebuilt.
        """
        other = type(self)(self._indexer, self.check_identity_range)
        for vertex_id, vertex in self._vertex_map.items():
            other._vertex_map[vertex_id] = Vertex(vertex.state, vertex_id, self._indexer)

        vmap = other._vertex_map
        for vertex_id, vertex in self._vertex_map.items():
            clone = vmap[vertex_id]
            clone.edges_to = [Edge(clone, vmap[e.dst.vertex_id], e.cost) for e in vertex.edges_to]
            clone.vertices_from = [vmap[v.vertex_id] for v in vertex.vertices_from]
            clone.is_checked = vertex.is_checked
            clone.is_in_openlist = vertex.is_in_openlist
            clone.g_cost = vertex.g_cost
            clone.h_cost = vertex.h_cost
            clone.f_cost = vertex.f_cost
            if vertex.search_parent is not None:
                clone.search_parent = vmap.get(vertex.search_parent.vertex_id)
        return other

    def __copy__(self) -> 'Graph':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'Graph':
        return self.copy()

    @classmethod
    def moved_from(cls, other: 'Graph') -> 'Graph':
        """Take over the vertex store of ``other``, leaving it empty."""
        graph = cls(other._indexer, other.check_identity_range)
        graph._vertex_map = other._vertex_map
        other._vertex_map = {}
        return graph

    def __repr__(self) -> str:
        return (f"Graph(vertices={self.get_graph_vertex_number()}, "
                f"edges={self.get_graph_edge_number()})")

