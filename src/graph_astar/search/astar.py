"""A* search over a :class:`~graph_astar.graph.graph.Graph`.

Two modes are supported:

* batch (:meth:`AStarSearcher.search`): the graph is fully built before the
  search starts;
* incremental (:meth:`AStarSearcher.inc_search`): the caller supplies a
  neighbour function and the graph is grown one expansion at a time, so a
  state's successors are only enumerated once the frontier reaches it.

Each vertex moves through ``unseen -> frontier -> expanded`` and never goes
back. The open list never updates entries in place (unless the dynamic queue
is configured). Instead an improved vertex is pushed again, and entries whose
vertex is already expanded are skipped when popped.

When priorities tie, pop order follows insertion order (``tie_breaking``
selects FIFO or LIFO), so repeated searches on the same graph are
reproducible.
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from graph_astar.core.indexer import IndexerLike
from graph_astar.graph.graph import Graph
from graph_astar.graph.vertex import Vertex
from graph_astar.search.heuristics import HeuristicFunc, zero_heuristic
from graph_astar.search.priority_queue import (
    DynamicPriorityQueue, PriorityQueue, TIE_BREAKING_MODES
)

logger = logging.getLogger(__name__)

QUEUE_TYPES = ('lazy', 'dynamic')

NeighbourFunc = Callable[[Any], Sequence[Tuple[Any, Any]]]
UpdateCallback = Callable[[str, Dict[str, Any]], None]


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    queue: str = 'lazy'  # 'lazy' (push-only, skip stale) or 'dynamic' (decrease-key)
    tie_breaking: str = 'fifo'  # Pop order among equal priorities
    log_path_summary: bool = True  # Log start/goal ids, length and cost of found paths
    zero: Any = 0  # Additive identity of the cost type

    def __post_init__(self):
        if self.queue not in QUEUE_TYPES:
            raise ValueError(f"queue must be one of {QUEUE_TYPES}, got {self.queue!r}")
        if self.tie_breaking not in TIE_BREAKING_MODES:
            raise ValueError(f"tie_breaking must be one of {TIE_BREAKING_MODES}, got {self.tie_breaking!r}")

    @classmethod
    def from_config(cls, cfg: Any) -> 'SearchConfig':
        """Build from the ``search`` section of a loaded configuration."""
        if cfg is None:
            return cls()
        return cls(
            queue=str(cfg.get('queue', 'lazy')),
            tie_breaking=str(cfg.get('tie_breaking', 'fifo')),
            log_path_summary=bool(cfg.get('log_path_summary', True)),
            zero=cfg.get('zero', 0),
        )


@dataclass
class SearchStatistics:
    """Counters collected during one search."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_entries_skipped: int = 0
    heuristic_computations: int = 0
    neighbour_calls: int = 0
    max_openlist_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_entries_skipped': self.stale_entries_skipped,
            'heuristic_computations': self.heuristic_computations,
            'neighbour_calls': self.neighbour_calls,
            'max_openlist_size': self.max_openlist_size
        }


@dataclass
class SearchResult:
    """Result from A* search."""
    success: bool
    path: List[Any] = field(default_factory=list)  # States from start to goal
    path_ids: List[int] = field(default_factory=list)
    cost: Any = None  # g-cost of the goal, None when no path exists
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_entries_skipped: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"
    graph: Optional[Graph] = field(default=None, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'path_ids': list(self.path_ids),
            'cost': self.cost,
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_entries_skipped': self.stale_entries_skipped,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason
        }


def reconstruct_path(start_vtx: Vertex, goal_vtx: Vertex) -> List[Vertex]:
    """Follow ``search_parent`` links from goal back to start.

    Returns:
        Vertices ordered from start to goal, both inclusive
    """
    path = []
    waypoint = goal_vtx
    while waypoint is not start_vtx:
        path.append(waypoint)
        waypoint = waypoint.search_parent
        if waypoint is None:
            raise RuntimeError(
                f"Parent chain from vertex {goal_vtx.vertex_id} does not reach start vertex {start_vtx.vertex_id}"
            )
    path.append(start_vtx)
    path.reverse()
    return path


class AStarSearcher:
    """A* search in batch and incremental modes."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

    def _create_openlist(self):
        if self.config.queue == 'dynamic':
            return DynamicPriorityQueue(self.config.tie_breaking, key=lambda v: v.vertex_id)
        return PriorityQueue(self.config.tie_breaking)

    def search(self, graph: Graph, start: Any, goal: Any,
               heuristic: HeuristicFunc = zero_heuristic,
               update_callback: Optional[UpdateCallback] = None) -> SearchResult:
        """Search a fully built graph.

        Args:
            graph: Graph to search; its search info is reset first
            start: Id or state of the start vertex
            goal: Id or state of the goal vertex
            heuristic: ``h(state, goal_state)``
            update_callback: Optional ``callback(event, payload)`` observer

        Returns:
            SearchResult; unknown endpoints give an unsuccessful result
        """
        start_time = time.perf_counter()
        self.statistics = SearchStatistics()

        # reset last search information
        graph.reset_graph_vertices()

        start_vtx = graph.find_vertex(start)
        goal_vtx = graph.find_vertex(goal)

        if start_vtx is None or goal_vtx is None:
            logger.info(f"Start {start!r} or goal {goal!r} not found in graph")
            return SearchResult(
                success=False,
                computation_time=time.perf_counter() - start_time,
                termination_reason="unknown_endpoint",
                graph=graph
            )

        return self._perform_search(graph, start_vtx, goal_vtx, heuristic,
                                    None, update_callback, start_time)

    def inc_search(self, start_state: Any, goal_state: Any,
                   get_neighbours: NeighbourFunc,
                   heuristic: HeuristicFunc = zero_heuristic,
                   indexer: Optional[IndexerLike] = None,
                   update_callback: Optional[UpdateCallback] = None) -> SearchResult:
        """Search while discovering the graph lazily.

        Args:
            start_state: Start state
            goal_state: Goal state
            get_neighbours: ``neighbours(state) -> [(state, cost), ...]``,
                called once for each expanded state
            heuristic: ``h(state, goal_state)``
            indexer: State indexer for the graph built during the search
            update_callback: Optional ``callback(event, payload)`` observer

        Returns:
            SearchResult whose ``graph`` holds every vertex and edge discovered
        """
        start_time = time.perf_counter()
        self.statistics = SearchStatistics()

        # create a new graph with only start and goal vertices
        graph = Graph(indexer)
        start_vtx = graph.add_vertex(start_state)
        goal_vtx = graph.add_vertex(goal_state)

        def expand(vertex: Vertex) -> None:
            self.statistics.neighbour_calls += 1
            for neighbour, cost in get_neighbours(vertex.state):
                if graph.get_state_index(neighbour) == vertex.vertex_id:
                    logger.debug(f"Ignoring self-loop on vertex {vertex.vertex_id}")
                    continue
                graph.add_edge(vertex.state, neighbour, cost)

        return self._perform_search(graph, start_vtx, goal_vtx, heuristic,
                                    expand, update_callback, start_time)

    def _perform_search(self, graph: Graph, start_vtx: Vertex, goal_vtx: Vertex,
                        heuristic: HeuristicFunc,
                        expand: Optional[Callable[[Vertex], None]],
                        update_callback: Optional[UpdateCallback],
                        start_time: float) -> SearchResult:
        stats = self.statistics
        zero = self.config.zero

        # open list - vertices that need to be checked out
        openlist = self._create_openlist()

        # begin with start vertex
        openlist.put(start_vtx, zero)
        start_vtx.is_in_openlist = True
        start_vtx.g_cost = zero
        stats.nodes_generated = 1

        found_path = False
        while not openlist.empty():
            stats.max_openlist_size = max(stats.max_openlist_size, len(openlist))
            current_vertex = openlist.get()
            if current_vertex.is_checked:
                stats.stale_entries_skipped += 1
                continue
            if current_vertex is goal_vtx:
                found_path = True
                break

            current_vertex.is_in_openlist = False
            current_vertex.is_checked = True
            stats.nodes_expanded += 1

            if expand is not None:
                expand(current_vertex)

            logger.debug(f"Expanding vertex {current_vertex.vertex_id} "
                         f"(g={current_vertex.g_cost}, edges={len(current_vertex.edges_to)})")
            self._notify(update_callback, 'vertex_expanded', {
                'vertex_id': current_vertex.vertex_id,
                'state': current_vertex.state,
                'g_cost': current_vertex.g_cost,
                'f_cost': current_vertex.f_cost
            })

            # check all adjacent vertices (successors of current vertex)
            for edge in current_vertex.edges_to:
                successor = edge.dst

                # skip vertices already in the closed list
                if successor.is_checked:
                    continue

                new_cost = current_vertex.g_cost + edge.cost

                # not on the frontier yet, or reached more cheaply now
                if not successor.is_in_openlist or new_cost < successor.g_cost:
                    successor.search_parent = current_vertex
                    successor.g_cost = new_cost
                    successor.h_cost = heuristic(successor.state, goal_vtx.state)
                    successor.f_cost = successor.g_cost + successor.h_cost
                    stats.heuristic_computations += 1

                    openlist.put(successor, successor.f_cost)
                    successor.is_in_openlist = True
                    stats.nodes_generated += 1

        computation_time = time.perf_counter() - start_time

        if not found_path:
            logger.info("failed to find a path")
            self._notify(update_callback, 'search_exhausted', stats.to_dict())
            return SearchResult(
                success=False,
                nodes_expanded=stats.nodes_expanded,
                nodes_generated=stats.nodes_generated,
                stale_entries_skipped=stats.stale_entries_skipped,
                computation_time=computation_time,
                termination_reason="search_exhausted",
                graph=graph
            )

        path_vtx = reconstruct_path(start_vtx, goal_vtx)
        result = SearchResult(
            success=True,
            path=[vertex.state for vertex in path_vtx],
            path_ids=[vertex.vertex_id for vertex in path_vtx],
            cost=goal_vtx.g_cost,
            nodes_expanded=stats.nodes_expanded,
            nodes_generated=stats.nodes_generated,
            stale_entries_skipped=stats.stale_entries_skipped,
            computation_time=computation_time,
            termination_reason="goal_reached",
            graph=graph
        )

        logger.info(f"path found with cost {result.cost}")
        if self.config.log_path_summary:
            logger.info(f"starting vertex id: {start_vtx.vertex_id}, "
                        f"finishing vertex id: {goal_vtx.vertex_id}, "
                        f"path length: {len(path_vtx)}, total cost: {result.cost}")
        self._notify(update_callback, 'path_found', result.to_dict())
        return result

    @staticmethod
    def _notify(update_callback: Optional[UpdateCallback], event: str, payload: Dict[str, Any]) -> None:
        if update_callback is None:
            return
        try:
            update_callback(event, payload)
        except Exception as e:
            logger.warning(f"Failed to execute update_callback for '{event}': {e}")

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the last search."""
        return {
            **self.statistics.to_dict(),
            'config': {
                'queue': self.config.queue,
                'tie_breaking': self.config.tie_breaking
            }
        }


def search(graph: Graph, start: Any, goal: Any,
           heuristic: HeuristicFunc = zero_heuristic,
           config: Optional[SearchConfig] = None) -> List[Any]:
    """Batch A* returning the path as a list of states (empty if none)."""
    return AStarSearcher(config).search(graph, start, goal, heuristic).path


def inc_search(start_state: Any, goal_state: Any,
               get_neighbours: NeighbourFunc,
               heuristic: HeuristicFunc = zero_heuristic,
               indexer: Optional[IndexerLike] = None,
               config: Optional[SearchConfig] = None) -> List[Any]:
    """Incremental A* returning the path as a list of states (empty if none)."""
    return AStarSearcher(config).inc_search(
        start_state, goal_state, get_neighbours, heuristic, indexer
    ).path


def create_astar_searcher(queue: Optional[str] = None,
                          tie_breaking: Optional[str] = None,
                          log_path_summary: Optional[bool] = None) -> AStarSearcher:
    """Factory function to create an A* searcher.

    Arguments left as None are taken from the loaded global configuration
    (``search.*``), falling back to the :class:`SearchConfig` defaults.

    Returns:
        Configured AStarSearcher instance
    """
    from graph_astar.config import get_config

    cfg = get_config()
    search_cfg = cfg.get('search') if cfg is not None else None
    config = SearchConfig.from_config(search_cfg)

    overrides = {
        "queue": queue,
        "tie_breaking": tie_breaking,
        "log_path_summary": log_path_summary,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    return AStarSearcher(config)
