"""Heuristic functions for A* search.

A heuristic takes ``(state, goal_state)`` and returns an estimate of the
remaining cost. For A* to return optimal paths it must be admissible (never
overestimate) and consistent (``h(u) <= cost(u, v) + h(v)``). The engine does
not check either property.

The distance heuristics below work on grid-like states: ``(x, y)`` sequences
or objects exposing ``x`` and ``y`` attributes.
"""

import logging
import math
import time
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)

HeuristicFunc = Callable[[Any, Any], Any]

SQRT2_MINUS_ONE = math.sqrt(2.0) - 1.0


def _coords(state: Any) -> Tuple[float, float]:
    if isinstance(state, (tuple, list)):
        return state[0], state[1]
    try:
        return state.x, state.y
    except AttributeError:
        raise TypeError(
            f"Grid heuristics need (x, y) sequences or objects with x/y, got {type(state).__name__}"
        ) from None


def zero_heuristic(state: Any, goal: Any) -> int:
    """Always 0. A* with this heuristic behaves like Dijkstra's algorithm."""
    return 0


def manhattan_distance(state: Any, goal: Any) -> float:
    """L1 distance, admissible for 4-connected unit-cost grids."""
    x1, y1 = _coords(state)
    x2, y2 = _coords(goal)
    return abs(x1 - x2) + abs(y1 - y2)


def euclidean_distance(state: Any, goal: Any) -> float:
    """Straight-line distance, admissible whenever edge cost >= Euclidean length."""
    x1, y1 = _coords(state)
    x2, y2 = _coords(goal)
    return math.hypot(x1 - x2, y1 - y2)


def chebyshev_distance(state: Any, goal: Any) -> float:
    """L-infinity distance, admissible for 8-connected grids with unit diagonal cost."""
    x1, y1 = _coords(state)
    x2, y2 = _coords(goal)
    return max(abs(x1 - x2), abs(y1 - y2))


def octile_distance(state: Any, goal: Any) -> float:
    """Exact distance on an empty 8-connected grid with sqrt(2) diagonal cost."""
    x1, y1 = _coords(state)
    x2, y2 = _coords(goal)
    dx, dy = abs(x1 - x2), abs(y1 - y2)
    return max(dx, dy) + SQRT2_MINUS_ONE * min(dx, dy)


HEURISTICS: Dict[str, HeuristicFunc] = {
    'zero': zero_heuristic,
    'manhattan': manhattan_distance,
    'euclidean': euclidean_distance,
    'chebyshev': chebyshev_distance,
    'octile': octile_distance,
}


def get_heuristic(name: str) -> HeuristicFunc:
    """Look up a heuristic by name.

    Raises:
        KeyError: If no heuristic has that name
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise KeyError(f"Unknown heuristic '{name}', expected one of {sorted(HEURISTICS)}") from None


class CountingHeuristic:
    """Wraps a heuristic and records how often and how long it ran."""

    def __init__(self, func: HeuristicFunc, name: str = None):
        self.func = func
        self.name = name or getattr(func, '__name__', 'heuristic')
        self.computation_count = 0
        self.total_computation_time = 0.0

    def __call__(self, state: Any, goal: Any) -> Any:
        start_time = time.perf_counter()
        value = self.func(state, goal)
        self.computation_count += 1
        self.total_computation_time += time.perf_counter() - start_time
        return value

    def get_stats(self) -> Dict[str, Any]:
        """Get computation statistics."""
        avg_time = (self.total_computation_time / self.computation_count
                    if self.computation_count > 0 else 0.0)

        return {
            'name': self.name,
            'computation_count': self.computation_count,
            'total_time': self.total_computation_time,
            'average_time': avg_time,
            'average_time_us': avg_time * 1000000
        }
