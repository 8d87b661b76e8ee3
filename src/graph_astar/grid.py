"""Occupancy grids as lazily expanded search spaces.

An :class:`OccupancyGrid` never builds a graph itself. It supplies the
neighbour function for incremental A*, so only the cells the search actually
reaches get materialized.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from graph_astar.core.data_models import GridCell

logger = logging.getLogger(__name__)

FREE = 0
OCCUPIED = 1

_MOVES_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
_MOVES_8 = _MOVES_4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))


class OccupancyGrid:
    """Binary occupancy grid indexed as ``cells[y, x]``."""

    def __init__(self, cells: np.ndarray, connectivity: int = 4):
        """Initialize grid.

        Args:
            cells: 2D integer array, non-zero marks an obstacle
            connectivity: 4 (unit moves) or 8 (adds sqrt(2) diagonal moves)
        """
        cells = np.asarray(cells, dtype=np.int8)
        if cells.ndim != 2:
            raise ValueError(f"Occupancy grid must be 2D, got shape {cells.shape}")
        if connectivity not in (4, 8):
            raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")
        self.cells = cells
        self.connectivity = connectivity

    @classmethod
    def random(cls, width: int, height: int, obstacle_ratio: float = 0.2,
               seed: Optional[int] = None, connectivity: int = 4,
               keep_free: Iterable[GridCell] = ()) -> 'OccupancyGrid':
        """Generate a random grid.

        Args:
            width: Number of columns
            height: Number of rows
            obstacle_ratio: Probability of each cell being occupied
            seed: Seed for ``numpy.random.default_rng``
            connectivity: 4 or 8
            keep_free: Cells forced to stay free (e.g. start and goal)
        """
        rng = np.random.default_rng(seed)
        cells = (rng.random((height, width)) < obstacle_ratio).astype(np.int8)
        for cell in keep_free:
            cells[cell.y, cell.x] = FREE
        logger.debug(f"Generated {width}x{height} grid with {int(cells.sum())} obstacles")
        return cls(cells, connectivity)

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_free(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[y, x] == FREE

    def neighbours(self, cell: GridCell) -> List[Tuple[GridCell, float]]:
        """Free neighbouring cells with their move cost."""
        moves = _MOVES_8 if self.connectivity == 8 else _MOVES_4
        result = []
        for dx, dy in moves:
            nx, ny = cell.x + dx, cell.y + dy
            if not self.is_free(nx, ny):
                continue
            # no corner cutting past obstacles
            if dx and dy and not (self.is_free(cell.x + dx, cell.y) and self.is_free(cell.x, cell.y + dy)):
                continue
            cost = math.sqrt(2.0) if dx and dy else 1.0
            result.append((GridCell(nx, ny), cost))
        return result

    def render(self, path: Iterable[GridCell] = ()) -> str:
        """Draw the grid as text: ``#`` obstacles, ``*`` path, ``S``/``G`` endpoints."""
        canvas = np.where(self.cells == OCCUPIED, '#', '.').astype('<U1')
        path = list(path)
        for cell in path:
            canvas[cell.y, cell.x] = '*'
        if path:
            canvas[path[0].y, path[0].x] = 'S'
            canvas[path[-1].y, path[-1].x] = 'G'
        return "\n".join("".join(row) for row in canvas)
