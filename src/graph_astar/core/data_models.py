"""Example state types."""

from dataclasses import dataclass
from typing import Tuple

# Bits reserved for each coordinate when packing a grid cell into an identity.
COORD_BITS = 31
COORD_LIMIT = 1 << COORD_BITS


@dataclass(frozen=True)
class GridCell:
    """Cell of a 2D grid, usable directly as a graph state.

    The identity is packed from the coordinates and exposed as ``id_``,
    so the default indexer handles cells without extra configuration.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        """Validate coordinate range."""
        assert 0 <= self.x < COORD_LIMIT, f"x must be in [0, {COORD_LIMIT}), got {self.x}"
        assert 0 <= self.y < COORD_LIMIT, f"y must be in [0, {COORD_LIMIT}), got {self.y}"

    @property
    def id_(self) -> int:
        return (self.y << COORD_BITS) | self.x

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class StateExample:
    """Minimal state carrying only an identity field."""

    id_: int
