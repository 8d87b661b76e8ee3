"""Exception hierarchy for graph-astar."""


class GraphAStarError(Exception):
    """Base class for all errors raised by graph-astar."""
    pass


class IndexerError(GraphAStarError, TypeError):
    """Raised when a state cannot be mapped to a valid 64-bit identity."""
    pass
