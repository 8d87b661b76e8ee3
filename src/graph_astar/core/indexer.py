"""State indexers.

An indexer maps a caller-defined state to a stable 64-bit integer identity.
Graph containers key vertices exclusively on that identity, so states never
need to be hashable or comparable themselves.
"""

import logging
import numbers
import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from .exceptions import IndexerError

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Attributes consulted by DefaultIndexer, in order.
DEFAULT_ID_ATTRIBUTES = ('id_', 'id')


def is_integral(value: Any) -> bool:
    """True for any integer type (numpy included) except ``bool``."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_identity(identity: Any, state: Any = None) -> int:
    """Ensure an identity is an integer that fits in a signed 64-bit slot.

    Args:
        identity: Value produced by an indexer
        state: State the identity was derived from (used in error messages)

    Returns:
        The identity as a plain ``int``

    Raises:
        IndexerError: If the identity is not an integer or is out of range
    """
    if not is_integral(identity):
        raise IndexerError(
            f"Indexer must return an int identity, got {type(identity).__name__} for state {state!r}"
        )
    identity = operator.index(identity)
    if identity < INT64_MIN or identity > INT64_MAX:
        raise IndexerError(f"Identity {identity} for state {state!r} does not fit in 64 bits")
    return identity


class StateIndexer(ABC):
    """Maps a state to its identity."""

    @abstractmethod
    def __call__(self, state: Any) -> int:
        """Return the identity of ``state``."""


class DefaultIndexer(StateIndexer):
    """Identity by value for integral states, by ``id_``/``id`` field otherwise."""

    def __call__(self, state: Any) -> int:
        if is_integral(state):
            return operator.index(state)
        for name in DEFAULT_ID_ATTRIBUTES:
            if hasattr(state, name):
                return getattr(state, name)
        raise IndexerError(
            f"State of type {type(state).__name__} is neither integral nor exposes "
            f"one of {DEFAULT_ID_ATTRIBUTES}; supply a custom indexer"
        )

    def __repr__(self) -> str:
        return "DefaultIndexer()"


class AttributeIndexer(StateIndexer):
    """Reads the identity from a named attribute of the state."""

    def __init__(self, attribute: str):
        self.attribute = attribute

    def __call__(self, state: Any) -> int:
        try:
            return getattr(state, self.attribute)
        except AttributeError:
            raise IndexerError(
                f"State of type {type(state).__name__} has no attribute '{self.attribute}'"
            ) from None

    def __repr__(self) -> str:
        return f"AttributeIndexer({self.attribute!r})"


IndexerLike = Union[StateIndexer, Callable[[Any], int]]


def resolve_indexer(indexer: Optional[IndexerLike]) -> IndexerLike:
    """Validate an indexer argument, falling back to :class:`DefaultIndexer`.

    Raises:
        IndexerError: If ``indexer`` is not callable
    """
    if indexer is None:
        return DefaultIndexer()
    if not callable(indexer):
        raise IndexerError(f"Indexer must be callable, got {type(indexer).__name__}")
    return indexer
