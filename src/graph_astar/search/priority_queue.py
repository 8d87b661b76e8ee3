"""Open-list implementations for best-first search.

Two flavours are provided:

* :class:`PriorityQueue` never updates an entry in place. When an item's
  priority improves a second entry is pushed, and the consumer skips the
  stale one when it pops out (A* does this by checking ``is_checked``).
* :class:`DynamicPriorityQueue` keeps exactly one live entry per item and
  supports a true decrease-key through ``put``.

Both order equal priorities by insertion sequence, so pop order is fully
deterministic: first-in-first-out by default, last-in-first-out on request.
"""

import heapq
import itertools
from typing import Any, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar('T')

TIE_BREAKING_MODES = ('fifo', 'lifo')


class PriorityQueue(Generic[T]):
    """Min-priority queue with lazy deletion."""

    def __init__(self, tie_breaking: str = 'fifo'):
        if tie_breaking not in TIE_BREAKING_MODES:
            raise ValueError(f"tie_breaking must be one of {TIE_BREAKING_MODES}, got {tie_breaking!r}")
        self.tie_breaking = tie_breaking
        self._step = 1 if tie_breaking == 'fifo' else -1
        self._counter = itertools.count()
        self.elements: List[Tuple[Any, int, T]] = []

    def empty(self) -> bool:
        return not self.elements

    def size(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def put(self, item: T, priority: Any) -> None:
        heapq.heappush(self.elements, (priority, self._step * next(self._counter), item))

    def get(self) -> T:
        """Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the queue is empty
        """
        return heapq.heappop(self.elements)[2]

    def peek(self) -> T:
        return self.elements[0][2]


class DynamicPriorityQueue(Generic[T]):
    """Min-priority queue supporting priority updates of queued items.

    Items are keyed by ``key(item)`` (the item itself by default). Superseded
    heap entries are marked dead and dropped when they reach the top.
    """

    _REMOVED = object()

    def __init__(self, tie_breaking: str = 'fifo', key=None):
        if tie_breaking not in TIE_BREAKING_MODES:
            raise ValueError(f"tie_breaking must be one of {TIE_BREAKING_MODES}, got {tie_breaking!r}")
        self.tie_breaking = tie_breaking
        self._step = 1 if tie_breaking == 'fifo' else -1
        self._counter = itertools.count()
        self._key = key or (lambda item: item)
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}

    def empty(self) -> bool:
        return not self._entries

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, item: T) -> bool:
        return self._key(item) in self._entries

    __contains__ = contains

    def put(self, item: T, priority: Any) -> None:
        """Insert ``item`` or change the priority of the queued entry."""
        key = self._key(item)
        if key in self._entries:
            self._discard(key)
        entry = [priority, self._step * next(self._counter), item]
        self._entries[key] = entry
        heapq.heappush(self._heap, entry)

    def priority(self, item: T) -> Optional[Any]:
        entry = self._entries.get(self._key(item))
        return entry[0] if entry is not None else None

    def remove(self, item: T) -> bool:
        key = self._key(item)
        if key not in self._entries:
            return False
        self._discard(key)
        return True

    def _discard(self, key: Hashable) -> None:
        entry = self._entries.pop(key)
        entry[2] = self._REMOVED

    def get(self) -> T:
        """Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the queue is empty
        """
        while self._heap:
            priority, _, item = heapq.heappop(self._heap)
            if item is not self._REMOVED:
                del self._entries[self._key(item)]
                return item
        raise IndexError("get from an empty priority queue")
