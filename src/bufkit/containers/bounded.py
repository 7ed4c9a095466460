"""Fixed capacity FIFO queue.

Entries are kept oldest first.  Once the queue holds ``capacity`` entries the
oldest one is dropped before a new entry is appended, so the queue always
reflects the most recent pushes.

.. note:: Not thread-safe; callers sharing a queue across threads must
   provide their own locking.
"""

from __future__ import annotations

import copy
import logging
from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

from prometheus_client import Counter

T = TypeVar("T")

DEFAULT_CAPACITY = 3

logger = logging.getLogger(__name__)

evictions_total = Counter(
    "bufkit_bounded_queue_evictions_total",
    "entries dropped from bounded queues to make room for new pushes",
)


class BoundedQueue(Generic[T]):
    """Capacity bounded FIFO that evicts its oldest entry when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._items: Deque[T] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen  # type: ignore[return-value]

    def push(self, item: T) -> None:
        """Store a copy of ``item``, evicting the oldest entry when full."""
        if len(self._items) == self.capacity:
            dropped = self._items.popleft()
            evictions_total.inc()
            logger.debug("bounded queue full; evicted %r", dropped)
        self._items.append(copy.copy(item))

    def pop(self) -> Optional[T]:
        """Remove and return the oldest entry, ``None`` when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        """Return the oldest entry without removing it, ``None`` when empty."""
        if not self._items:
            return None
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self._items)!r})"
