"""Append-only queue with an on-demand sorted view."""

from __future__ import annotations

import copy
import heapq
import time
from functools import cmp_to_key
from typing import Generic, List, Optional, TypeVar

from prometheus_client import Summary

from ..utils.helpers import get_default
from ._types import Comparator

T = TypeVar("T")

sort_latency_us = Summary(
    "bufkit_sorted_view_latency_us", "time to build a sorted view in microseconds"
)


class LazySortedQueue(Generic[T]):
    """Unordered store that sorts only when a sorted view is requested.

    Pushes append to an insertion ordered backing list.  :meth:`sorted`,
    :meth:`get` and :meth:`trim` build a fresh view with ``comparator`` on every
    call; nothing is cached.

    The view is produced by a heap sort and is therefore not stable: entries
    the comparator treats as equal may come back in any relative order.

    ``default`` is returned by clamped lookups that have no element to
    return.
    """

    def __init__(self, comparator: Comparator[T], default: Optional[T] = None) -> None:
        self._key = cmp_to_key(comparator)
        self._default = default
        self._queue: List[T] = []

    def push(self, item: T) -> "LazySortedQueue[T]":
        self._queue.append(copy.copy(item))
        return self

    def raw(self) -> List[T]:
        """Return a copy of the entries in insertion order."""
        return list(self._queue)

    def sorted(self) -> List[T]:
        """Return a copy of the entries ordered by the comparator."""
        start = time.perf_counter()
        # only the key takes part in comparisons; the index is never consulted
        heap = [_HeapItem(self._key(item), i) for i, item in enumerate(self._queue)]
        heapq.heapify(heap)
        out = [self._queue[heapq.heappop(heap).index] for _ in range(len(self._queue))]
        sort_latency_us.observe((time.perf_counter() - start) * 1e6)
        return out

    def get(self, index: int, clamp: bool = True) -> Optional[T]:
        """Return the sorted element at ``index``.

        Non-negative indices count from the smallest element, negative ones
        from the largest (``-1`` is the largest).  With ``clamp`` the index is
        pulled back into range and an empty queue yields the default value.
        Without ``clamp`` an index that falls outside the view raises
        :class:`IndexError`.
        """
        ordered = self.sorted()
        size = len(ordered)
        if index >= 0:
            if clamp:
                index = min(index, size - 1)
            if index >= 0:
                if index >= size:
                    raise IndexError(f"index {index} out of range for {size} elements")
                return ordered[index]
            return get_default(self._default)

        index = size + index
        if clamp:
            index = max(index, 0)
        if index < 0:
            raise IndexError(f"index {index - size} out of range for {size} elements")
        if index < size:
            return ordered[index]
        return get_default(self._default)

    def trim(self, offset: int) -> List[T]:
        """Return the sorted view minus its smallest element and last ``offset``.

        The result is ``sorted()[1:len - offset]``; an empty or inverted window
        gives an empty list.
        """
        if offset < 0:
            raise ValueError("offset must be non-negative")
        ordered = self.sorted()
        stop = len(ordered) - offset
        if stop <= 1:
            return []
        return ordered[1:stop]

    def size(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"LazySortedQueue({self._queue!r})"


class _HeapItem:
    __slots__ = ("key", "index")

    def __init__(self, key, index: int) -> None:
        self.key = key
        self.index = index

    def __lt__(self, other: "_HeapItem") -> bool:
        return self.key < other.key
