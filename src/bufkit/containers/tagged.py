"""Stack whose entries are retained while their push-time tag passes a test.

Every push asks the accumulator for a fresh tag, stores it next to the payload
and then re-filters the whole collection with the predicate.  Tags are never
recomputed, so an entry's fate depends on the tag it received when pushed and
on how the predicate treats that tag at each later push.  The full rescan is
``O(n)`` per push; the predicate is not assumed to be monotonic in the tag, so
no incremental eviction is attempted.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from prometheus_client import Counter

from ._types import Accumulator, Predicate

T = TypeVar("T")
V = TypeVar("V")

logger = logging.getLogger(__name__)

dropped_total = Counter(
    "bufkit_tagged_stack_dropped_total",
    "entries removed from tagged stacks by the retention predicate",
)


@dataclass(frozen=True)
class _Entry(Generic[T, V]):
    tag: V
    payload: T


class TaggedFilterStack(Generic[T, V]):
    """Append/pop stack filtered by a predicate over per-push tags.

    Parameters
    ----------
    accumulator:
        Called exactly once per :meth:`push` to produce the new entry's tag.
        It receives nothing about the payload.
    predicate:
        Retention test over stored tags, applied to every entry after each
        push.
    """

    def __init__(self, accumulator: Accumulator[V], predicate: Predicate[V]) -> None:
        self._accumulator = accumulator
        self._predicate = predicate
        self._entries: List[_Entry[T, V]] = []

    def push(self, item: T) -> int:
        """Tag and append ``item``, re-filter, and return the retained count."""
        self._entries.append(_Entry(self._accumulator(), copy.copy(item)))
        self._apply_filter()
        return len(self._entries)

    def pop(self) -> Optional[T]:
        """Remove and return the most recent payload, ``None`` when empty.

        Popping ignores the predicate.
        """
        if not self._entries:
            return None
        return self._entries.pop().payload

    def data(self) -> List[T]:
        """Return a new list of the retained payloads in push order."""
        return [entry.payload for entry in self._entries]

    def contains(self, item: T) -> bool:
        return any(entry.payload == item for entry in self._entries)

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __contains__(self, item: object) -> bool:
        return any(entry.payload == item for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _apply_filter(self) -> None:
        kept = [entry for entry in self._entries if self._predicate(entry.tag)]
        dropped = len(self._entries) - len(kept)
        if dropped:
            dropped_total.inc(dropped)
            logger.debug("tagged stack dropped %d entries", dropped)
        self._entries = kept
