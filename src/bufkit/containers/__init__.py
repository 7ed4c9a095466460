"""Bounded and ordered in-memory containers."""

from .bounded import BoundedQueue, DEFAULT_CAPACITY
from .tagged import TaggedFilterStack
from .lazy_sorted import LazySortedQueue
from ._types import Accumulator, Comparator, Predicate

__all__ = [
    "BoundedQueue",
    "DEFAULT_CAPACITY",
    "TaggedFilterStack",
    "LazySortedQueue",
    "Accumulator",
    "Comparator",
    "Predicate",
]
