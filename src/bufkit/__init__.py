"""Bounded and ordered in-memory container primitives."""

from .containers import BoundedQueue, TaggedFilterStack, LazySortedQueue

__all__ = [
    "BoundedQueue",
    "TaggedFilterStack",
    "LazySortedQueue",
]
