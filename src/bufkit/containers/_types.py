"""Callable shapes accepted by the container constructors."""

from __future__ import annotations

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)
V_co = TypeVar("V_co", covariant=True)
V_contra = TypeVar("V_contra", contravariant=True)


class Comparator(Protocol[T_contra]):
    """Three-way comparison.

    Returns a negative number when ``a`` orders before ``b``, zero when they
    are equivalent and a positive number otherwise.  Implementations must
    describe a total order; containers make no promises when they do not.
    """

    def __call__(self, a: T_contra, b: T_contra) -> int:
        ...


class Accumulator(Protocol[V_co]):
    """Produce the tag attached to a pushed entry."""

    def __call__(self) -> V_co:
        ...


class Predicate(Protocol[V_contra]):
    """Retention test applied to stored tags."""

    def __call__(self, value: V_contra) -> bool:
        ...
