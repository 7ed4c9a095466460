"""Small sequence and comparison helpers used by the containers and the CLI."""

from __future__ import annotations

import copy
from typing import Any, Hashable, Iterable, List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def get_default(default: Optional[T] = None) -> Optional[T]:
    """Return the canonical "no value" result, ``None`` unless overridden."""
    return default


def first_or_default(seq: Sequence[T], default: T) -> T:
    if not seq:
        return default
    return seq[0]


def last_or_default(seq: Sequence[T], default: T) -> T:
    if not seq:
        return default
    return seq[-1]


def ascending(a: Any, b: Any) -> int:
    """Three-way comparison for any pair of mutually ordered values."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def descending(a: Any, b: Any) -> int:
    return ascending(b, a)


def float_sort_func(a: float, b: float) -> int:
    """Three-way float comparison that sorts NaN after every number.

    Two NaNs compare equal so the ordering stays total.  Accepts Python floats
    as well as numpy floating scalars.
    """
    a_nan = bool(np.isnan(a))
    b_nan = bool(np.isnan(b))
    if a_nan and b_nan:
        return 0
    if a_nan:
        return 1
    if b_nan:
        return -1
    return ascending(a, b)


def merge(*seqs: Iterable[T]) -> List[T]:
    """Concatenate ``seqs`` into a new list."""
    out: List[T] = []
    for seq in seqs:
        out.extend(seq)
    return out


def merge_unique(*seqs: Iterable[H]) -> List[H]:
    """Concatenate ``seqs`` keeping only the first occurrence of each value."""
    seen = set()
    out: List[H] = []
    for seq in seqs:
        for value in seq:
            if value not in seen:
                seen.add(value)
                out.append(value)
    return out


def as_ref(value: T) -> T:
    """Return an independent shallow copy of ``value``."""
    return copy.copy(value)


def as_ref_many(values: Iterable[T]) -> List[T]:
    return [as_ref(v) for v in values]
