import math

import numpy as np

from bufkit.containers import LazySortedQueue
from bufkit.utils import (
    as_ref,
    as_ref_many,
    ascending,
    descending,
    first_or_default,
    float_sort_func,
    get_default,
    last_or_default,
    merge,
    merge_unique,
)


def test_get_default():
    assert get_default() is None
    assert get_default(0) == 0


def test_first_and_last_or_default():
    assert first_or_default([], 7) == 7
    assert first_or_default([1, 2], 7) == 1
    assert last_or_default([], "x") == "x"
    assert last_or_default([1, 2], 7) == 2


def test_ascending_descending():
    assert ascending(1, 2) == -1
    assert ascending(2, 1) == 1
    assert ascending("a", "a") == 0
    assert descending(1, 2) == 1


def test_float_sort_func_orders_nan_last():
    nan = float("nan")
    assert float_sort_func(nan, nan) == 0
    assert float_sort_func(nan, 1.0) == 1
    assert float_sort_func(1.0, nan) == -1
    assert float_sort_func(1.0, 2.0) == -1
    assert float_sort_func(np.float32(3.0), 2.0) == 1


def test_float_sort_func_in_sorted_queue():
    q = LazySortedQueue(float_sort_func)
    for v in (3.0, float("nan"), 1.0, 2.0):
        q.push(v)
    out = q.sorted()
    assert out[:3] == [1.0, 2.0, 3.0]
    assert math.isnan(out[3])


def test_merge():
    assert merge() == []
    assert merge([1, 2], [], [2, 3]) == [1, 2, 2, 3]


def test_merge_unique_keeps_first_occurrence():
    assert merge_unique([3, 1], [1, 2, 3], [4]) == [3, 1, 2, 4]


def test_as_ref_copies():
    value = [1]
    ref = as_ref(value)
    assert ref == value and ref is not value
    refs = as_ref_many([[1], [2]])
    assert refs == [[1], [2]]
