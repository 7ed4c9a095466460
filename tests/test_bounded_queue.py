import pytest
from prometheus_client import REGISTRY

from bufkit.containers import BoundedQueue, DEFAULT_CAPACITY


def _evictions() -> float:
    return REGISTRY.get_sample_value("bufkit_bounded_queue_evictions_total") or 0.0


def test_default_capacity():
    assert BoundedQueue().capacity == DEFAULT_CAPACITY == 3
    assert BoundedQueue(5).capacity == 5


@pytest.mark.parametrize("capacity", [0, -1])
def test_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        BoundedQueue(capacity)


def test_push_beyond_capacity_keeps_latest():
    q = BoundedQueue(3)
    for i in range(1, 6):
        q.push(i)
    assert q.size() == 3
    assert list(q) == [3, 4, 5]
    assert q.peek() == 3


@pytest.mark.parametrize("capacity,pushes", [(1, 4), (3, 2), (3, 3), (4, 10)])
def test_size_is_min_of_pushes_and_capacity(capacity, pushes):
    q = BoundedQueue(capacity)
    for i in range(pushes):
        q.push(i)
    assert q.size() == min(pushes, capacity)
    assert list(q) == list(range(pushes))[-capacity:]


def test_pop_returns_oldest_then_none():
    q = BoundedQueue(3)
    for s in ("a", "b", "c"):
        q.push(s)
    assert q.pop() == "a"
    assert q.size() == 2
    assert q.peek() == "b"
    assert q.pop() == "b"
    assert q.pop() == "c"
    assert q.pop() is None
    assert q.is_empty()


def test_peek_empty():
    q = BoundedQueue()
    assert q.peek() is None
    assert len(q) == 0


def test_push_stores_copy():
    q = BoundedQueue(2)
    item = [1, 2]
    q.push(item)
    item.append(3)
    assert q.peek() == [1, 2]


def test_eviction_counter():
    before = _evictions()
    q = BoundedQueue(2)
    for i in range(5):
        q.push(i)
    assert _evictions() - before == 3
