import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queue import Queue


def _queue_of(values):
    queue = Queue()
    for value in values:
        queue.enqueue(value)
    return queue


def test_str_of_sample_queue():
    queue = _queue_of([35, 91, 26, 78, 44, 12])
    assert str(queue) == "35 -> 91 -> 26 -> 78 -> 44 -> 12"


def test_draining_yields_enqueue_order():
    values = [35, 91, 26, 78, 44, 12]
    queue = _queue_of(values)
    drained = []
    while not queue.is_empty():
        drained.append(queue.front())
        queue.dequeue()
    assert drained == values


def test_front_and_back():
    queue = _queue_of([35, 91, 26])
    assert queue.front() == 35
    assert queue.back() == 26


def test_empty_queue_access_raises():
    queue = Queue()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.back()


def test_back_raises_after_draining():
    queue = _queue_of([1])
    queue.dequeue()
    assert queue.is_empty() is True
    with pytest.raises(IndexError):
        queue.back()


def test_dequeue_on_empty_is_ignored_and_reuse_works():
    queue = Queue()
    queue.dequeue()
    assert len(queue) == 0
    queue.enqueue(4)
    queue.enqueue(9)
    assert list(queue) == [4, 9]


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=10))
def test_dequeue_drops_from_front(values, drops):
    queue = _queue_of(values)
    for _ in range(drops):
        queue.dequeue()
    remaining = values[drops:]
    assert list(queue) == remaining
    assert len(queue) == len(remaining)