import collections

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.deque import Deque


def _sample_deque():
    deque = Deque()
    deque.enqueue_front(26)
    deque.enqueue_back(78)
    deque.enqueue_back(44)
    deque.enqueue_front(91)
    deque.enqueue_front(35)
    deque.enqueue_back(12)
    return deque


def test_str_of_sample_deque():
    assert str(_sample_deque()) == "35 <-> 91 <-> 26 <-> 78 <-> 44 <-> 12"


def test_sample_deque_order():
    assert list(_sample_deque()) == [35, 91, 26, 78, 44, 12]


def test_draining_from_back_reverses_order():
    deque = _sample_deque()
    forward = list(deque)
    drained = []
    while not deque.is_empty():
        drained.append(deque.back())
        deque.dequeue_back()
    assert drained == forward[::-1]
    assert len(deque) == 0


def test_empty_deque_access_raises():
    deque = Deque()
    with pytest.raises(IndexError):
        deque.front()
    with pytest.raises(IndexError):
        deque.back()


def test_dequeue_on_empty_is_ignored():
    deque = Deque()
    deque.dequeue_front()
    deque.dequeue_back()
    assert len(deque) == 0
    deque.enqueue_back(3)
    assert deque.front() == 3
    assert deque.back() == 3


_operations = st.lists(
    st.one_of(
        st.tuples(st.just("enqueue_front"), st.integers()),
        st.tuples(st.just("enqueue_back"), st.integers()),
        st.tuples(st.just("dequeue_front"), st.none()),
        st.tuples(st.just("dequeue_back"), st.none()),
    )
)


@given(_operations)
def test_matches_reference_deque(operations):
    deque = Deque()
    model = collections.deque()
    for name, value in operations:
        if name == "enqueue_front":
            deque.enqueue_front(value)
            model.appendleft(value)
        elif name == "enqueue_back":
            deque.enqueue_back(value)
            model.append(value)
        elif name == "dequeue_front":
            deque.dequeue_front()
            if model:
                model.popleft()
        else:
            deque.dequeue_back()
            if model:
                model.pop()
        assert list(deque) == list(model)
        assert len(deque) == len(model)
        if model:
            assert deque.front() == model[0]
            assert deque.back() == model[-1]