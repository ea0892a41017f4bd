from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort


def test_sample_array():
    by_bubble = [43, 21, 26, 38, 17, 30]
    by_selection = [43, 21, 26, 38, 17, 30]
    by_insertion = [43, 21, 26, 38, 17, 30]
    bubble_sort(by_bubble)
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_bubble == by_selection == by_insertion == [17, 21, 26, 30, 38, 43]


def test_empty_and_single():
    empty = []
    single = [5]
    bubble_sort(empty)
    selection_sort(empty)
    insertion_sort(empty)
    bubble_sort(single)
    selection_sort(single)
    insertion_sort(single)
    assert empty == []
    assert single == [5]


def test_returns_none_and_sorts_in_place():
    by_bubble = [3, 1, 2]
    by_selection = [2, 3, 1]
    by_insertion = [1, 3, 2]
    assert bubble_sort(by_bubble) is None
    assert selection_sort(by_selection) is None
    assert insertion_sort(by_insertion) is None
    assert by_bubble == by_selection == by_insertion == [1, 2, 3]


@given(values=st.lists(st.integers()))
def test_matches_builtin_sorted(values):
    by_bubble, by_selection, by_insertion = list(values), list(values), list(values)
    bubble_sort(by_bubble)
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_bubble == by_selection == by_insertion == sorted(values)


@given(values=st.lists(st.text(max_size=4)))
def test_sorts_strings(values):
    by_bubble, by_selection, by_insertion = list(values), list(values), list(values)
    bubble_sort(by_bubble)
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_bubble == by_selection == by_insertion == sorted(values)