"""Simple in-place comparison sorts."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    unsorted = len(items)
    swapped = True
    while swapped:
        swapped = False
        for i in range(unsorted - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        unsorted -= 1


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by moving each minimum to the front."""
    size = len(items)
    for i in range(size - 1):
        min_index = min(range(i, size), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each value into the sorted prefix."""
    for i in range(1, len(items)):
        ref_value = items[i]
        j = i - 1
        while j >= 0 and items[j] > ref_value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = ref_value