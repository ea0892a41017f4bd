"""An array of values that can grow and shrink at any position."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from dsakit.linked_list import _check_index, _Sequence


class DynamicArray(_Sequence):
    """Indexed sequence with insertion and removal at any position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def get(self, index: int) -> Any:
        """Return the value stored at ``index``."""
        _check_index(index, len(self._items), self)
        return self._items[index]

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        _check_index(index, len(self._items) + 1, self)
        self._items.insert(index, value)

    def find(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the array") from None

    def remove(self, index: int) -> None:
        """Drop the element at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(map(str, self._items)) + "]"