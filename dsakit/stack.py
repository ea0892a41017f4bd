"""A last-in, first-out stack built on singly linked nodes."""

from __future__ import annotations

from typing import Any, Iterator

from dsakit.linked_list import LinkedList, _Adapter


class Stack(_Adapter):
    """LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        super().__init__(LinkedList())

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return super().is_empty()

    def top(self) -> Any:
        """Return the value on top of the stack."""
        return self._peek("top")

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.insert_head(value)

    def pop(self) -> None:
        """Drop the top value; does nothing on an empty stack."""
        self._items.remove_head()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __str__(self) -> str:
        return super().__str__()