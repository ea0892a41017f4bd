"""A double-ended queue built on doubly linked nodes."""

from __future__ import annotations

from typing import Any, Iterator

from dsakit.doubly_linked_list import DoublyLinkedList
from dsakit.linked_list import _Adapter


class Deque(_Adapter):
    """Queue that accepts and releases values at both ends."""

    def __init__(self) -> None:
        super().__init__(DoublyLinkedList())

    def is_empty(self) -> bool:
        """Return True when the deque holds nothing."""
        return super().is_empty()

    def front(self) -> Any:
        """Return the value at the front."""
        return self._peek("front")

    def back(self) -> Any:
        """Return the value at the back."""
        return self._peek("back")

    def enqueue_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._items.insert_head(value)

    def enqueue_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.insert_tail(value)

    def dequeue_front(self) -> None:
        """Drop the front value; does nothing on an empty deque."""
        self._items.remove_head()

    def dequeue_back(self) -> None:
        """Drop the back value; does nothing on an empty deque."""
        self._items.remove_tail()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __str__(self) -> str:
        return super().__str__()