"""A first-in, first-out queue built on singly linked nodes."""

from __future__ import annotations

from typing import Any, Iterator

from dsakit.linked_list import LinkedList, _Adapter


class Queue(_Adapter):
    """FIFO queue; iteration runs from front to back."""

    def __init__(self) -> None:
        super().__init__(LinkedList())

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return super().is_empty()

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        return self._peek("front")

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        return self._peek("back")

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.insert_tail(value)

    def dequeue(self) -> None:
        """Drop the front value; does nothing on an empty queue."""
        self._items.remove_head()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __str__(self) -> str:
        return super().__str__()