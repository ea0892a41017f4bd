"""A singly linked list that tracks its head, tail and size."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, Optional

from dsakit.nodes import Node


def _check_index(index: int, upper: int, owner: object) -> None:
    """Raise IndexError unless ``0 <= index < upper``."""
    if not 0 <= index < upper:
        raise IndexError(f"{type(owner).__name__} index out of range")


def _walk(head: Optional[Any]) -> Iterator[Any]:
    """Yield every node reachable from ``head`` through ``next`` links."""
    node = head
    while node is not None:
        yield node
        node = node.next


def _chain_str(head: Optional[Any]) -> str:
    """Join the text of every node from ``head`` onwards."""
    return "".join(str(node) for node in _walk(head))


class _Sequence:
    """Shared representation for the package's containers."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"  # type: ignore[call-overload]


class LinkedList(_Sequence):
    """Singly linked list with insertion and removal at any position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Any] = None
        self._tail: Optional[Any] = None
        self._size = 0
        for value in values:
            self.insert_tail(value)

    def _node_at(self, index: int) -> Any:
        return next(islice(_walk(self._head), index, None))

    def is_empty(self) -> bool:
        """Return True when the list holds nothing."""
        return self._size == 0

    def get(self, index: int) -> Any:
        """Return the value stored at ``index``."""
        _check_index(index, self._size, self)
        return self._node_at(index).value

    def insert_head(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        node = Node(value, self._head)
        self._head = node
        if self._size == 0:
            self._tail = node
        self._size += 1

    def insert_tail(self, value: Any) -> None:
        """Put ``value`` at the end of the list."""
        if self._size == 0:
            self.insert_head(value)
            return
        node = Node(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        _check_index(index, self._size + 1, self)
        if index == 0:
            self.insert_head(value)
        elif index == self._size:
            self.insert_tail(value)
        else:
            prev_node = self._node_at(index - 1)
            prev_node.next = Node(value, prev_node.next)
            self._size += 1

    def find(self, value: Any) -> int:
        """Return the index of the first node holding ``value``."""
        for index, item in enumerate(self):
            if item == value:
                return index
        raise ValueError(f"{value!r} is not in the list")

    def remove_head(self) -> None:
        """Drop the first node; does nothing on an empty list."""
        if self._size == 0:
            return
        self._head = self._head.next
        self._size -= 1
        if self._size == 0:
            self._tail = None

    def remove_tail(self) -> None:
        """Drop the last node; does nothing on an empty list."""
        if self._size <= 1:
            self.remove_head()
            return
        prev_node = self._node_at(self._size - 2)
        prev_node.next = None
        self._tail = prev_node
        self._size -= 1

    def remove_at(self, index: int) -> None:
        """Drop the node at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self.remove_head()
        elif index == self._size - 1:
            self.remove_tail()
        else:
            prev_node = self._node_at(index - 1)
            prev_node.next = prev_node.next.next
            self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in _walk(self._head):
            yield node.value

    def __str__(self) -> str:
        return _chain_str(self._head)


class _Adapter(_Sequence):
    """Restricted container that keeps its values in a linked list."""

    def __init__(self, items: LinkedList) -> None:
        self._items = items

    def _peek(self, end: str) -> Any:
        """Return the value at the named end or raise IndexError when empty."""
        node = self._items._tail if end == "back" else self._items._head
        if node is None:
            raise IndexError(f"{end} of an empty {type(self).__name__.lower()}")
        return node.value

    def is_empty(self) -> bool:
        """Return True when the container holds nothing."""
        return self._items.is_empty()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return _chain_str(self._items._head)