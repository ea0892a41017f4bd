"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from dsakit.linked_list import LinkedList, _chain_str, _check_index
from dsakit.nodes import DoublyNode


class DoublyLinkedList(LinkedList):
    """Doubly linked list with insertion and removal at any position."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        if values is None:
            super().__init__()
        else:
            super().__init__(values)

    def _node_at(self, index: int) -> Any:
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def get(self, index: int) -> Any:
        """Return the value stored at ``index``."""
        return super().get(index)

    def find(self, value: Any) -> Any:
        """Return the position of the first occurrence of ``value``."""
        return super().find(value)

    def insert_head(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        node = DoublyNode(value, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_tail(self, value: Any) -> None:
        """Put ``value`` at the end of the list."""
        if self._size == 0:
            self.insert_head(value)
            return
        node = DoublyNode(value, prev=self._tail)
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
            next_node = prev_node.next
            node = DoublyNode(value, next_node, prev_node)
            prev_node.next = node
            next_node.prev = node
            self._size += 1

    def remove_head(self) -> None:
        """Drop the first node; does nothing on an empty list."""
        if self._size == 0:
            return
        self._head = self._head.next
        self._size -= 1
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None

    def remove_tail(self) -> None:
        """Drop the last node; does nothing on an empty list."""
        if self._size <= 1:
            self.remove_head()
            return
        self._tail = self._tail.prev
        self._tail.next = None
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
            node = self._node_at(index)
            node.prev.next = node.next
            node.next.prev = node.prev
            self._size -= 1

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return "h:" + _chain_str(self._head) + ":t"