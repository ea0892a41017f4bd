"""Singly and doubly linked nodes, and a helper that renders a chain of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node holding a value and a link to the next node."""

    value: Any = 0
    next: Optional["Node"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return f"{self.value} -> " if self.next is not None else f"{self.value}"


@dataclass(eq=False)
class DoublyNode:
    """A node holding a value and links to both neighbours."""

    value: Any = 0
    next: Optional["DoublyNode"] = field(default=None, repr=False)
    prev: Optional["DoublyNode"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return f"{self.value} <-> " if self.next is not None else f"{self.value}"


def format_chain(node: Node | DoublyNode | None) -> str:
    """Render the chain starting at ``node`` as ``a -> b -> nullptr``."""
    parts = []
    while node is not None:
        parts.append(f"{node.value} -> ")
        node = node.next
    parts.append("nullptr")
    return "".join(parts)