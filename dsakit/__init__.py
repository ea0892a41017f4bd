"""Linked lists, a dynamic array, stack, queue, deque, bracket matching and simple sorts."""

__version__ = "0.1.0"

__all__ = [
    "nodes",
    "linked_list",
    "doubly_linked_list",
    "dynamic_array",
    "stack",
    "queue",
    "deque",
    "brackets",
    "sorting",
]