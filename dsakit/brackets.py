"""Checking that brackets in an expression are balanced."""

from __future__ import annotations

from dsakit.stack import Stack

_OPENERS = {"}": "{", "]": "[", ")": "("}


def is_valid(expression: str) -> bool:
    """Return True when every ``{[(`` in ``expression`` is closed in order."""
    pending = Stack()
    for char in expression:
        if char in "{[(":
            pending.push(char)
        elif char in _OPENERS:
            if pending.is_empty() or pending.top() != _OPENERS[char]:
                return False
            pending.pop()
    return pending.is_empty()