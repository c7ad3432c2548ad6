"""A stack with an optional capacity limit."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["StackOverflowError", "StackUnderflowError", "Stack"]


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


class Stack:
    """Last-in, first-out stack.

    With a capacity, pushing beyond it raises StackOverflowError; with
    ``capacity=None`` the stack grows without bound.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Place x on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, index: int) -> int:
        """Return the element at 1-based position index counted from the top."""
        if not 1 <= index <= len(self._items):
            raise IndexError(f"invalid index {index}")
        return self._items[-index]

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """True if the stack holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """True if the stack has reached its capacity."""
        return self.capacity is not None and len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity!r}, items={list(self)!r})"