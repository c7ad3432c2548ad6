"""A fixed-size linear queue whose slots are not reused once dequeued."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["QueueFullError", "QueueEmptyError", "Queue"]

_DEFAULT_CAPACITY = 10


class QueueFullError(Exception):
    """Raised when enqueuing into a queue whose slots are used up."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class Queue:
    """First-in, first-out queue over a fixed number of slots.

    Each enqueue consumes a slot for good: after ``capacity`` enqueues the
    queue reports full even if elements have since been dequeued.
    """

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, x: int) -> None:
        """Append x at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(x)

    def dequeue(self) -> int:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        """True if no elements are waiting."""
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """True if every slot has been used."""
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"Queue(capacity={self.capacity}, items={list(self)!r})"