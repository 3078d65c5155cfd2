"""Fixed-capacity FIFO queue backed by a ring buffer."""

from __future__ import annotations

from typing import Any, Iterator


class CircularQueue:
    """A queue holding at most ``size`` items in a circular array."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._items: list[Any] = [None] * size
        self._front = -1
        self._rear = -1

    def __len__(self) -> int:
        if self._front == -1:
            return 0
        return (self._rear - self._front) % self._size + 1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowError when the queue is full."""
        if (self._rear + 1) % self._size == self._front:
            raise OverflowError("queue is full")
        if self._rear == -1:
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self._size
        self._items[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when the queue is empty."""
        if self._front == -1:
            raise IndexError("dequeue from an empty queue")
        value = self._items[self._front]
        self._items[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self._size
        return value

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._items[(self._front + offset) % self._size]