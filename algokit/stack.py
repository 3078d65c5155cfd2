"""A bounded stack and next-greater-element queries built on stacks."""

from __future__ import annotations

from typing import Any, Sequence


class BoundedStack:
    """A LIFO stack that holds at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, num: Any) -> None:
        """Push ``num``; raise OverflowError when the stack is full."""
        if len(self._items) == self._size:
            raise OverflowError("stack overflow")
        self._items.append(num)

    def pop(self) -> Any:
        """Pop and return the top item; raise IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()


def _next_greater(values: Sequence[int]) -> list[int]:
    stack: list[int] = []
    result = []
    for value in values:
        while stack and stack[-1] <= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    return result


def next_greater_to_right(values: Sequence[int]) -> list[int]:
    """For each value, the first larger value to its right, or -1."""
    return _next_greater(values[::-1])[::-1]


def next_greater_to_left(values: Sequence[int]) -> list[int]:
    """For each value, the nearest larger value to its left, or -1."""
    return _next_greater(values)