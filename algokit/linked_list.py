"""Singly linked list supporting concatenation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list built from an iterable of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def concatenate(self, other: "LinkedList") -> None:
        """Link the nodes of ``other`` onto the end of this list, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if self._head is None:
            self._head = other._head
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = other._head
        other._head = None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)