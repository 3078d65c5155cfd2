"""In-order threaded binary search tree with stack-free traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    has_left: bool = False
    has_right: bool = False


class ThreadedBinaryTree:
    """A binary search tree whose empty child links thread to in-order neighbours.

    A missing left child points at the in-order predecessor and a missing
    right child at the in-order successor; the outermost threads point at
    a header node, so both traversals run without a stack or recursion.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        head = _Node(None, has_right=True)
        head.left = head
        head.right = head
        self._head = head
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False and leave the tree unchanged if it is a duplicate."""
        head = self._head
        node = _Node(value)
        if head.left is head:
            node.left = head
            node.right = head
            head.left = node
            head.has_left = True
            return True
        current = head.left
        while True:
            if value < current.data:
                if not current.has_left:
                    node.left = current.left
                    node.right = current
                    current.left = node
                    current.has_left = True
                    return True
                current = current.left
            elif value > current.data:
                if not current.has_right:
                    node.right = current.right
                    node.left = current
                    current.right = node
                    current.has_right = True
                    return True
                current = current.right
            else:
                return False

    def _successor(self, node: _Node) -> _Node:
        if not node.has_right:
            return node.right
        node = node.right
        while node.has_left:
            node = node.left
        return node

    def inorder(self) -> list:
        """Return the values in ascending order by following successor threads."""
        head = self._head
        node = head.left
        if node is head:
            return []
        while node.has_left:
            node = node.left
        result = []
        while node is not head:
            result.append(node.data)
            node = self._successor(node)
        return result

    def preorder(self) -> list:
        """Return the values in pre-order by following the threads."""
        head = self._head
        node = head.left
        result = []
        while node is not head:
            result.append(node.data)
            if node.has_left:
                node = node.left
            else:
                while not node.has_right:
                    node = node.right
                node = node.right
        return result