"""Binary trees: traversals, height, and a binary search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

NULL_MARKER = -1
"""Marks an empty subtree in the sequences read by :func:`build_from_preorder`."""


@dataclass
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder(node: Optional[TreeNode]) -> list:
    """Return the values of the tree in pre-order (node, left, right)."""
    result = []
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def inorder(node: Optional[TreeNode]) -> list:
    """Return the values of the tree in in-order (left, node, right)."""
    result = []
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(node: Optional[TreeNode]) -> list:
    """Return the values of the tree in post-order (left, right, node)."""
    result = []
    stack: list[tuple[TreeNode, bool]] = []

    def descend(current: Optional[TreeNode]) -> None:
        while current is not None:
            stack.append((current, False))
            current = current.left

    descend(node)
    while stack:
        current, right_done = stack[-1]
        if right_done:
            stack.pop()
            result.append(current.data)
        else:
            stack[-1] = (current, True)
            descend(current.right)
    return result


def _levels(node: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [node] if node is not None else []
    while level:
        yield level
        level = [
            child
            for parent in level
            for child in (parent.left, parent.right)
            if child is not None
        ]


def level_order(node: Optional[TreeNode]) -> list[list]:
    """Return the values of the tree level by level, each level left to right."""
    return [[n.data for n in level] for level in _levels(node)]


def build_from_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from its pre-order values, with -1 marking an empty subtree."""
    it = iter(values)

    def take() -> Optional[TreeNode]:
        try:
            value = next(it)
        except StopIteration:
            raise ValueError("pre-order sequence ended early") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = take()
        node.right = take()
        return node

    return take()


def tree_height(node: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path (0 when empty)."""
    return sum(1 for _ in _levels(node))


def _copy(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    return TreeNode(node.data, _copy(node.left), _copy(node.right))


class BinarySearchTree:
    """A binary search tree of distinct values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False and leave the tree unchanged if it is a duplicate."""
        new = TreeNode(value)
        if self.root is None:
            self.root = new
            return True
        node = self.root
        while True:
            if value > node.data:
                if node.right is None:
                    node.right = new
                    return True
                node = node.right
            elif value < node.data:
                if node.left is None:
                    node.left = new
                    return True
                node = node.left
            else:
                return False

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.data:
                return True
            node = node.right if value > node.data else node.left
        return False

    def delete(self, value: Any) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        if value not in self:
            raise KeyError(value)
        self.root = self._delete(self.root, value)

    def _delete(self, node: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
        if node is None:
            return None
        if value < node.data:
            node.left = self._delete(node.left, value)
            return node
        if value > node.data:
            node.right = self._delete(node.right, value)
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = self._delete(node.right, successor.data)
        return node

    def preorder(self) -> list:
        """Return the values in pre-order."""
        return preorder(self.root)

    def inorder(self) -> list:
        """Return the values in in-order."""
        return inorder(self.root)

    def postorder(self) -> list:
        """Return the values in post-order."""
        return postorder(self.root)

    def level_order(self) -> list[list]:
        """Return the values level by level."""
        return level_order(self.root)

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path (-1 when empty)."""
        return tree_height(self.root) - 1

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            node.left, node.right = node.right, node.left
            queue.extend(child for child in (node.left, node.right) if child is not None)

    def copy(self) -> "BinarySearchTree":
        """Return a tree with the same shape and values, sharing no nodes."""
        duplicate = BinarySearchTree()
        duplicate.root = _copy(self.root)
        return duplicate

    def parent_children(self) -> list[tuple[Any, list]]:
        """Return each node's value with its children's values, in level order."""
        return [
            (node.data, [c.data for c in (node.left, node.right) if c is not None])
            for level in _levels(self.root)
            for node in level
        ]

    def leaves(self) -> list:
        """Return the values of the leaf nodes from left to right."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.left is None and node.right is None:
                result.append(node.data)
                continue
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def minimum(self) -> Any:
        """Return the value reached by following left children from the root."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def maximum(self) -> Any:
        """Return the value reached by following right children from the root."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data