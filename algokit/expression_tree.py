"""Building expression trees from postfix and prefix notation."""

from __future__ import annotations

from typing import Iterable

from algokit.bst import TreeNode

OPERATORS = "+-*/^"


def is_operator(c: str) -> bool:
    """Return whether ``c`` is one of the binary operators + - * / ^."""
    return len(c) == 1 and c in OPERATORS


def _build(tokens: Iterable[str], prefix: bool) -> TreeNode:
    stack: list[TreeNode] = []
    for c in tokens:
        if is_operator(c):
            if len(stack) < 2:
                raise ValueError(f"not enough operands for {c!r}")
            first = stack.pop()
            second = stack.pop()
            left, right = (first, second) if prefix else (second, first)
            stack.append(TreeNode(c, left, right))
        else:
            stack.append(TreeNode(c))
    if not stack:
        raise ValueError("empty expression")
    if len(stack) > 1:
        raise ValueError("too many operands in expression")
    return stack[0]


def from_postfix(expression: str) -> TreeNode:
    """Build the expression tree of a postfix expression of single-character tokens."""
    return _build(expression, prefix=False)


def from_prefix(expression: str) -> TreeNode:
    """Build the expression tree of a prefix expression of single-character tokens."""
    return _build(reversed(expression), prefix=True)