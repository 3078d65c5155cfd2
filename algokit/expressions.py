"""Infix-to-postfix conversion and evaluation of single-digit postfix expressions."""

from __future__ import annotations

_OPERATORS = "+-*/^"


def precedence(c: str) -> int:
    """Return the binding strength of operator ``c``, or -1 for anything else."""
    if c == "^":
        return 3
    if c in "*/":
        return 2
    if c in "+-":
        return 1
    return -1


def _is_operand(c: str) -> bool:
    return c.isascii() and c.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of letters and digits to postfix notation."""
    stack: list[str] = []
    out: list[str] = []
    for c in expression:
        if _is_operand(c):
            out.append(c)
        elif c == "(":
            stack.append(c)
        elif c == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(c) <= precedence(stack[-1]):
                out.append(stack.pop())
            stack.append(c)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        out.append(top)
    return "".join(out)


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits with integer arithmetic.

    Division truncates towards zero and ``^`` is exponentiation.
    """
    stack: list[int] = []
    for c in expression:
        if c.isascii() and c.isdigit():
            stack.append(int(c))
            continue
        if c not in _OPERATORS:
            raise ValueError(f"unexpected character {c!r}")
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {c!r}")
        o2 = stack.pop()
        o1 = stack.pop()
        if c == "+":
            stack.append(o1 + o2)
        elif c == "-":
            stack.append(o1 - o2)
        elif c == "*":
            stack.append(o1 * o2)
        elif c == "/":
            if o2 == 0:
                raise ZeroDivisionError("division by zero")
            stack.append(_truncating_div(o1, o2))
        else:
            stack.append(int(o1**o2))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]