"""A four-function calculator driven by key presses."""

from __future__ import annotations

import math
from typing import Optional

OPERATORS = "+-*/"


def _format(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


class Calculator:
    """Keypad calculator whose state is the text shown on its display."""

    def __init__(self) -> None:
        self.display = "0"
        self.first: float = 0.0
        self.operator: Optional[str] = None

    def enter_digit(self, digit: str) -> None:
        """Type one digit, replacing a lone "0" on the display."""
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"not a digit: {digit!r}")
        if self.display == "0":
            self.display = digit
        else:
            self.display += digit

    def backspace(self) -> None:
        """Delete the last character; an emptied display shows "0"."""
        self.display = self.display[:-1]
        if not self.display:
            self.display = "0"

    def clear(self) -> None:
        """Reset the display to "0"."""
        self.display = "0"

    def clear_entry(self) -> None:
        """Blank the display."""
        self.display = ""

    def toggle_sign(self) -> None:
        """Drop the leading character if the display holds a minus sign, else prepend one."""
        if "-" in self.display:
            self.display = self.display[1:]
        else:
            self.display = "-" + self.display

    def point(self) -> None:
        """Append a decimal point unless the display already has one."""
        if "." not in self.display:
            self.display += "."

    def press_operator(self, op: str) -> None:
        """Store the displayed number as the first operand and start a new entry."""
        if len(op) != 1 or op not in OPERATORS:
            raise ValueError(f"unknown operator: {op!r}")
        self.first = float(self.display)
        self.display = ""
        self.operator = op

    def equals(self) -> None:
        """Apply the pending operator to the stored and displayed numbers."""
        second = float(self.display)
        if self.operator is None:
            return
        if self.operator == "+":
            result = self.first + second
        elif self.operator == "-":
            result = self.first - second
        elif self.operator == "*":
            result = self.first * second
        elif second == 0:
            result = math.nan if self.first == 0 or math.isnan(self.first) else math.copysign(
                math.inf, self.first
            ) * math.copysign(1.0, second)
        else:
            result = self.first / second
        self.display = _format(result)