"""Small number-theory helpers and arithmetic puzzles."""

from __future__ import annotations

import math
from typing import Sequence


def _c_divmod(a: int, b: int) -> tuple[int, int]:
    """Division truncating towards zero, with the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def find_min_x(nums: Sequence[int], rems: Sequence[int]) -> int:
    """Return the smallest positive x with ``x % nums[i] == rems[i]`` for all i.

    Raises ValueError if the inputs are malformed or no such x exists.
    """
    if len(nums) != len(rems):
        raise ValueError("nums and rems must have the same length")
    if any(n <= 0 for n in nums):
        raise ValueError("moduli must be positive")
    limit = math.lcm(*nums) if nums else 1
    for x in range(1, limit + 1):
        if all(x % n == r for n, r in zip(nums, rems)):
            return x
    raise ValueError("the congruences have no common solution")


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d == gcd(a, b) == a*x + b*y``."""
    if b == 0:
        return a, 1, 0
    q, r = _c_divmod(a, b)
    d, x1, y1 = extended_gcd(b, r)
    return d, y1, x1 - y1 * q


def fibonacci(n: int) -> list[int]:
    """Return the Fibonacci terms 0, 1 followed by ``n - 1`` further terms."""
    terms = [0, 1]
    a, b = 0, 1
    for _ in range(1, n):
        a, b = b, a + b
        terms.append(b)
    return terms


def is_prime(n: int) -> bool:
    """Return whether the positive integer ``n`` is prime (1 is not)."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n == 1:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_binary_palindrome(n: int) -> bool:
    """Return whether the binary digits of ``n`` read the same both ways."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = format(n, "b")
    return digits == digits[::-1]


def _round_grade(grade: int) -> int:
    if grade < 38 or grade % 5 == 0:
        return grade
    tens = grade // 10 * 10
    rounded = tens + 5 if grade % 10 < 5 else tens + 10
    return rounded if rounded - grade < 3 else grade


def round_grades(grades: Sequence[int]) -> list[int]:
    """Round grades of 38 and above up to the next multiple of 5 when it is less than 3 away."""
    return [_round_grade(g) for g in grades]


def count_fruits(
    house: tuple[int, int],
    trees: tuple[int, int],
    apples: Sequence[int],
    oranges: Sequence[int],
) -> tuple[int, int]:
    """Count apples and oranges landing on the house span.

    ``house`` is ``(start, end)``, ``trees`` is ``(apple_tree, orange_tree)``
    and the fruit sequences hold landing distances from their tree.
    """
    start, end = house
    apple_tree, orange_tree = trees
    apple_hits = sum(start <= apple_tree + d <= end for d in apples)
    orange_hits = sum(start <= orange_tree + d <= end for d in oranges)
    return apple_hits, orange_hits


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> bool:
    """Return whether the first kangaroo can meet the second after whole jumps."""
    return v1 > v2 and (x2 - x1) % (v2 - v1) == 0