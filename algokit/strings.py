"""Searching in sequences and text, and longest common subsequence."""

from __future__ import annotations

from typing import Any, Sequence

ALPHABET_SIZE = 256


def linear_search(values: Sequence[Any], target: Any) -> list[int]:
    """Return every index at which ``target`` occurs in ``values``."""
    return [i for i, value in enumerate(values) if value == target]


def rabin_karp_search(pattern: str, text: str, q: int = 101) -> list[int]:
    """Return the start indices of ``pattern`` in ``text`` using rolling hashes mod ``q``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if q <= 0:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    h = pow(ALPHABET_SIZE, m - 1, q)
    p = t = 0
    for pc, tc in zip(pattern, text):
        p = (ALPHABET_SIZE * p + ord(pc)) % q
        t = (ALPHABET_SIZE * t + ord(tc)) % q
    matches = []
    for i in range(n - m + 1):
        if p == t and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            t = (ALPHABET_SIZE * (t - ord(text[i]) * h) + ord(text[i + m])) % q
    return matches


def longest_common_subsequence(x: str, y: str) -> str:
    """Return one longest common subsequence of ``x`` and ``y``."""
    m, n = len(x), len(y)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i, xc in enumerate(x, 1):
        for j, yc in enumerate(y, 1):
            if xc == yc:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    chars = []
    i, j = m, n
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            chars.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))