"""Dynamic-programming problems: coin change, subset sum, TSP and equalising by division."""

from __future__ import annotations

import heapq
from collections import defaultdict
from functools import lru_cache
from typing import Iterable, Sequence


def count_coin_change(coins: Iterable[int], amount: int) -> int:
    """Return how many multisets of ``coins`` (each usable any number of times) sum to ``amount``."""
    denominations = list(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def subset_sum(values: Iterable[int], total: int) -> bool:
    """Return whether some subset of ``values`` adds up to ``total``."""
    items = list(values)
    if total < 0:
        raise ValueError("total must not be negative")
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    reachable = [True] + [False] * total
    for value in items:
        for target in range(total, value - 1, -1):
            if reachable[target - value]:
                reachable[target] = True
    return reachable[total]


def travelling_salesman(dist: Sequence[Sequence[int]]) -> int:
    """Return the length of the shortest tour that starts and ends at city 0 and visits every city."""
    n = len(dist)
    if n == 0:
        raise ValueError("distance matrix must not be empty")
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    table = tuple(tuple(row) for row in dist)
    visited_all = (1 << n) - 1

    @lru_cache(maxsize=None)
    def tour(mask: int, pos: int) -> int:
        if mask == visited_all:
            return table[pos][0]
        return min(
            table[pos][city] + tour(mask | (1 << city), city)
            for city in range(n)
            if not mask & (1 << city)
        )

    return tour(1, 0)


def min_moves(values: Iterable[int], k: int, d: int) -> int:
    """Return the fewest integer divisions by ``d`` that make at least ``k`` values equal."""
    if d < 2:
        raise ValueError("divisor must be at least 2")
    if k < 1:
        raise ValueError("k must be positive")
    moves: defaultdict[int, list[int]] = defaultdict(list)
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        steps = 0
        moves[value].append(0)
        while value > 0:
            value //= d
            steps += 1
            moves[value].append(steps)
    candidates = [
        sum(heapq.nsmallest(k, counts)) for counts in moves.values() if len(counts) >= k
    ]
    if not candidates:
        raise ValueError("fewer than k values are available")
    return min(candidates)