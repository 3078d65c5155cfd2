"""Segment tree with point assignment and half-open range sums."""

from __future__ import annotations

from typing import Sequence


class SegmentTree:
    """Sums over ``n`` integer slots, all starting at zero."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._n = n
        size = 1
        while size < n:
            size *= 2
        self._size = size
        self._sums = [0] * (2 * size)

    def __len__(self) -> int:
        return self._n

    def build(self, values: Sequence[int]) -> None:
        """Load ``values`` into the first slots; remaining slots become zero."""
        if len(values) > self._n:
            raise ValueError("more values than slots")
        self._sums = [0] * (2 * self._size)
        self._build(values, 0, 0, self._size)

    def _build(self, values: Sequence[int], x: int, lx: int, rx: int) -> None:
        if rx - lx == 1:
            if lx < len(values):
                self._sums[x] = values[lx]
            return
        mid = (lx + rx) // 2
        self._build(values, 2 * x + 1, lx, mid)
        self._build(values, 2 * x + 2, mid, rx)
        self._sums[x] = self._sums[2 * x + 1] + self._sums[2 * x + 2]

    def set(self, i: int, v: int) -> None:
        """Assign ``v`` to slot ``i``."""
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range")
        x, lx, rx = 0, 0, self._size
        path = []
        while rx - lx > 1:
            path.append(x)
            mid = (lx + rx) // 2
            if i < mid:
                x, rx = 2 * x + 1, mid
            else:
                x, lx = 2 * x + 2, mid
        self._sums[x] = v
        for node in reversed(path):
            self._sums[node] = self._sums[2 * node + 1] + self._sums[2 * node + 2]

    def range_sum(self, l: int, r: int) -> int:
        """Return the sum of slots ``l`` to ``r - 1``."""
        return self._range_sum(l, r, 0, 0, self._size)

    def _range_sum(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        if lx >= r or l >= rx:
            return 0
        if lx >= l and rx <= r:
            return self._sums[x]
        mid = (lx + rx) // 2
        return self._range_sum(l, r, 2 * x + 1, lx, mid) + self._range_sum(
            l, r, 2 * x + 2, mid, rx
        )