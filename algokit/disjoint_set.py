"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements 1..n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node < len(self._parent):
            raise ValueError(f"node {node} is outside 1..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one set."""
        u, v = self.find(a), self.find(b)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            self._parent[u] = v
        elif self._rank[u] > self._rank[v]:
            self._parent[v] = u
        else:
            self._parent[u] = v
            self._rank[v] += 1
        return True