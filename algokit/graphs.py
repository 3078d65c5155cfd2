"""Shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from typing import Hashable, Iterable, Mapping, Sequence

INF = 99999
"""Marks a missing edge in the matrices handled by :func:`floyd_warshall`."""


def dijkstra(
    edges: Iterable[tuple[Hashable, Hashable, float]], start: Hashable
) -> tuple[dict, dict]:
    """Single-source shortest paths over undirected weighted edges.

    Returns ``(distances, previous)``: unreachable nodes have distance
    ``math.inf`` and every node without a predecessor maps to ``None``.
    """
    adjacency: dict = {}
    order: dict = {}

    def add(node: Hashable) -> None:
        if node not in order:
            order[node] = len(order)
            adjacency[node] = []

    for u, v, weight in edges:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        add(u)
        add(v)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    add(start)

    distances = dict.fromkeys(order, math.inf)
    previous = dict.fromkeys(order)
    distances[start] = 0
    heap = [(0, order[start], start)]
    done = set()
    while heap:
        dist, _, node = heapq.heappop(heap)
        if node in done or dist > distances[node]:
            continue
        done.add(node)
        for neighbour, weight in adjacency[node]:
            if neighbour in done:
                continue
            candidate = dist + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                previous[neighbour] = node
                heapq.heappush(heap, (candidate, order[neighbour], neighbour))
    return distances, previous


def shortest_route(previous: Mapping, destination: Hashable) -> list:
    """Return the route from ``destination`` back to the start, destination first."""
    if destination not in previous:
        raise KeyError(destination)
    route = [destination]
    node = previous[destination]
    while node is not None:
        route.append(node)
        node = previous[node]
    return route


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances; ``INF`` marks unreachable pairs."""
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    dist = [list(row) for row in graph]
    for k in range(n):
        for i in range(n):
            if dist[i][k] == INF:
                continue
            for j in range(n):
                if dist[k][j] != INF and dist[i][j] > dist[i][k] + dist[k][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def prim_mst(graph: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return the minimum spanning tree as ``(parent, vertex, weight)`` for vertices 1..n-1.

    The graph is an adjacency matrix in which 0 means no edge.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    if n == 0:
        return []
    key = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n):
        u = min((v for v in range(n) if not in_tree[v]), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [(parent[i], i, graph[i][parent[i]]) for i in range(1, n)]