"""Adjacency-list graphs and shortest paths: Bellman-Ford, Dijkstra and Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

INF = math.inf

Graph = list[list[int]]
WeightedGraph = list[list[tuple[int, int]]]


def _check_node(n: int, v: int) -> None:
    if not 0 <= v < n:
        raise ValueError(f"node {v} out of range for {n} nodes")


def _check_source(graph: Sequence, source: int) -> None:
    if not 0 <= source < len(graph):
        raise IndexError(f"source {source} out of range")


def to_graph(n: int, edges: Iterable[tuple[int, int]]) -> Graph:
    """Adjacency lists of a directed graph; each node keeps its edges in input order.

    An undirected edge must be given in both directions.
    """
    if n < 0:
        raise ValueError("node count must be non-negative")
    graph: Graph = [[] for _ in range(n)]
    for x, y in edges:
        _check_node(n, x)
        _check_node(n, y)
        graph[x].append(y)
    return graph


def to_weighted_graph(n: int, edges: Iterable[tuple[int, int, int]]) -> WeightedGraph:
    """Adjacency lists of ``(target, weight)`` pairs; weights may be negative."""
    if n < 0:
        raise ValueError("node count must be non-negative")
    graph: WeightedGraph = [[] for _ in range(n)]
    for x, y, w in edges:
        _check_node(n, x)
        _check_node(n, y)
        graph[x].append((y, w))
    return graph


def bellman_ford(graph: Sequence[Sequence[tuple[int, int]]], source: int) -> list[float]:
    """Shortest distances from ``source``.

    Unreachable nodes get ``inf``; nodes whose distance is lowered by a
    reachable negative cycle get ``-inf``.
    """
    _check_source(graph, source)
    n = len(graph)
    dist: list[float] = [INF] * n
    dist[source] = 0
    frontier = [source]
    rounds = 0
    while frontier:
        updated: set[int] = set()
        for j in frontier:
            if j in updated:
                continue
            for x, w in graph[j]:
                if dist[x] != -INF and dist[j] + w < dist[x]:
                    dist[x] = dist[j] + w if rounds < n else -INF
                    updated.add(x)
        frontier = sorted(updated)
        rounds += 1
    return dist


def dijkstra(graph: Sequence[Sequence[tuple[int, int]]], source: int) -> list[float]:
    """Shortest distances from ``source`` for non-negative weights; ``inf`` if unreachable."""
    _check_source(graph, source)
    dist: list[float] = [INF] * len(graph)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, x = heapq.heappop(heap)
        if d > dist[x]:
            continue
        for y, w in graph[x]:
            candidate = d + w
            if candidate < dist[y]:
                dist[y] = candidate
                heapq.heappush(heap, (candidate, y))
    return dist


def floyd_warshall(graph: Sequence[Sequence[tuple[int, int]]]) -> list[list[float]]:
    """All-pairs shortest distances.

    ``inf`` marks unreachable pairs and ``-inf`` pairs whose path can pass a
    negative cycle.
    """
    n = len(graph)
    dist: list[list[float]] = [[INF] * n for _ in range(n)]
    for i, row in enumerate(dist):
        row[i] = 0
    for row, edges in zip(dist, graph):
        for j, w in edges:
            _check_node(n, j)
            row[j] = min(row[j], w)
    for k in range(n):
        through = dist[k]
        for row in dist:
            for j, kj in enumerate(through):
                ik = row[k]
                if ik == INF or kj == INF:
                    continue
                row[j] = min(row[j], ik + kj)
    for k in range(n):
        through = dist[k]
        for row in dist:
            for j, kj in enumerate(through):
                ik = row[k]
                if ik == INF or kj == INF:
                    continue
                if ik + kj < row[j]:
                    row[j] = -INF
    return dist