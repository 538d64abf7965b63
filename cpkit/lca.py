"""Lowest common ancestors in rooted trees: Euler tour with a sparse table, and heavy-light paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_tree(graph: Sequence[Sequence[int]], root: int) -> int:
    n = len(graph)
    if n == 0:
        raise ValueError("tree has no nodes")
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    return n


def _check_node(n: int, v: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"node {v} out of range")


class EulerTourLCA:
    """LCA by range minimum over an Euler tour; O(n log n) setup, O(1) queries."""

    def __init__(self, graph: Sequence[Sequence[int]], root: int = 0) -> None:
        n = _check_tree(graph, root)
        depth = [0] * n
        first = [-1] * n
        tour = [root]
        first[root] = 0
        stack = [(root, -1, iter(graph[root]))]
        while stack:
            x, parent, neighbours = stack[-1]
            for y in neighbours:
                if y == parent:
                    continue
                if first[y] != -1:
                    raise ValueError("graph contains a cycle")
                depth[y] = depth[x] + 1
                first[y] = len(tour)
                tour.append(y)
                stack.append((y, x, iter(graph[y])))
                break
            else:
                stack.pop()
                if stack:
                    tour.append(stack[-1][0])
        if -1 in first:
            raise ValueError("graph is not connected")
        self._depth = depth
        self._first = first
        self._table = [tour]
        span = 1
        while 2 * span <= len(tour):
            prev = self._table[-1]
            self._table.append([self._shallower(a, b) for a, b in zip(prev, prev[span:])])
            span *= 2

    def _shallower(self, x: int, y: int) -> int:
        return x if self._depth[x] < self._depth[y] else y

    def query(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        n = len(self._first)
        _check_node(n, u)
        _check_node(n, v)
        lo, hi = sorted((self._first[u], self._first[v]))
        level = (hi - lo + 1).bit_length() - 1
        row = self._table[level]
        return self._shallower(row[lo], row[hi - (1 << level) + 1])


class HeavyLightLCA:
    """LCA by climbing heavy paths; O(n) setup, O(log n) queries."""

    def __init__(self, graph: Sequence[Sequence[int]], root: int = 0) -> None:
        n = _check_tree(graph, root)
        parent = [-1] * n
        depth = [0] * n
        parent[root] = root
        order = [root]
        queue = deque([root])
        seen = [False] * n
        seen[root] = True
        while queue:
            x = queue.popleft()
            for y in graph[x]:
                if y == parent[x] and x != root:
                    continue
                if seen[y]:
                    raise ValueError("graph contains a cycle")
                seen[y] = True
                parent[y] = x
                depth[y] = depth[x] + 1
                order.append(y)
                queue.append(y)
        if len(order) != n:
            raise ValueError("graph is not connected")
        size = [1] * n
        for x in reversed(order[1:]):
            size[parent[x]] += size[x]
        heavy = [-1] * n
        for x in order[1:]:
            p = parent[x]
            if heavy[p] == -1 or size[heavy[p]] < size[x]:
                heavy[p] = x
        head = list(range(n))
        for x in order:
            if heavy[x] != -1:
                head[heavy[x]] = head[x]
        self._parent = parent
        self._depth = depth
        self._head = head

    def query(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        n = len(self._head)
        _check_node(n, u)
        _check_node(n, v)
        head, depth, parent = self._head, self._depth, self._parent
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u = parent[head[u]]
            else:
                v = parent[head[v]]
        return u if depth[u] < depth[v] else v