"""Disjoint-set forest with union by size and path compression."""

from __future__ import annotations


class UnionFind:
    """Union-find over the elements ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        # A root holds minus its component size; any other element holds its parent.
        self._parent = [-1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Representative of the component containing ``x``."""
        parent = self._parent
        if not 0 <= x < len(parent):
            raise IndexError(f"element {x} out of range")
        root = x
        while parent[root] >= 0:
            root = parent[root]
        while x != root:
            parent[x], x = root, parent[x]
        return root

    def join(self, x: int, y: int) -> bool:
        """Join the components of ``x`` and ``y``; return False if already joined."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        parent = self._parent
        if parent[rx] > parent[ry]:
            parent[ry] += parent[rx]
            parent[rx] = ry
        else:
            parent[rx] += parent[ry]
            parent[ry] = rx
        return True

    def connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` lie in the same component."""
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Number of elements in the component of ``x``."""
        return -self._parent[self.find(x)]