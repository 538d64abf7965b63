"""Range-sum structures: Fenwick tree, lazy segment tree and a plain prefix-sum array."""

from __future__ import annotations

import itertools
from collections.abc import Iterable


class FenwickTree:
    """Binary indexed tree over ``n`` zero-initialised entries."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, i: int, k: int) -> None:
        """Add ``k`` to entry ``i``."""
        n = len(self)
        if not 0 <= i < n:
            raise IndexError(f"index {i} out of range")
        i += 1
        while i <= n:
            self._tree[i] += k
            i += i & -i

    def prefix_sum(self, i: int) -> int:
        """Sum of entries ``0..i`` inclusive; ``i == -1`` gives the empty sum."""
        if not -1 <= i < len(self):
            raise IndexError(f"index {i} out of range")
        total = 0
        i += 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total


class SegmentTree:
    """Segment tree with lazy range additions and range-sum queries, both O(log n)."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._sums = [0] * (4 * n)
        self._lazy = [0] * (4 * n)

    def __len__(self) -> int:
        return self._n

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x <= y < self._n:
            raise IndexError(f"invalid range [{x}, {y}]")

    def _push_down(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        mid = (lo + hi) // 2
        left, right = 2 * node, 2 * node + 1
        self._sums[left] += (mid - lo + 1) * pending
        self._lazy[left] += pending
        self._sums[right] += (hi - mid) * pending
        self._lazy[right] += pending
        self._lazy[node] = 0

    def update(self, x: int, y: int, z: int) -> None:
        """Add ``z`` to every entry in the inclusive range ``[x, y]``."""
        self._check(x, y)
        self._update(1, 0, self._n - 1, x, y, z)

    def _update(self, node: int, lo: int, hi: int, x: int, y: int, z: int) -> None:
        if x <= lo and hi <= y:
            self._sums[node] += (hi - lo + 1) * z
            self._lazy[node] += z
            return
        self._push_down(node, lo, hi)
        mid = (lo + hi) // 2
        if x <= mid:
            self._update(2 * node, lo, mid, x, y, z)
        if y > mid:
            self._update(2 * node + 1, mid + 1, hi, x, y, z)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def query(self, x: int, y: int) -> int:
        """Sum of the entries in the inclusive range ``[x, y]``."""
        self._check(x, y)
        return self._query(1, 0, self._n - 1, x, y)

    def _query(self, node: int, lo: int, hi: int, x: int, y: int) -> int:
        if x <= lo and hi <= y:
            return self._sums[node]
        self._push_down(node, lo, hi)
        mid = (lo + hi) // 2
        total = 0
        if x <= mid:
            total += self._query(2 * node, lo, mid, x, y)
        if y > mid:
            total += self._query(2 * node + 1, mid + 1, hi, x, y)
        return total


class PrefixSum:
    """Prefix sums: O(1) range queries, O(n) point updates."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = list(itertools.accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self):
            raise IndexError(f"index {x} out of range")

    def update(self, x: int, z: int) -> None:
        """Add ``z`` to entry ``x``."""
        self._check(x)
        for i in range(x + 1, len(self._prefix)):
            self._prefix[i] += z

    def query(self, x: int, y: int) -> int:
        """Sum of entries ``x..y`` inclusive; zero when ``y < x``."""
        if y < x:
            return 0
        self._check(x)
        self._check(y)
        return self._prefix[y + 1] - self._prefix[x]

    def set(self, x: int, z: int) -> None:
        """Replace entry ``x`` with ``z``."""
        self.update(x, z - self.query(x, x))