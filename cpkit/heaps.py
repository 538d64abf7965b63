"""Priority queues: an array-backed binary max-heap and two mergeable min-heaps."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

Key = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


class BinaryHeap:
    """Binary max-heap; push and pop run in O(log n), peek in O(1)."""

    def __init__(self, values: Iterable[Any] = (), capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._items: list[Any] = []
        self._capacity = capacity
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Add ``value``; raises OverflowError when the heap is full."""
        items = self._items
        if self._capacity is not None and len(items) >= self._capacity:
            raise OverflowError("heap is full")
        items.append(value)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not items[i] > items[parent]:
                break
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def pop(self) -> Any:
        """Remove and return the largest element."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return top

    def peek(self) -> Any:
        """Return the largest element without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        i = 0
        while True:
            largest = i
            right, left = 2 * i + 2, 2 * i + 1
            if right < size and items[largest] < items[right]:
                largest = right
            if left < size and items[largest] < items[left]:
                largest = left
            if largest == i:
                return
            items[i], items[largest] = items[largest], items[i]
            i = largest


@dataclass(eq=False)
class _PairingNode:
    value: Any
    child: _PairingNode | None = None
    sibling: _PairingNode | None = None


class PairingHeap:
    """Pairing min-heap ordered by ``key``; merging two heaps is O(1)."""

    def __init__(self, values: Iterable[Any] = (), key: Key | None = None) -> None:
        self._key = key or _identity
        self._root: _PairingNode | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._size

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._root = self._meld(self._root, _PairingNode(value))
        self._size += 1

    def peek(self) -> Any:
        """Return the element with the smallest key."""
        if self._root is None:
            raise IndexError("peek into an empty heap")
        return self._root.value

    def pop(self) -> Any:
        """Remove and return the element with the smallest key."""
        root = self._root
        if root is None:
            raise IndexError("pop from an empty heap")
        self._root = self._two_pass(root.child)
        self._size -= 1
        return root.value

    def merge(self, other: PairingHeap) -> None:
        """Move every element of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot merge a heap with itself")
        self._root = self._meld(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0

    def _meld(self, x: _PairingNode | None, y: _PairingNode | None) -> _PairingNode | None:
        if x is None:
            return y
        if y is None:
            return x
        if self._key(x.value) > self._key(y.value):
            x, y = y, x
        y.sibling = x.child
        x.child = y
        return x

    def _two_pass(self, first: _PairingNode | None) -> _PairingNode | None:
        pairs: list[_PairingNode | None] = []
        node = first
        while node is not None:
            second = node.sibling
            following = second.sibling if second is not None else None
            node.sibling = None
            if second is not None:
                second.sibling = None
            pairs.append(self._meld(node, second))
            node = following
        result: _PairingNode | None = None
        for tree in reversed(pairs):
            result = self._meld(tree, result)
        return result


@dataclass(eq=False)
class _RandomNode:
    value: Any
    left: _RandomNode | None = None
    right: _RandomNode | None = None


class RandomizedHeap:
    """Randomized meldable min-heap ordered by ``key``."""

    def __init__(
        self,
        values: Iterable[Any] = (),
        key: Key | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._key = key or _identity
        self._rng = rng if rng is not None else random.Random()
        self._root: _RandomNode | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._size

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._root = self._meld(_RandomNode(value), self._root)
        self._size += 1

    def peek(self) -> Any:
        """Return the element with the smallest key."""
        if self._root is None:
            raise IndexError("peek into an empty heap")
        return self._root.value

    def pop(self) -> Any:
        """Remove and return the element with the smallest key."""
        root = self._root
        if root is None:
            raise IndexError("pop from an empty heap")
        self._root = self._meld(root.left, root.right)
        self._size -= 1
        return root.value

    def merge(self, other: RandomizedHeap) -> None:
        """Move every element of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot merge a heap with itself")
        self._root = self._meld(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0

    def _meld(self, x: _RandomNode | None, y: _RandomNode | None) -> _RandomNode | None:
        if x is None:
            return y
        if y is None:
            return x
        if self._key(y.value) < self._key(x.value):
            x, y = y, x
        if self._rng.getrandbits(1):
            x.left, x.right = x.right, x.left
        x.left = self._meld(x.left, y)
        return x