"""Small fixed-size containers: a packed bit set and a bounded array queue."""

from __future__ import annotations

from typing import Any

WORD_BITS = 62


class Bitfield:
    """Fixed-size set of bits packed into 62-bit words."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._words = [0] * -(-size // WORD_BITS)

    def __len__(self) -> int:
        return self._size

    def _check(self, e: int) -> None:
        if not 0 <= e < self._size:
            raise IndexError(f"bit {e} out of range")

    def set(self, e: int) -> None:
        """Turn bit ``e`` on."""
        self._check(e)
        self._words[e // WORD_BITS] |= 1 << e % WORD_BITS

    def get(self, e: int) -> bool:
        """Whether bit ``e`` is on."""
        self._check(e)
        return bool(self._words[e // WORD_BITS] >> e % WORD_BITS & 1)


class ArrayQueue:
    """FIFO queue on a fixed buffer that accepts at most ``capacity`` pushes in its lifetime."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._buffer: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0

    def push(self, value: Any) -> None:
        """Append ``value``; raises OverflowError once the buffer is used up."""
        if self._tail == len(self._buffer):
            raise OverflowError("queue has used up its capacity")
        self._buffer[self._tail] = value
        self._tail += 1

    def pop(self) -> Any:
        """Remove and return the oldest element."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head += 1
        return value

    def peek(self) -> Any:
        """Return the oldest element without removing it."""
        if self.is_empty():
            raise IndexError("peek into an empty queue")
        return self._buffer[self._head]

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self._head == self._tail