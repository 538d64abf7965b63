"""String-count tries: one over lowercase letters, one over the bits of 8-bit characters."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

CHAR_BITS = 8


@dataclass(eq=False)
class _Node:
    children: dict[Hashable, _Node] = field(default_factory=dict)
    count: int = 0


def _descend(root: _Node, keys: Iterable[Hashable]) -> _Node:
    node = root
    for key in keys:
        node = node.children.setdefault(key, _Node())
    return node


def _lookup(root: _Node, keys: Iterable[Hashable]) -> int:
    node = root
    for key in keys:
        child = node.children.get(key)
        if child is None:
            return 0
        node = child
    return node.count


def _letter_keys(s: str) -> str:
    for ch in s:
        if not "a" <= ch <= "z":
            raise ValueError(f"character {ch!r} is not a lowercase letter")
    return s


def _bit_keys(s: str | bytes) -> list[int]:
    codes = list(s) if isinstance(s, (bytes, bytearray)) else [ord(ch) for ch in s]
    if any(code >= 1 << CHAR_BITS for code in codes):
        raise ValueError("characters must fit in 8 bits")
    return [code >> shift & 1 for code in codes for shift in range(CHAR_BITS)]


class Trie:
    """Counting trie over the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _Node()

    def inc(self, s: str) -> None:
        """Add one occurrence of ``s``."""
        _descend(self._root, _letter_keys(s)).count += 1

    def dec(self, s: str) -> None:
        """Remove one occurrence of ``s``; counts may go negative."""
        _descend(self._root, _letter_keys(s)).count -= 1

    def count(self, s: str) -> int:
        """Number of occurrences of ``s``; unseen strings count zero."""
        return _lookup(self._root, _letter_keys(s))


class BitTrie:
    """Counting trie that stores each 8-bit character as its bits, least significant first."""

    def __init__(self) -> None:
        self._root = _Node()

    def inc(self, s: str | bytes) -> None:
        """Add one occurrence of ``s``."""
        _descend(self._root, _bit_keys(s)).count += 1

    def dec(self, s: str | bytes) -> None:
        """Remove one occurrence of ``s``; counts may go negative."""
        _descend(self._root, _bit_keys(s)).count -= 1

    def count(self, s: str | bytes) -> int:
        """Number of occurrences of ``s``; unseen strings count zero."""
        return _lookup(self._root, _bit_keys(s))