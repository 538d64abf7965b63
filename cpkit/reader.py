"""Character-level token reader for whitespace-insensitive numeric input."""

from __future__ import annotations

import sys
from typing import TextIO

_DIGITS = frozenset("0123456789")


class TokenReader:
    """Reads integers, decimals and delimited strings from a text stream.

    Each read consumes the character that ends the token.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def _getc(self) -> str:
        return self._stream.read(1)

    def read_int(self) -> int:
        """Skip to the next ``-`` or digit and read an integer.

        Every leading ``-`` flips the sign; a sign with no digits reads as 0.
        """
        c = self._getc()
        while c and c != "-" and c not in _DIGITS:
            c = self._getc()
        if not c:
            raise EOFError("no integer before end of input")
        sign = 1
        while c == "-":
            sign = -sign
            c = self._getc()
        value = 0
        while c in _DIGITS:
            value = value * 10 + int(c)
            c = self._getc()
        return sign * value

    def read_float(self) -> float:
        """Skip to the next number, optionally preceded by ``-``, and read it as a decimal."""
        c = self._getc()
        while True:
            if not c:
                raise EOFError("no number before end of input")
            if c in _DIGITS:
                negative = False
                break
            if c == "-":
                c = self._getc()
                if c in _DIGITS:
                    negative = True
                    break
                continue
            c = self._getc()
        chars: list[str] = []
        while c in _DIGITS:
            chars.append(c)
            c = self._getc()
        if c == ".":
            chars.append(c)
            c = self._getc()
            while c in _DIGITS:
                chars.append(c)
                c = self._getc()
        value = float("".join(chars))
        return -value if negative else value

    def read_until(self, terminator: str) -> str:
        """Read up to ``terminator`` and return the text before it."""
        if len(terminator) != 1:
            raise ValueError("terminator must be a single character")
        chars: list[str] = []
        while (c := self._getc()) != terminator:
            if not c:
                raise EOFError("end of input before terminator")
            chars.append(c)
        return "".join(chars)