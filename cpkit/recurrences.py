"""Modular matrix powers and linear recurrences."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_MOD = 1_000_000_000

Matrix = list[list[int]]


def _identity(n: int) -> Matrix:
    return [[int(i == j) for j in range(n)] for i in range(n)]


def matmul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = DEFAULT_MOD) -> Matrix:
    """Product of two matrices with every entry reduced modulo ``mod``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def matpow(a: Sequence[Sequence[int]], p: int, mod: int = DEFAULT_MOD) -> Matrix:
    """Raise a square matrix to the power ``p`` modulo ``mod``."""
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    if p < 0:
        raise ValueError("exponent must be non-negative")
    result = _identity(n)
    base = [[x % mod for x in row] for row in a]
    while p > 0:
        if p & 1:
            result = matmul(result, base, mod)
        base = matmul(base, base, mod)
        p >>= 1
    return result


def affine_recurrence(
    a: Sequence[int], c: Sequence[int], c0: int, n: int, mod: int = DEFAULT_MOD
) -> int:
    """The n-th term of ``a_N = c0 + c[0]*a_{N-1} + ... + c[k-1]*a_{N-k}``.

    ``a`` holds the first ``k = len(c)`` terms.
    """
    k = len(c)
    if k == 0:
        raise ValueError("at least one coefficient is required")
    if len(a) < k:
        raise ValueError("need as many initial terms as coefficients")
    if n < 0:
        raise ValueError("index must be non-negative")
    if n < k:
        return a[n] % mod
    size = k + 1
    step = [[0] * size for _ in range(size)]
    step[0][:k] = [x % mod for x in c]
    step[0][k] = c0 % mod
    step[k][k] = 1
    for i in range(k - 1):
        step[i + 1][i] = 1
    top = matpow(step, n - k + 1, mod)[0]
    state = [*reversed(a[:k]), 1]
    return sum(x * y for x, y in zip(top, state)) % mod


def linear_recurrence(a: Sequence[int], c: Sequence[int], n: int, mod: int = DEFAULT_MOD) -> int:
    """The n-th term of ``a_k = sum(a_{k-l+j} * c[j])``, zero indexed.

    The next term is the inner product of the last ``l`` terms with ``c``,
    so ``a = c = (1, 2)`` continues with 5. Runs in O(l^2 log n).
    """
    size = len(c)
    if size == 0 or len(a) != size:
        raise ValueError("initial terms and coefficients must have the same non-zero length")
    if n < 0:
        raise ValueError("index must be non-negative")
    coeffs = [v % mod for v in c]

    def mul(p: list[int], q: list[int]) -> list[int]:
        t = [0] * (2 * size)
        for i, pi in enumerate(p):
            if pi:
                for j, qj in enumerate(q):
                    t[i + j] = (t[i + j] + pi * qj) % mod
        for i in range(size - 2, -1, -1):
            lead = t[i + size]
            if lead:
                for j in range(size):
                    t[i + size - j - 1] = (t[i + size - j - 1] + lead * coeffs[size - 1 - j]) % mod
        return t[:size]

    x = [0] * size
    if size > 1:
        x[1] = 1
    else:
        x[0] = coeffs[0]
    r = [1] + [0] * (size - 1)
    while n:
        if n & 1:
            r = mul(r, x)
        x = mul(x, x)
        n >>= 1
    return sum(ai * ri for ai, ri in zip(a, r)) % mod