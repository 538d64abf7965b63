"""Number theory helpers: gcd, modular arithmetic, primality, factoring and sieving."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable

SIEVE_LIMIT = 100001

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_RHO_SEEDS = (2, 3, 4, 5, 7, 11, 13, 1031)
_TRIAL_PRIMES = (2, 3, 5, 7, 11, 13)
_DIGITS = frozenset("0123456789")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b > 0:
        a, b = b, a % b
    return a


def modpow(x: int, y: int, m: int) -> int:
    """Compute ``x**y mod m`` by repeated squaring; ``y == 0`` gives 1."""
    result = 1
    while y > 0:
        if y & 1:
            result = result * x % m
        x = x * x % m
        y >>= 1
    return result


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclid: return ``(g, x, y)`` with ``a*x + b*y == g``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def mulinv(a: int, m: int) -> int:
    """Multiplicative inverse of ``a`` modulo ``m``."""
    g, x, _ = egcd(a, m)
    if abs(g) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return (x * g) % m


def crt(a: int, n: int, b: int, m: int) -> int:
    """Smallest non-negative x with ``x = a (mod n)`` and ``x = b (mod m)``."""
    if n <= 0 or m <= 0:
        raise ValueError("moduli must be positive")
    g, x, _ = egcd(n, m)
    if (b - a) % g != 0:
        raise ValueError("no solution")
    lcm = n // g * m
    t = (b - a) // g * x % (m // g)
    return (a + n * t) % lcm


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all 64-bit integers."""
    if n % 2 == 0:
        return n == 2
    if n <= 3:
        return n == 3
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        if a > n - 2:
            continue
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def rho(n: int) -> int:
    """Return a non-trivial divisor of the composite ``n`` (Pollard's rho)."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} is not composite")
    for a in itertools.count(1):
        for seed in _RHO_SEEDS:
            x = y = seed
            d = 1
            while d == 1:
                x = (x * x + a) % n
                y = (y * y + a) % n
                y = (y * y + a) % n
                d = math.gcd(abs(x - y), n)
            if d != n:
                return d
    raise AssertionError("unreachable")


def factorize(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in the order they are found."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: list[int] = []
    for p in _TRIAL_PRIMES:
        while n % p == 0:
            n //= p
            factors.append(p)
    if n == 1:
        return factors
    pending = [n]
    while pending:
        k = pending.pop()
        if is_prime(k):
            factors.append(k)
        else:
            divisor = rho(k)
            pending.append(divisor)
            pending.append(k // divisor)
    return factors


def eratosthenes(limit: int = SIEVE_LIMIT) -> list[int]:
    """All primes strictly below ``limit``."""
    if limit < 2:
        return []
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def long_division(digits: str, n: int) -> tuple[str, int]:
    """Divide a decimal string by ``n``; return the quotient digits and the remainder.

    The quotient has no leading zeros and is empty when it is zero.
    """
    if not set(digits) <= _DIGITS:
        raise ValueError(f"not a decimal number: {digits!r}")
    if n <= 0:
        raise ValueError("divisor must be positive")
    quotient: list[str] = []
    remainder = 0
    for ch in digits:
        q, remainder = divmod(remainder * 10 + int(ch), n)
        if q or quotient:
            quotient.append(str(q))
    return "".join(quotient), remainder


def mex(values: Iterable[int]) -> int:
    """Smallest non-negative integer that does not occur in ``values``."""
    present = set(values)
    return next(i for i in itertools.count() if i not in present)