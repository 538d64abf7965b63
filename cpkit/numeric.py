"""Floating-point helpers: Gauss-Jordan elimination and point-to-line distance."""

from __future__ import annotations

import cmath
from collections.abc import Sequence

EPSILON = 1e-9

Point = complex | tuple[float, float]


def gauss(matrix: Sequence[Sequence[float]], s: int | None = None) -> tuple[int, list[list[float]]]:
    """Gauss-Jordan elimination pivoting on the first ``s`` columns.

    Returns the rank and the reduced rows; the input is left untouched.
    Runs in O(nm + rnm) for an n x m matrix of rank r.
    """
    rows = [[float(v) for v in row] for row in matrix]
    width = len(rows[0]) if rows else 0
    if s is None:
        s = width
    if s > width:
        raise ValueError("pivot column count exceeds matrix width")
    rank = 0
    for pivot_row in rows:
        t = next((col for col in range(s) if abs(pivot_row[col]) >= EPSILON), None)
        if t is None:
            continue
        rank += 1
        pivot = pivot_row[t]
        pivot_row[t:] = [v / pivot for v in pivot_row[t:]]
        for other in rows:
            if other is pivot_row:
                continue
            factor = other[t]
            other[t:] = [v - p * factor for v, p in zip(other[t:], pivot_row[t:])]
    return rank, rows


def _as_complex(p: Point) -> complex:
    if isinstance(p, tuple):
        return complex(*p)
    return complex(p)


def point_to_line_distance(a: Point, b: Point, c: Point) -> float:
    """Signed distance from ``c`` to the line through ``a`` and ``b``.

    Positive when ``c`` lies to the left of the direction from ``a`` to ``b``.
    """
    a, b, c = _as_complex(a), _as_complex(b), _as_complex(c)
    return ((c - a) * cmath.exp(-1j * cmath.phase(b - a))).imag