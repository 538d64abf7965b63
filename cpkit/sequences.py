"""Sequence algorithms: inversions, LIS, next greater, radix sort, shuffles and enumeration."""

from __future__ import annotations

import argparse
import itertools
import random
import re
import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

_DIGIT_BITS = 16
_DIGIT_MASK = (1 << _DIGIT_BITS) - 1
_INT_PATTERN = re.compile(r"(-*)(\d+)")


def _sort_count(items: list) -> tuple[list, int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_count(items[:mid])
    right, right_count = _sort_count(items[mid:])
    merged = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            count += len(left) - i
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_number(values: Iterable) -> int:
    """Number of adjacent swaps needed to sort ``values``, in O(n log n)."""
    return _sort_count(list(values))[1]


def longest_increasing_subsequence(values: Iterable) -> list:
    """One longest strictly increasing subsequence of ``values``, in O(n log n)."""
    items = list(values)
    tails: list = []
    preds: list = []
    for v in items:
        pos = bisect_left(tails, v)
        preds.append(tails[pos - 1] if pos else None)
        if pos == len(tails):
            tails.append(v)
        else:
            tails[pos] = v
    result: list = []
    wanted = tails[-1] if tails else None
    for v, pred in zip(reversed(items), reversed(preds)):
        if len(result) == len(tails):
            break
        if v == wanted:
            result.append(v)
            wanted = pred
    result.reverse()
    return result


def next_greater(values: Sequence) -> list[int]:
    """For each position, the index of the next strictly greater element, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i, v in enumerate(values):
        while stack and values[stack[-1]] <= v:
            result[stack.pop()] = i
        stack.append(i)
    return result


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers with 16-bit least-significant-digit passes."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items, default=0)
    shift = 0
    while largest >> shift:
        buckets: list[list[int]] = [[] for _ in range(1 << _DIGIT_BITS)]
        for v in items:
            buckets[(v >> shift) & _DIGIT_MASK].append(v)
        items = [v for bucket in buckets for v in bucket]
        shift += _DIGIT_BITS
    return items


def partial_shuffle(values: Iterable, m: int, rng: Any = None) -> list:
    """Return a copy whose first ``m`` positions are a uniform random draw without replacement."""
    items = list(values)
    if not 0 <= m <= len(items):
        raise ValueError("m must lie between 0 and the number of values")
    source = rng if rng is not None else random
    for i in range(m):
        j = source.randrange(i, len(items))
        items[i], items[j] = items[j], items[i]
    return items


def permutations(values: Iterable) -> Iterator[tuple]:
    """Yield every ordering of ``values``, generated by recursive swapping."""
    items = list(values)

    def visit(x: int) -> Iterator[tuple]:
        if x == len(items):
            yield tuple(items)
            return
        for i in range(x, len(items)):
            items[x], items[i] = items[i], items[x]
            yield from visit(x + 1)
            items[x], items[i] = items[i], items[x]

    yield from visit(0)


def nested_ranges(limits: Iterable[int]) -> Iterator[tuple[int, ...]]:
    """Yield the index tuples of nested loops ``1..k`` for each limit, last varying fastest."""
    yield from itertools.product(*(range(1, k + 1) for k in limits))


def _read_ints(text: str) -> Iterator[int]:
    for signs, digits in _INT_PATTERN.findall(text):
        value = int(digits)
        yield -value if len(signs) % 2 else value


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many limits from stdin and print every nested index tuple."""
    parser = argparse.ArgumentParser(
        prog="nested-ranges",
        description="Read n and n limits from standard input; print all index tuples.",
    )
    parser.parse_args(argv)
    numbers = _read_ints(sys.stdin.read())
    try:
        count = next(numbers)
        limits = [next(numbers) for _ in range(count)]
    except StopIteration:
        parser.error("expected a count followed by that many limits")
    for combo in nested_ranges(limits):
        sys.stdout.write("".join(f"{k} " for k in combo) + "\n")
    return 0