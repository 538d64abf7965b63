"""String algorithms: KMP, Aho-Corasick, suffix and LCP arrays, and splitting."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Sequence

WHITESPACE = "\n\t\r "


def prefix_function(s: Sequence) -> list[int]:
    """For each i, the length of the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    k = 0
    for i, ch in enumerate(s[1:], start=1):
        while k and ch != s[k]:
            k = pi[k - 1]
        if ch == s[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_count(text: Sequence, pattern: Sequence) -> int:
    """Number of possibly overlapping occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    m = len(pattern)
    k = count = 0
    for ch in text:
        while k and ch != pattern[k]:
            k = pi[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == m:
            count += 1
            k = pi[k - 1]
    return count


def is_cyclic(t: str) -> bool:
    """Whether ``t`` is a shorter string repeated at least twice."""
    if not t:
        return False
    return kmp_count(t + t, t) > 2


def aho_corasick(text: str, patterns: Sequence[str]) -> list[tuple[int, int]]:
    """All occurrences of ``patterns`` in ``text`` as ``(pattern index, start)`` pairs.

    Matches are listed by end position; at one end position longer patterns
    come first and equal patterns in reverse order of insertion.
    """
    children: list[dict[str, int]] = [{}]
    outputs: list[list[int]] = [[]]
    lengths = [len(p) for p in patterns]
    for index, pattern in enumerate(patterns):
        if not pattern:
            raise ValueError("patterns must not be empty")
        node = 0
        for ch in pattern:
            nxt = children[node].get(ch)
            if nxt is None:
                nxt = len(children)
                children[node][ch] = nxt
                children.append({})
                outputs.append([])
            node = nxt
        outputs[node].insert(0, index)

    fail = [0] * len(children)
    exit_link: list[int | None] = [None] * len(children)
    queue = deque(children[0].values())
    while queue:
        u = queue.popleft()
        for ch, v in children[u].items():
            f = fail[u]
            while f and ch not in children[f]:
                f = fail[f]
            target = children[f].get(ch, 0) if u else 0
            fail[v] = target if target != v else 0
            exit_link[v] = fail[v] if outputs[fail[v]] else exit_link[fail[v]]
            queue.append(v)

    matches: list[tuple[int, int]] = []
    state = 0
    for end, ch in enumerate(text, start=1):
        while state and ch not in children[state]:
            state = fail[state]
        state = children[state].get(ch, 0)
        node = state if outputs[state] else exit_link[state]
        while node is not None:
            matches.extend((index, end - lengths[index]) for index in outputs[node])
            node = exit_link[node]
    return matches


def suffix_array(s: Sequence) -> list[int]:
    """Start indices of the suffixes of ``s`` in sorted order, by prefix doubling."""
    n = len(s)
    order = list(range(n))
    if n <= 1:
        return order
    alphabet = {c: i for i, c in enumerate(sorted(set(s)))}
    rank = [alphabet[c] for c in s]
    step = 1
    while True:
        def key(i: int, rank: list[int] = rank, step: int = step) -> tuple[int, int]:
            return rank[i], rank[i + step] if i + step < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(order, order[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) < key(cur))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            return order
        step *= 2


def lcp_array(s: Sequence, sa: Sequence[int]) -> list[int]:
    """Longest common prefix of each pair of neighbouring suffixes in ``sa`` (Kasai)."""
    n = len(s)
    if sorted(sa) != list(range(n)):
        raise ValueError("sa is not a permutation of the positions of s")
    rank = [0] * n
    for i, start in enumerate(sa):
        rank[start] = i
    lcp = [0] * max(n - 1, 0)
    k = 0
    for i, r in enumerate(rank):
        if r == n - 1:
            k = 0
            continue
        j = sa[r + 1]
        while i + k < n and j + k < n and s[i + k] == s[j + k]:
            k += 1
        lcp[r] = k
        if k:
            k -= 1
    return lcp


def repeated_substrings(s: str, sa: Sequence[int], lcp: Sequence[int], k: int) -> list[str]:
    """Every length-``k`` substring occurring more than once, once each, in suffix order."""
    if k < 0:
        raise ValueError("length must be non-negative")
    if k == 0:
        return []
    found: list[str] = []
    fresh = True
    for start, common in zip(sa, lcp):
        if fresh and common >= k:
            found.append(s[start : start + k])
            fresh = False
        elif common < k:
            fresh = True
    return found


def split(s: str, delimiters: str | None = None) -> list[str]:
    """Maximal runs of characters not in ``delimiters`` (whitespace by default)."""
    stops = set(WHITESPACE if delimiters is None else delimiters)
    return ["".join(run) for is_stop, run in itertools.groupby(s, key=stops.__contains__) if not is_stop]