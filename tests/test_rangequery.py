import random

import pytest

from cpkit.rangequery import FenwickTree, PrefixSum, SegmentTree


def test_fenwick_matches_brute_force():
    rng = random.Random(1)
    n = 37
    tree = FenwickTree(n)
    values = [0] * n
    for _ in range(300):
        i, k = rng.randrange(n), rng.randrange(-50, 50)
        tree.add(i, k)
        values[i] += k
        j = rng.randrange(n)
        assert tree.prefix_sum(j) == sum(values[: j + 1])
    assert [tree.prefix_sum(j) for j in range(n)] == [sum(values[: j + 1]) for j in range(n)]


def test_fenwick_empty_prefix_and_len():
    tree = FenwickTree(5)
    tree.add(2, 7)
    assert tree.prefix_sum(-1) == 0
    assert len(tree) == 5


def test_fenwick_rejects_bad_indices():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)
    with pytest.raises(IndexError):
        tree.prefix_sum(-2)
    with pytest.raises(ValueError):
        FenwickTree(-1)


@pytest.mark.parametrize("n", [1, 2, 7, 64, 101])
def test_segment_tree_matches_brute_force(n):
    rng = random.Random(n)
    tree = SegmentTree(n)
    values = [0] * n
    for _ in range(300):
        x = rng.randrange(n)
        y = rng.randrange(x, n)
        if rng.random() < 0.5:
            z = rng.randrange(-20, 20)
            tree.update(x, y, z)
            for i in range(x, y + 1):
                values[i] += z
        else:
            assert tree.query(x, y) == sum(values[x : y + 1])
    assert [tree.query(i, i) for i in range(n)] == values


def test_segment_tree_starts_at_zero():
    tree = SegmentTree(10)
    assert tree.query(0, len(tree) - 1) == 0


@pytest.mark.parametrize("x, y", [(3, 2), (-1, 2), (0, 10)])
def test_segment_tree_rejects_bad_ranges(x, y):
    tree = SegmentTree(10)
    with pytest.raises(IndexError):
        tree.query(x, y)
    with pytest.raises(IndexError):
        tree.update(x, y, 1)


def test_prefix_sum_queries_match_slices():
    values = [3, -1, 4, 1, -5, 9, 2, 6]
    ps = PrefixSum(values)
    assert len(ps) == len(values)
    for x in range(len(values)):
        for y in range(x, len(values)):
            assert ps.query(x, y) == sum(values[x : y + 1])


def test_prefix_sum_update_and_set():
    rng = random.Random(5)
    values = [rng.randrange(100) for _ in range(20)]
    ps = PrefixSum(values)
    for _ in range(100):
        i, z = rng.randrange(20), rng.randrange(-30, 30)
        if rng.random() < 0.5:
            ps.update(i, z)
            values[i] += z
        else:
            ps.set(i, z)
            values[i] = z
            assert ps.query(i, i) == z
        x = rng.randrange(20)
        y = rng.randrange(x, 20)
        assert ps.query(x, y) == sum(values[x : y + 1])


def test_prefix_sum_reversed_range_is_empty():
    ps = PrefixSum([1, 2, 3])
    assert ps.query(2, 1) == 0


def test_prefix_sum_rejects_bad_indices():
    ps = PrefixSum([1, 2, 3])
    with pytest.raises(IndexError):
        ps.query(0, 3)
    with pytest.raises(IndexError):
        ps.update(-1, 1)