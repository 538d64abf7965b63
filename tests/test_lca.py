import random

import pytest

from cpkit.graph import to_graph
from cpkit.lca import EulerTourLCA, HeavyLightLCA

CLASSES = [EulerTourLCA, HeavyLightLCA]


def _random_tree(seed, n):
    rng = random.Random(seed)
    parent = [0] + [rng.randrange(i) for i in range(1, n)]
    edges = []
    for child in range(1, n):
        edges.append((parent[child], child))
        edges.append((child, parent[child]))
    rng.shuffle(edges)
    return parent, to_graph(n, edges)


def _ancestors(parent, x):
    chain = [x]
    while x != 0:
        x = parent[x]
        chain.append(x)
    return chain


@pytest.mark.parametrize("seed", range(4))
def test_implementations_agree(seed):
    _, graph = _random_tree(seed, 30)
    euler, heavy = EulerTourLCA(graph), HeavyLightLCA(graph)
    for u in range(30):
        for v in range(30):
            assert euler.query(u, v) == heavy.query(u, v)


@pytest.mark.parametrize("cls", CLASSES)
@pytest.mark.parametrize("seed", range(3))
def test_result_is_deepest_common_ancestor(cls, seed):
    parent, graph = _random_tree(50 + seed, 25)
    lca = cls(graph)
    for u in range(25):
        for v in range(25):
            common = set(_ancestors(parent, u)) & set(_ancestors(parent, v))
            deepest = max(common, key=lambda a: len(_ancestors(parent, a)))
            assert lca.query(u, v) == deepest


@pytest.mark.parametrize("cls", CLASSES)
def test_path_and_symmetry(cls):
    graph = to_graph(4, [(0, 1), (1, 0), (1, 2), (2, 1), (2, 3), (3, 2)])
    lca = cls(graph)
    assert lca.query(3, 1) == 1
    assert lca.query(1, 3) == 1
    assert lca.query(2, 2) == 2


@pytest.mark.parametrize("cls", CLASSES)
def test_other_root(cls):
    graph = to_graph(3, [(0, 1), (1, 0), (1, 2), (2, 1)])
    lca = cls(graph, root=2)
    assert lca.query(0, 1) == 1


@pytest.mark.parametrize("cls", CLASSES)
def test_disconnected_graph_rejected(cls):
    with pytest.raises(ValueError):
        cls(to_graph(3, [(0, 1), (1, 0)]))


@pytest.mark.parametrize("cls", CLASSES)
def test_cycle_rejected(cls):
    edges = [(0, 1), (1, 0), (1, 2), (2, 1), (2, 0), (0, 2)]
    with pytest.raises(ValueError):
        cls(to_graph(3, edges))


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        EulerTourLCA([])
    with pytest.raises(ValueError):
        HeavyLightLCA([])


@pytest.mark.parametrize("cls", CLASSES)
def test_query_out_of_range(cls):
    lca = cls(to_graph(2, [(0, 1), (1, 0)]))
    with pytest.raises(IndexError):
        lca.query(0, 2)