# cpkit

Classic algorithms and data structures for competitive programming, in
plain Python with no runtime dependencies.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

| Module | Contents |
| --- | --- |
| `cpkit.numtheory` | `gcd`, `egcd`, `modpow`, `mulinv`, `crt`, `is_prime` (deterministic Miller–Rabin), `rho`, `factorize` (Pollard's rho), `eratosthenes`, `long_division`, `mex` |
| `cpkit.recurrences` | `matmul`, `matpow`, `affine_recurrence`, `linear_recurrence`, all modulo `mod` (default 10^9) |
| `cpkit.numeric` | `gauss` (Gauss–Jordan elimination, returns the rank and the reduced rows), `point_to_line_distance` (signed) |
| `cpkit.sequences` | `inversion_number`, `longest_increasing_subsequence`, `next_greater`, `radix_sort`, `partial_shuffle`, `permutations`, `nested_ranges`, `main` |
| `cpkit.heaps` | `BinaryHeap` (max-heap with optional capacity), `PairingHeap` and `RandomizedHeap` (mergeable min-heaps with an optional `key`) |
| `cpkit.rangequery` | `FenwickTree`, `SegmentTree` (range add, range sum), `PrefixSum` |
| `cpkit.unionfind` | `UnionFind` with `find`, `join`, `connected`, `size` |
| `cpkit.tries` | `Trie` (lowercase letters) and `BitTrie` (8-bit characters stored bit by bit), both counting strings with `inc`, `dec`, `count` |
| `cpkit.containers` | `Bitfield`, `ArrayQueue` (bounded by a lifetime number of pushes) |
| `cpkit.graph` | `to_graph`, `to_weighted_graph`, `bellman_ford`, `dijkstra`, `floyd_warshall` |
| `cpkit.lca` | `EulerTourLCA`, `HeavyLightLCA` |
| `cpkit.textalgo` | `prefix_function`, `kmp_count`, `is_cyclic`, `aho_corasick`, `suffix_array`, `lcp_array`, `repeated_substrings`, `split` |
| `cpkit.reader` | `TokenReader` with `read_int`, `read_float`, `read_until` over a text stream (standard input by default) |

Errors are raised as exceptions: for example `crt` raises `ValueError`
when the congruences have no solution, and popping an empty heap raises
`IndexError`.

## Examples

Number theory:

    from cpkit.numtheory import crt, factorize, is_prime, mulinv

    is_prime(1_000_000_007)      # True
    factorize(360)               # [2, 2, 2, 3, 3, 5]
    mulinv(3, 7)                 # 5
    crt(2, 3, 3, 5)              # 8

Shortest paths on a weighted directed graph:

    from cpkit.graph import dijkstra, to_weighted_graph

    graph = to_weighted_graph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
    dijkstra(graph, 0)           # [0, 4, 5]

`bellman_ford` and `floyd_warshall` accept negative weights and report
`-inf` where a negative cycle makes a distance unbounded; unreachable
nodes get `inf`.

Range updates and queries:

    from cpkit.rangequery import SegmentTree

    tree = SegmentTree(10)
    tree.update(2, 5, 3)         # add 3 to positions 2..5
    tree.query(0, 9)             # 12

Lowest common ancestors in a tree rooted at node 0:

    from cpkit.graph import to_graph
    from cpkit.lca import EulerTourLCA

    tree = to_graph(4, [(0, 1), (1, 0), (0, 2), (2, 0), (2, 3), (3, 2)])
    EulerTourLCA(tree).query(1, 3)   # 0

String matching:

    from cpkit.textalgo import aho_corasick, kmp_count

    kmp_count("abababa", "aba")                  # 3
    aho_corasick("ushers", ["he", "she", "hers"])
    # [(1, 1), (0, 2), (2, 2)]  as (pattern index, start)

## Command line

The `cpkit-nested-ranges` command reads a count `n` followed by `n`
limits from standard input and prints every index tuple of an `n`-fold
nested loop, one per line, with values starting at 1 and the last
position varying fastest:

    echo "2 2 3" | cpkit-nested-ranges

## What it does not do

The package is a library of building blocks. Apart from
`cpkit-nested-ranges` it has no command-line tools, and nothing is
printed: functions such as `repeated_substrings` and `permutations`
return or yield their results for the caller to use.