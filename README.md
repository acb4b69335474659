# algosolve

Solutions to classic algorithm problems, written in plain Python. The package
covers disjoint sets, graph problems, shortest paths, string matching and
hashing, plane geometry, knapsack and other dynamic-programming problems,
sorting and searching, small puzzles, and a non-negative decimal integer type
of unbounded size.

## Installation

```
pip install algosolve
```

To run the test suite:

```
pip install "algosolve[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosolve.disjoint_set` | `DisjointSet`: union–find with path compression and set sizes |
| `algosolve.graphs` | `max_rook_placement`, `has_unique_topological_order`, `de_bruijn_sequence`, `edges_to_upgrade`, `constraints_satisfiable`, `is_bipartite`, `min_conflict_threshold` |
| `algosolve.paths` | `shortest_path`, `min_bottleneck_path`, `min_kth_edge_path` |
| `algosolve.strings` | `kmp_match`, `prefix_suffix_product`, `count_palindromes`, `count_approximate_matches`, `find_submatrix`, `count_distinct_subsequences`, `alignment_score`, `PrefixCounter`, `Dictionary`, `MaxXorIndex` |
| `algosolve.geometry` | `cross`, `convex_hull`, `hull_signature`, `rounded_rect_hull_perimeter`, `segment_intersection` |
| `algosolve.point_sets` | `closest_pair_distance`, `count_right_triangles`, `count_right_triangles_sorted`, `closest_bichromatic_distance_sq` |
| `algosolve.knapsack` | `mixed_knapsack`, `knapsack_without_item`, `min_ecoins` |
| `algosolve.dp` | `count_colorings`, `max_jump_score`, `min_grass_loss`, `min_total_distance`, `max_bridge_value`, `min_questions`, `max_submatrix_sum` |
| `algosolve.sorting` | `xorshift`, `generate_data`, `array_hash`, `radix_sort`, `max_gap`, `count_inversions` |
| `algosolve.searching` | `upper_bound`, `lower_bound`, `min_max_partition`, `count_bounded_ranges`, `lcs_of_permutations` |
| `algosolve.puzzles` | `sieve_primes`, `deng_numbers`, `max_wins`, `n_queens`, `minimal_generators`, `huffman_cost`, `wall_follower_counts` |
| `algosolve.bigint` | `BigInt`, `bigint_sqrt`, `nth_catalan`, `nth_fibonacci`, `factorial` |

Graph functions in `algosolve.graphs` and `algosolve.paths` number nodes from
1 unless their docstring says otherwise (`min_bottleneck_path` indexes nodes
from 0, like its `weights` list). `closest_bichromatic_distance_sq` uses
`sortedcontainers.SortedList` for its sweep window.

## Examples

```python
from algosolve.disjoint_set import DisjointSet
from algosolve.strings import kmp_match
from algosolve.puzzles import n_queens, huffman_cost
from algosolve.bigint import BigInt, factorial

ds = DisjointSet(5)
ds.union(0, 1)
ds.union(3, 4)
ds.set_count()          # 3
ds.is_same_set(0, 1)    # True

kmp_match("abababa", "aba")   # [0, 2, 4]

n_queens(8)                   # 92
huffman_cost([1, 2, 3, 4])    # 19

str(BigInt("12345") * BigInt(1000))   # "12345000"
str(factorial(20))                    # "2432902008176640000"
```

## Errors and missing results

Invalid input raises an exception rather than returning a status code. For
example, building a `BigInt` from a string holding a non-digit raises
`ValueError`, dividing a `BigInt` by zero raises `ZeroDivisionError`, and
subtracting a larger `BigInt` from a smaller one raises `ArithmeticError`.
`has_unique_topological_order` raises `ValueError` when the graph has a
cycle. Where no answer exists, as with an unreachable target in
`shortest_path`, `min_bottleneck_path`, `min_kth_edge_path` or `min_ecoins`,
the function returns `None`.

## What the package does not do

The package is a library only. It has no command-line programs and reads no
problem input from standard input or files: every function takes ordinary
Python values and returns its answer.