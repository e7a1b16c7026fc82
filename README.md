# dpkit

A collection of classic dynamic-programming algorithms as plain Python
functions. Most problems come in three variants that give the same answer:

- `*_memo`: top-down recursion with a cache,
- `*_table`: bottom-up over a full table,
- `*_compact`: bottom-up keeping only the rows still needed.

The `*_memo` variants recurse once per step, so very long inputs can exceed
Python's recursion limit; the other variants have no such limit.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dpkit.paths`

Counting and minimising paths over sequences, grids and triangles.

```python
from dpkit.paths import climb_stairs, rob, unique_paths, min_path_sum_table

climb_stairs(5)                       # 8
rob([2, 7, 9, 3, 1])                  # 12
unique_paths(3, 7)                    # 28
min_path_sum_table([[1, 3, 1],
                    [1, 5, 1],
                    [4, 2, 1]])       # 7
```

Also: `unique_paths_with_obstacles_memo`, `_table` and `_compact(grid)`, where a
cell holding `1` is blocked; `min_path_sum_memo(grid)` and
`min_path_sum_compact(grid)`; and `minimum_total_memo`, `_table` and
`_compact(triangle)` for the smallest top-to-bottom sum through a triangle.

`unique_paths` raises `ValueError` for a non-positive dimension; the grid
functions raise `ValueError` for an empty grid, and the triangle functions for
an empty triangle.

### `dpkit.subsets`

Equal-sum partitions, coin change, longest increasing subsequence and the
largest divisible subset.

```python
from dpkit.subsets import (
    can_partition_table, change_compact, length_of_lis_compact, largest_divisible_subset,
)

can_partition_table([1, 5, 11, 5])                   # True
change_compact(5, [1, 2, 5])                         # 4
length_of_lis_compact([10, 9, 2, 5, 3, 7, 101, 18])  # 4
largest_divisible_subset([1, 2, 4, 8])               # [1, 2, 4, 8]
```

Each of `can_partition`, `change` and `length_of_lis` has `_memo`, `_table` and
`_compact` variants. `largest_divisible_subset` returns its subset in ascending
order.

The `change_*` functions raise `ValueError` for an empty coin list or a
negative amount. `can_partition_table`, `can_partition_compact`,
`length_of_lis_compact` and `largest_divisible_subset` raise `ValueError` for
an empty list.

### `dpkit.subsequences`

String alignment problems.

```python
from dpkit.subsequences import (
    longest_common_subsequence_table, longest_palindrome_subseq,
    min_insertions_table, shortest_common_supersequence,
    num_distinct_table, min_distance_table,
)

longest_common_subsequence_table("abcde", "ace")   # 3
longest_palindrome_subseq("bbbab")                 # 4
min_insertions_table("mbadm")                      # 2
shortest_common_supersequence("abac", "cab")       # "cabac"
num_distinct_table("rabbbit", "rabbit")            # 3
min_distance_table("horse", "ros")                 # 3
```

`longest_common_subsequence`, `num_distinct` and `min_distance` (edit distance)
each have `_memo`, `_table` and `_compact` variants; `min_insertions` has
`_table` and `_compact`.

### `dpkit.trading`

Best profit from buying and selling a stock given a list of daily prices.

```python
from dpkit.trading import (
    max_profit_unlimited_table, max_profit_two_table,
    max_profit_k_table, max_profit_fee_table,
)

max_profit_unlimited_table([7, 1, 5, 3, 6, 4])     # 7
max_profit_two_table([3, 3, 5, 0, 0, 3, 1, 4])     # 6
max_profit_k_table(2, [3, 2, 6, 5, 0, 3])          # 7
max_profit_fee_table([1, 3, 2, 8, 4, 9], 2)        # 8
```

Every rule (`unlimited`, `two`, `k`, `fee`) has `_memo`, `_table` and
`_compact` variants. The `max_profit_k_*` functions raise `ValueError` for a
negative `k`.

## What it does not do

dpkit is a library of functions only: it has no command-line tool and reads
or writes no files.