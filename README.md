# algokit

A small library of classic algorithms in plain Python, with no third-party
dependencies. Every routine is a function (or a small dataclass) that takes
ordinary Python values and returns a result; invalid input raises
`ValueError`.

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

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `heap_sort`, `bubble_sort`, `selection_sort`, `exchange_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `counting_sort`, `cycle_sort` |
| `algokit.searching` | `binary_search`, `contains_sorted` |
| `algokit.arrays` | `three_sum`, `two_sum`, `min_jumps`, `min_platforms`, `stock_span`, `avoid_flood`, `furthest_building`, `count_inversions` |
| `algokit.strings` | `reverse_words`, `is_balanced`, `is_valid_brackets`, `is_anagram`, `min_ternary_string` |
| `algokit.numbers` | `prime_factors`, `binary_to_decimal`, `decimal_to_binary`, `fibonacci`, `is_perfect`, `knapsack`, `calculate` |
| `algokit.patterns` | `triangle`, `sparse_triplets` |
| `algokit.graphs` | `dijkstra` (returns `ShortestPaths`), `prim_mst` (returns `SpanningTree`), `nearest_neighbour_tour`, `kruskal_mst_weight`, `transpose` |
| `algokit.trees` | `TreeNode`, `QuadNode`, `max_depth`, `is_height_balanced`, `construct_quad_tree` |
| `algokit.linked_lists` | `ListNode`, `build_list`, `to_list`, `push_front`, `insertion_sort_list`, `delete_value`, `merge_sorted`, `rotate_right` |
| `algokit.checksum` | `ones_complement_sum`, `checksum` |

## Examples

```python
from algokit.sorting import heap_sort
from algokit.arrays import stock_span, three_sum
from algokit.numbers import knapsack, decimal_to_binary
from algokit.linked_lists import build_list, rotate_right, to_list

heap_sort([12, 11, 13, 5, 6, 7])            # [5, 6, 7, 11, 12, 13]
stock_span([10, 4, 5, 90, 120, 80])         # [1, 1, 2, 4, 5, 1]
three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
decimal_to_binary(244)                      # "11110100"

to_list(rotate_right(build_list([1, 2, 3, 4, 5]), 2))  # [4, 5, 1, 2, 3]
```

Graph routines take a cost adjacency matrix:

```python
from algokit.graphs import dijkstra

paths = dijkstra([[0, 4, 1], [4, 0, 2], [1, 2, 0]], 0)
paths.distances    # [0, 3, 1]
paths.path_to(1)   # [0, 2, 1]
```

## Behaviour worth knowing

- Sorting functions accept any iterable and return a new list; the input is
  left untouched. `counting_sort` accepts only non-negative integers.
- `binary_search` expects sorted input and returns an index or `-1`;
  `contains_sorted` sorts its input first and returns a boolean.
- `is_valid_brackets` ignores characters that are not brackets, while
  `is_balanced` is strict: any non-opening character met while no bracket is
  open makes the text unbalanced.
- `reverse_words` splits on single spaces, so runs of spaces are kept.
- `min_ternary_string` accepts only the characters `0`, `1` and `2`.
- `binary_to_decimal` reads the decimal digits of an integer as bits
  (`binary_to_decimal(101)` is `5`); `decimal_to_binary` returns an empty
  string for values that are not positive.
- `calculate` supports `+ - * /` on floats; division by zero gives an
  infinity, or NaN for zero over zero.
- `min_platforms` takes times in 24-hour `HHMM` form and always answers at
  least 1.
- In `dijkstra` and `nearest_neighbour_tour` a matrix entry of `0` or `None`
  means no edge; in `prim_mst` `None` or an infinity means no edge, and a
  disconnected graph raises `ValueError`. `nearest_neighbour_tour` closes its
  tour at city `0` and returns `(tour, cost)`.
- `kruskal_mst_weight` numbers vertices from `0` to `node_count` inclusive
  and takes edges as `(u, v, weight)` triples.
- `construct_quad_tree` needs a square grid whose side is a power of two, and
  returns `None` for an empty grid.
- `checksum` works on words given as equal-width lists of `0`/`1` bits, most
  significant first.

## What it does not do

There is no command-line interface or interactive prompt: everything is
called from Python code, and nothing reads from standard input or writes
files.