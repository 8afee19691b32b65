# arraydrills

A collection of classic array exercises: sorting, searching, subarray
problems, stock profits, rearrangements, counting, medians and a few
optimisation puzzles. It also includes `NaiveVector`, a small growable
vector whose capacity starts at two and doubles when it fills up.

Everything is pure Python with no runtime dependencies. Python 3.10 or newer
is required.

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

| Module                     | What it holds |
|----------------------------|---------------|
| `arraydrills.collection`   | `Collectable`, `NaiveVector`, `VectorError`, and the `main` entry point |
| `arraydrills.sorting`      | `merge_sort`, `selection_sort` |
| `arraydrills.basics`       | `reverse_array`, `find_min_max`, `kth_smallest`, `kth_largest`, `sort_012`, `move_negative`, `rotate_by_one`, `find_union`, `find_intersection` |
| `arraydrills.subarrays`    | `max_subarray_sum`, `max_product`, `smallest_subarray_gt_x`, `has_zero_sum_subarray`, `longest_consecutive`, `trap_rain_water`, `min_jumps` |
| `arraydrills.stocks`       | `max_profit`, `max_profit_twice` |
| `arraydrills.rearrange`    | `next_permutation`, `rearrange_alternate`, `three_way_partition`, `merge_inplace` |
| `arraydrills.counting`     | `count_inversions`, `find_duplicate`, `is_subset`, `count_more_than_n_by_k`, `pair_sum`, `triplet_sum`, `common_elements` |
| `arraydrills.medians`      | `median_equal_arrays`, `median_diff_arrays` |
| `arraydrills.optimization` | `factorial`, `chocolate_distribution`, `min_height_diff`, `min_swaps`, `min_ops_palindrome`, `merge_intervals` |

Several functions work on the list they are given: the sorts,
`reverse_array`, `sort_012`, `move_negative`, `rotate_by_one` and everything
in `arraydrills.rearrange` reorder it in place and return `None`.
`count_inversions`, `triplet_sum`, `chocolate_distribution`,
`min_height_diff` and `merge_intervals` return a result and leave their input
list sorted.

Some behaviour worth knowing:

- `kth_smallest` and `kth_largest` take a 1-based `k` and return `None` when
  `k` is not smaller than the number of elements; a `k` below 1 raises
  `ValueError`.
- `sort_012` raises `ValueError` if the list holds anything other than 0, 1
  and 2.
- `median_equal_arrays` raises `ValueError` for lists of different lengths;
  `median_diff_arrays` raises `ValueError` when both are empty.
- `min_ops_palindrome` raises `ValueError` for an empty list.
- `min_jumps` and `chocolate_distribution` return `-1` when there is no
  answer.

## Examples

```python
from arraydrills.basics import find_union, kth_smallest
from arraydrills.subarrays import max_subarray_sum
from arraydrills.stocks import max_profit
from arraydrills.optimization import factorial

find_union([1, 2, 4, 5, 6], [2, 3, 5, 7])          # [1, 2, 3, 4, 5, 6, 7]
kth_smallest([7, 10, 4, 3, 20, 15], 3)             # 7
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
max_profit([7, 1, 5, 3, 6, 4])                     # 5
factorial(10)                                      # [3, 6, 2, 8, 8, 0, 0]
```

The vector tracks its length and the capacity it has grown to:

```python
from arraydrills.collection import NaiveVector

vector = NaiveVector()
vector.add(1)
vector.add(2)
len(vector)        # 2
vector.capacity    # 2
vector.add(3)
vector.capacity    # 4
```

## Command line

Installing the package provides an `arraydrills` command, which prints
`Hello, world!` and exits:

```
arraydrills
```

## Limitations

- `NaiveVector` offers adding and length/capacity only. Its `remove` accepts
  a request but leaves the contents unchanged, and there is no indexing or
  iteration over stored elements. `VectorError` is defined but no vector
  operation raises it.
- The `arraydrills` command does not run any of the exercises; use the
  functions from Python.