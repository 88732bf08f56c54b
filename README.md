# arrayalgos

A small library of classic algorithms on integer sequences, strings and
singly linked lists. Every function takes plain Python values and returns
plain Python values. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `arrayalgos.prefix_sums`

- `count_subarrays_with_sum(arr, k)`: the number of contiguous subarrays whose
  sum is `k`.
- `count_subarrays_with_xor(arr, k)`: the number of contiguous subarrays whose
  XOR is `k`.
- `subarray_with_sum(arr, target)`: the 1-based inclusive bounds
  `(start, end)` of the first subarray of non-negative values summing to
  `target`, or `None` if there is none. It uses `subarray_with_sum_brute`.
- `subarray_with_sum_brute(arr, target)`: tries every start position in turn,
  stopping a scan once the running sum passes `target`; meant for
  non-negative input.
- `subarray_with_sum_prefix(arr, target)`: finds the matching subarray that
  ends earliest, using a table of running sums; works with negative values.
- `subarray_with_sum_window(arr, target)`: a linear-time window over
  non-negative values. A single-element sequence is never searched and gives
  `None`.
- `find_equilibrium(arr)`: the first index whose left-hand and right-hand sums
  are equal, or `None`.
- `longest_subarray_with_sum(arr, k)`: the length of the longest subarray that
  sums to `k`, or `0`.
- `longest_balanced_binary_subarray(arr)`: the length of the longest subarray
  of a 0/1 sequence holding as many zeros as ones.
- `product_except_self(arr)`: for each position, the product of all the other
  elements, computed without per-position multiplication loops.

### `arrayalgos.two_pointers`

- `count_triplets(arr, target)`: index triplets of a **sorted** sequence whose
  values sum to `target`.
- `count_pairs_below(arr, target)`: pairs whose sum is strictly less than
  `target` (the input is sorted internally).
- `closest_pair_sum(arr, target)`: the pair, in ascending order, whose sum is
  closest to `target`, or `None` when fewer than two values are given.
- `count_pairs_with_sum(arr, target)`: index pairs of a **sorted** sequence
  whose values sum to `target`.
- `count_triangles(arr)`: triples of lengths that form a non-degenerate
  triangle.
- `trapped_water(heights)`: units of rain water held between the bars.
- `max_container_water(heights)`: the largest area held between two lines.

### `arrayalgos.sliding_window`

- `count_distinct_in_windows(arr, k)`: the number of distinct values in each
  window of length `k`. Raises `ValueError` unless `1 <= k <= len(arr)`.
- `longest_unique_substring(s)`: the length of the longest substring with no
  repeated character.

### `arrayalgos.linked_list`

- `Node`: a singly linked list node with `data` and `next`. Iterating over a
  node yields the values from that node to the end of the list.
- `build_list(values)`: link the values into a list and return its head, or
  `None` for no values.
- `reverse_list(head)`: reverse in place and return the new head.
- `rotate_list(head, k)`: rotate left by `k` nodes in place and return the new
  head. Raises `ValueError` for a negative `k`.

## Example

```python
from arrayalgos.prefix_sums import count_subarrays_with_sum, find_equilibrium
from arrayalgos.two_pointers import trapped_water
from arrayalgos.linked_list import build_list, reverse_list

count_subarrays_with_sum([10, 2, -2, -20, 10], -10)   # 3
trapped_water([3, 0, 1, 0, 4, 0, 2])                  # 10
find_equilibrium([1, 2])                              # None
list(reverse_list(build_list([1, 2, 3])))             # [3, 2, 1]
```

## Scope

This is a library only: it has no command-line program, and it reads no
files or input of its own.