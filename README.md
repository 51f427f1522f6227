# dsakit

A small library of classic algorithms on lists, matrices and strings:
sorting, searching, counting and merging. Each one is a plain Python
function. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`,
`quick_sort`, `recursive_bubble_sort` and `recursive_insertion_sort`.
Each takes any iterable and returns a new sorted list. The input is left
unchanged. `sort_zero_one_two` sorts a sequence of 0s, 1s and 2s in one
pass (Dutch national flag). Any value other than 0 or 1 goes into the
final group.

### `dsakit.extremes`

- `largest(values)` returns the largest value. It raises `ValueError` on
  an empty input.
- `second_smallest(values)` and `second_largest(values)` return the second
  distinct extreme. They raise `ValueError` for fewer than two values and
  return `None` when all values are equal.
- `second_extremes(values)` returns a `SecondExtremes` named tuple with
  `smallest` and `largest` fields.
- `max_profit(prices)` returns the best profit from one buy followed by a
  later sell, or 0.

### `dsakit.combinatorics`

- `next_permutation(values)` returns the next lexicographic permutation.
  The last permutation wraps round to ascending order.
- `pascal_row(row)` returns a 1-based row of Pascal's triangle, and
  `pascal_triangle(n)` returns the first `n` rows.
- `unique_paths(m, n)` counts the right/down paths across an `m` by `n`
  grid.

`pascal_row` and `unique_paths` raise `ValueError` for non-positive sizes.

### `dsakit.matrix`

- `set_zeroes(matrix)` returns a copy in which every row and column that
  holds a zero is all zeros.
- `rotate(matrix)` returns a square matrix turned 90° clockwise. It raises
  `ValueError` if the matrix is not square.
- `search_matrix(matrix, target)` runs a binary search over a matrix whose
  rows, read in order, are sorted.

### `dsakit.inversions`

- `count_inversions(values)` counts the pairs `i < j` with
  `values[i] > values[j]`.
- `count_reverse_pairs(values)` counts the pairs `i < j` with
  `values[i] > 2 * values[j]`.

### `dsakit.merging`

- `merge_sorted_in_place(first, second)` rearranges two sorted lists in
  place, using the gap method. Afterwards `first` holds the smallest
  values and `second` holds the rest. It returns `None`.
- `merge_intervals(intervals)` merges overlapping or touching intervals.
  It returns them as `(start, end)` tuples sorted by start.

### `dsakit.counting`

- `find_duplicate(values)` returns the repeated value among `n + 1`
  integers drawn from `1..n`. It uses Floyd's cycle detection.
- `find_repeating_and_missing(values)` returns `(repeating, missing)` for
  a list meant to hold `1..n` once each.
- `majority_element(values)` returns the value that occurs more than
  `n // 2` times, or `None`.
- `majority_elements(values)` returns a list of the values (at most two)
  that occur more than `n // 3` times.

### `dsakit.subarrays`

- `has_two_sum(values, target)` tells whether two values add up to
  `target`.
- `four_sum(values, target)` returns the distinct ascending quadruplets
  that sum to `target`.
- `count_subarrays_with_xor(values, k)` counts the contiguous subarrays
  whose XOR is `k`.
- `longest_zero_sum_subarray(values)` returns the length of the longest
  contiguous subarray that sums to zero.
- `longest_consecutive(values)` returns the length of the longest run of
  consecutive integers present in the input.
- `longest_unique_substring(text)` returns the length of the longest
  substring with no repeated character.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.combinatorics import next_permutation, pascal_triangle
from dsakit.merging import merge_intervals
from dsakit.subarrays import four_sum

merge_sort([9, 4, 7, 6, 3, 1, 5])
# [1, 3, 4, 5, 6, 7, 9]

next_permutation([2, 1, 5, 4, 3, 0, 0])
# [2, 3, 0, 0, 1, 4, 5]

pascal_triangle(3)
# [[1], [1, 1], [1, 2, 1]]

merge_intervals([[1, 3], [8, 10], [2, 6], [15, 18]])
# [(1, 6), (8, 10), (15, 18)]

four_sum([4, 3, 3, 4, 4, 2, 1, 2, 1, 1], 9)
# [(1, 1, 3, 4), (1, 2, 2, 4), (1, 2, 3, 3)]
```

## What it does not do

dsakit is a library only. It has no command-line program. It does not
read input from files or the terminal. You call the functions from
Python.