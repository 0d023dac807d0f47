# arraykit

A small collection of classic algorithms on sequences of integers, written as
plain functions. It has four modules:

- `arraykit.arrays`: array techniques, most of them for sorted input
- `arraykit.operations`: positional operations using 1-based positions
- `arraykit.searching`: four search algorithms
- `arraykit.stack`: a bounded stack and algorithms built on it

None of the functions change their arguments; those that produce a modified
array return a new list.

## Installation

```
pip install arraykit
```

To run the tests:

```
pip install "arraykit[test]"
pytest
```

## Array techniques

```python
from arraykit.arrays import (
    common_elements, count_occurrences, remove_duplicates,
    max_window_sum, max_window_sum_naive, missing_number, peak_elements,
    two_largest, pair_with_sum, sorted_union, sorted_intersection,
)

common_elements([1, 5, 10, 20], [1, 2, 4, 6, 8, 10], [1, 2, 3, 4, 5])  # [1]
count_occurrences([1, 1, 2, 2, 2, 2, 3], 2)                           # 4
remove_duplicates([1, 2, 4, 4, 5, 6, 6, 7])                           # [1, 2, 4, 5, 6, 7]
max_window_sum([1, 2, 4, 5, 6, 8, 10, 12], 4)                         # (36, [6, 8, 10, 12])
missing_number([1, 2, 3, 4, 6, 7, 8])                                 # 5
peak_elements([10, 20, 15, 2, 23, 90, 90, 10])                        # [20, 90, 90]
two_largest([5, 2, 1, 6, 4, 8, 12, 10])                               # (12, 10)
pair_with_sum([12, 15, 23, 45, 89, 93, 95, 189], 140)                 # (45, 95)
sorted_union([1, 3, 4, 5, 7], [2, 3, 5, 6])                           # [1, 2, 3, 4, 5, 6, 7]
sorted_intersection([1, 3, 4, 5, 7], [2, 3, 5, 6])                    # [3, 5]
```

Notes on behaviour:

- `common_elements`, `sorted_union`, `sorted_intersection`, `pair_with_sum`
  and `remove_duplicates` expect sorted input. `remove_duplicates` collapses
  adjacent equal values only.
- `max_window_sum_naive` sums every window from scratch; `max_window_sum`
  slides one window along. Both return `(total, window)`, prefer the earliest
  window on ties, and raise `ValueError` unless `1 <= size <= len(values)`.
- `missing_number` assumes the values are `1..n+1` with exactly one absent.
- `peak_elements` returns only the first element if it is larger than the
  second, otherwise only the last if it is larger than the one before it;
  failing both, every interior element not smaller than its neighbours. It
  raises `ValueError` for fewer than two elements, as does `two_largest`.
- `pair_with_sum` returns `None` when no pair adds up to the target.

## Basic operations

`arraykit.operations` works with positions starting at 1:

```python
from arraykit.operations import (
    delete_at, insert_at, update_at, find_position, format_elements,
)

delete_at([1, 2, 30, 4, 5], 3)          # [1, 2, 4, 5]
insert_at([16, 6, 8, 32, 12], 4, 99)    # [16, 6, 8, 99, 32, 12]
update_at([1, 2, 3, 4, 5], 3, 32)       # [1, 2, 32, 4, 5]
find_position([1, 2, 50, 4, 5], 50)     # 3
format_elements([18, 20, 25, 6, 9])     # "18 20 25 6 9"
```

A position outside the array raises `IndexError`; `insert_at` also accepts
`len(values) + 1`, which appends. `find_position` raises `ValueError` when the
target is absent.

## Searching

`arraykit.searching` provides `linear_search`, `binary_search`,
`interpolation_search` and `jump_search`. Each takes a sequence and a target
and returns the 0-based index of the target, or `None` if it is not found.
All except `linear_search` expect the sequence to be sorted.

```python
from arraykit.searching import binary_search

binary_search([1, 4, 6, 7, 23, 46, 68, 78, 98, 135, 156, 676], 135)  # 9
```

## Stacks

`arraykit.stack.Stack(capacity=100)` is a bounded stack with `push`, `pop`,
`peek`, `is_empty` and `is_full`. It supports `len()`, and iterating over it
goes from the top down. Pushing onto a full stack raises `StackOverflow`;
popping or peeking an empty stack raises `StackUnderflow`. A capacity below 1
raises `ValueError`.

The module also has these functions built on the stack:

```python
from arraykit.stack import delete_middle, next_greater_elements, evaluate_postfix

delete_middle([1, 2, 3, 4, 5])             # [1, 3, 4, 5]
next_greater_elements([4, 5, 2, 25])       # [5, 25, 25, None]
evaluate_postfix("231*+9-")                # -4
evaluate_postfix("100 200 + 2 / 5 * 7 +")  # 757
```

- `delete_middle` takes the items bottom to top and removes the element at
  index `ceil(n / 2)` counted from the top.
- `next_greater_elements` gives, for each value, the first strictly greater
  value to its right, or `None`.
- `evaluate_postfix` supports `+ - * /` on integers, with division truncating
  toward zero. Without whitespace every character is a token, so operands are
  single digits; with whitespace, tokens are separated by it and operands may
  have several digits. Malformed expressions raise `ValueError`, and division
  by zero raises `ZeroDivisionError`.

## What it does not do

arraykit is a library only: it installs no command-line program, and reads
no input or files of its own. Call its functions from your own code.