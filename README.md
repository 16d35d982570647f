# arraykit

Utilities for working with lists of integers. Every function takes an
ordinary iterable of integers and returns a new value. Input lists are
left unchanged.

## Modules

- `arraykit.classify`: number predicates `is_abundant`, `is_armstrong`,
  `is_automorphic`, `is_composite`, `is_deficient`, `is_disarium`,
  `is_duck`, `is_even`, `is_odd`, `is_harshad`, `is_palindrome`,
  `is_perfect`, `is_prime`, `is_spy` and `is_strong`. The enum `NumberKind`
  names each kind, and `NumberKind.matches(num)` tests a number against it.
  `select(values, kind)` keeps the values of one kind in their original
  order. `kind` is a `NumberKind` or its lower-case name, such as `"prime"`.
- `arraykit.transform`: `digit_sum`, `reverse_digits`, `cubes`, `squares`,
  `digit_sums`, `reversed_numbers`, `reverse`, `rotate_right`,
  `sort_ascending`, `sort_descending` and `group_negatives`.
  `group_negatives` puts the negatives first by sorting, so its result is in
  ascending order.
- `arraykit.aggregate`: `average`, `product`, `max_subarray_sum`,
  `sum_even_indices`, `sum_odd_indices`, `sum_even_values`,
  `sum_odd_values`, `is_palindromic`, `count_duplicates`,
  `count_occurrences` and `count_pairs`.
- `arraykit.search`: `index_of`, `find_min`, `find_peak`,
  `first_unique_index`, `nth_maximum`, `nth_minimum` and `delete_first`.

### Notes on edge cases

- The digit-based predicates treat zero and negative numbers as having no
  digits. For that reason `0` counts as an Armstrong, palindrome and strong
  number.
- The divisor-based predicates only look at divisors up to `num // 2`. For
  that reason `0` counts as perfect, and negative numbers count as abundant
  and as prime.
- `is_harshad` raises `ValueError` for numbers that are not positive.
- `average` returns the integer mean, truncated toward zero, as a float.
- `max_subarray_sum` returns `0` when every run of values is negative.
- Functions raise `ValueError` on an empty sequence where no result makes
  sense:
  - `average`, `product`, `sum_even_indices`, `sum_odd_indices`,
    `is_palindromic`
  - `find_min`, `find_peak`
  - `cubes`, `squares`, `digit_sums`
- `index_of` and `first_unique_index` return `None` when nothing is found.
- `nth_maximum` and `nth_minimum` rank distinct values, counting from 1.
  They raise `ValueError` when the rank is below 1 or larger than the
  number of distinct values.
- `delete_first` returns the values unchanged when the target does not occur.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from arraykit.classify import NumberKind, is_armstrong, is_perfect, select
from arraykit.transform import sort_ascending, rotate_right
from arraykit.aggregate import count_pairs
from arraykit.search import index_of

is_armstrong(153)                          # True
is_perfect(6)                              # True
select([2, 4, 5, 9], NumberKind.PRIME)     # [2, 5]
sort_ascending([0, 23, 14, 12, 9])         # [0, 9, 12, 14, 23]
rotate_right([1, 2, 3])                    # [3, 1, 2]
count_pairs([1, 5, 7, -1], 6)              # 2
index_of([2, 3, 6, 5, 9], 6)               # 2
```

## Command line

Installing the package provides the `arraykit` command. It has three
subcommands, and each takes its integers as arguments.

```
arraykit select prime 2 4 5 9
arraykit transform sort-asc 0 23 14 12 9
arraykit pairs 6 1 5 7 -1
```

- `select KIND VALUES...` prints the matching values separated by tabs. If
  none match, it prints `No Element Found in Array`. `KIND` is any
  `NumberKind` name in lower case.
- `transform OPERATION VALUES...` prints the result separated by spaces.
  `OPERATION` is one of:
  - `cubes`
  - `digit-sums`
  - `group-negatives`
  - `reverse`
  - `reversed-numbers`
  - `rotate`
  - `sort-asc`
  - `sort-desc`
  - `squares`
- `pairs TOTAL VALUES...` prints `Count of pairs is N`.

If a value is rejected (for example `select harshad 0`), the command prints
the error to standard error and exits with status 1. To see all options:

```
arraykit --help
```

The command takes its numbers only from its arguments. It does not prompt
for input or read numbers from standard input or files. The search and most
aggregate functions are available from Python only.