# algodrills

Small classic programming exercises written as plain Python functions and
classes: text patterns, frequency tables, recursion drills, quadratic sorts
and array manipulation. Every function returns its result instead of
printing it, so it can be used directly or checked in tests.

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

### `algodrills.patterns`

Each function takes a row count `n` and returns the rows as a list of
strings; a non-positive `n` gives an empty list.

- `square`, `ascending_stars`, `descending_stars`, `symmetric_triangle`
- `pyramid`, `reverse_pyramid`, `kite` (a pyramid followed by its reverse)
- `ascending_numbers`, `repeated_numbers`, `double_number_pyramid`,
  `counting_triangle`, `binary_triangle`
- `alphabet_triangle`, `descending_alphabet`, `same_letter_triangle`

Some rows (the binary, counting and spaced-letter patterns) keep a trailing
space after each token.

```python
from algodrills.patterns import pyramid

print("\n".join(pyramid(3)))
#   *
#  ***
# *****
```

### `algodrills.hashing`

`FrequencyTable(items)` counts how often each item occurs. `count(item)`
returns the count (zero for unseen items) and `counts(queries)` answers a
batch in order. The table also supports `in` and `len()` (the total number
of items counted). `character_counts(text)` and `number_counts(values)`
build tables for characters and numbers.

```python
from algodrills.hashing import character_counts

table = character_counts("banana")
table.count("a")           # 3
table.counts("abz")        # [3, 1, 0]
```

### `algodrills.students`

`Book` is a dataclass with `title`, `author` and `year`. `Student(name)`
(name defaults to `"Unnamed"`) receives an id counting up from 1 across all
students, collects marks with `add_mark`, reports `average()` (0.0 with no
marks) and converts to text as `Student{id=1, name="Alice", avg=87.67}`.

### `algodrills.recursion`

Recursive drills, each returning a value:

- `count_up(n)`, `count_down(n)`, `count_up_from_one(n)` – lists of numbers
- `repeat_name(name, times)` – a list of the name repeated
- `count_until_five(start)` – numbers from `start` up to but not including
  five; raises `ValueError` if `start` is five or more
- `is_palindrome(text)`, `is_palindrome_by_reversal(text)`
- `sum_to(n)`, `sum_to_functional(n)`, `sum_to_parameterised(n)` – sums up
  to `n`; `sum_to_functional` raises `ValueError` for negative `n`
- `factorial(n)` – raises `ValueError` for negative `n`
- `reverse_list(values)` – a reversed copy

Being recursive, they hit Python's recursion limit for very large arguments.

### `algodrills.sorting`

`bubble_sort`, `insertion_sort` and `selection_sort` return sorted copies.
`union_by_set(first, second)` returns the distinct items of both inputs in
ascending order; `union_of_sorted(first, second)` merges two already sorted
inputs, dropping repeats.

### `algodrills.arrays`

- `is_sorted(values)`
- `largest(values)` – the maximum, but never below 0 (an empty or all-negative
  input gives 0)
- `rotate_left(values, places)`, `rotate_left_by_reversal(values, places)` –
  raise `ValueError` for negative `places`
- `rotate_left_once(values)`, `rotate_right_once(values)`
- `linear_search(values, target)` – zero-based index of the first match;
  raises `ValueError` if absent
- `move_zeroes_to_end(values)` returns a new list; `move_zeroes_in_place(values)`
  rearranges the given list
- `remove_sorted_duplicates(values)`
- `second_largest(values)`, `second_smallest(values)` – `None` when all values
  are equal; raise `ValueError` for an empty input

Apart from `move_zeroes_in_place`, these functions leave their input unchanged.

## What it does not do

The package is a library only: it has no command-line program and reads no
input from the terminal. To see a pattern or a result, call the function and
print what it returns.