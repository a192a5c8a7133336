# classalgos

A handful of classic algorithms, each usable as a library and as a small
command that reads from standard input.

## Modules

### `classalgos.sortable`

- `IntArray(values)`: a mutable sequence of integers. It supports `len()`,
  iteration, indexing and item assignment; an index outside `0..len-1`
  (negative ones included) reads or writes the first element, and indexing
  an empty array raises `IndexError`.
  - `shell_sort()` sorts in place with Shell's method, halving the gap each
    round.
  - `hoare_sort()` sorts in place with Hoare's quicksort, pivoting on the
    middle element.
  - `is_sorted()` tells whether the elements are in non-decreasing order.
  - `copy()` returns an independent copy.
  - `==` compares the elements as a multiset: two arrays are equal when they
    hold the same values in any order.
  - `str()` gives the elements separated by spaces.
- `Order`: `UNORDERED` (1), `ASCENDING` (2) or `DESCENDING` (3).
- `random_array(length=1, order=Order.UNORDERED, spread=10, rng=None)`: an
  unordered array holds values from `range(spread)`; ordered arrays grow by
  steps drawn from that range. A negative length or a non-positive spread
  raises `ValueError`.
- `benchmark(array=None)`: times both sorts on copies of the array and returns
  `{"shell_sort": ms, "hoare_sort": ms}`. Without an array, a descending array
  of 100 elements is used.

### `classalgos.complexnum`

- `Complex(re=0.0, im=0.0)`: a dataclass supporting `+`, `-`, `*`, `/`, `==`,
  `!=` and `abs()` (the modulus). Dividing by zero raises `ZeroDivisionError`.
  `str()` gives forms such as `1 + 2 * i`, `1 - 2 * i` or just `1` when the
  imaginary part is zero.
- `parse_complex(text)`: reads two whitespace-separated numbers, the real and
  the imaginary part; anything else raises `ValueError`.

### `classalgos.route`

- `Route(size=0)`: a closed tour over cities `1..size`, starting in ascending
  order. It supports `len()`, iteration, `str()` and `copy()`.
  - `price(matrix)` returns the cost of the tour including the way back to the
    first city; an empty route raises `ValueError`.
  - `next_route()` steps to the next permutation in lexicographic order and
    returns `False` when there is none or when the new one no longer starts at
    city 1.
- `random_matrix(size, rng=None)`: a `size` x `size` cost matrix with entries
  from 1 to 9.
- `solve(matrix)`: returns `(route, cost)` for the cheapest tour starting at
  city 1. Among tours of equal cost the first one found is kept.

### `classalgos.textsearch`

- `shift_table(pattern)`: the bad-character shifts for every character of the
  pattern but the last; characters not in the table shift by the pattern length.
- `bmh_search(text, pattern)`: the index of the first occurrence of `pattern`
  in `text` by Boyer-Moore-Horspool search, or `-1`. An empty pattern is found
  at index 0.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from classalgos.textsearch import bmh_search

bmh_search("Vo dvore trava na trave drova", "drova")  # 24
```

```python
import random

from classalgos.route import random_matrix, solve

matrix = random_matrix(5, random.Random(1))
route, cost = solve(matrix)
print(route, cost)
```

```python
from classalgos.sortable import IntArray

array = IntArray([5, 3, 8, 1])
array.hoare_sort()
print(array)  # 1 3 5 8
```

## Commands

Each command reads its input from standard input.

```
classalgos-sort
```
Reads a length and that many integers and reports whether they are in
non-decreasing order. If they are, it stops. Otherwise it reads a choice:
`1` sorts with Shell sort, `2` with Hoare sort; it then prints the sorted
array and the times of both sorts on a generated descending array of 100
elements.

```
classalgos-complex
```
Reads a complex number (real part, then imaginary part) and an operation
sign: `+`, `-`, `*`, `/`, `=`, `!` or `m`. For `m` it prints the modulus of
the number; for the others it reads a second number and prints the result
of the operation or comparison.

```
classalgos-route
```
Reads the number of cities, prints a random cost matrix, every tour that
starts at city 1 with its cost, and the cheapest tour.

```
classalgos-search
```
Prints a short demonstration of string concatenation, comparison and
searching, then reads a word and prints its length.

## What the package does not do

There is no heap sort. `classalgos-sort` lists it as choice `3`, but that
choice exits without sorting.