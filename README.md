# dsakit

A small collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## Installation

```
pip install .
```

## Modules

### `dsakit.searching`

- `binary_search(items, target)` returns the index of `target` in the
  ascending sequence `items`, or `None` if it is absent.
- `linear_search(items, target)` returns the index of the first item
  equal to `target`, or `None` if it is absent. The items need not be
  sorted.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort` and `selection_sort` each take an
iterable and return a new sorted list; the input is left untouched.

### `dsakit.matrix`

- `multiply(a, b)` multiplies an m x n matrix by an n x p matrix, both
  given as sequences of rows, and returns the m x p product as a list of
  lists. It raises `ValueError` when the rows of `a` do not have as many
  columns as `b` has rows, or when the rows of `b` differ in length.
- `format_matrix(rows)` renders a matrix one row per line, with the
  elements separated by spaces.

### `dsakit.bounded`

Fixed-capacity containers. Each takes an optional `capacity` (default 5;
less than 1 raises `ValueError`) and offers `is_empty()`, `is_full()`,
`len()` and iteration. Adding to a full container raises
`ContainerFullError` (an `OverflowError`); removing from an empty one
raises `ContainerEmptyError` (an `IndexError`).

- `BoundedStack`: `push(value)` and `pop()`; iteration runs from the
  bottom of the stack to the top.
- `LinearQueue`: `enqueue(value)` and `dequeue()`, first in, first out.
  Slots freed by dequeuing are not reused: once `capacity` values have
  been enqueued the queue reports itself full, even after it has been
  emptied.
- `CircularDeque`: `push_front`, `push_back`, `pop_front` and
  `pop_back`; iteration runs from front to back.

### `dsakit.linked`

`SinglyLinkedList` and `DoublyLinkedList` may be built empty or from an
iterable of values. Both offer `push_front(value)`, `push_back(value)`,
`insert_after(target, value)`, `pop_front()`, `pop_back()`,
`remove(value)`, `len()` and iteration.

- Popping or removing from an empty list raises `EmptyListError` (an
  `IndexError`).
- `insert_after` and `remove` act on the first node holding the value
  and raise `ValueError` when no node holds it. On an empty
  `SinglyLinkedList`, `insert_after` simply adds the value as the only
  node.
- `DoublyLinkedList` also has `find(value)`, which returns the
  zero-based position of the first matching value or `None`, and
  supports `reversed()`.

### `dsakit.postfix`

- `infix_to_postfix(expression)` converts an infix expression whose
  operands are single ASCII letters and whose operators are
  `+ - * / ^` into postfix. All operators associate to the left and
  whitespace is ignored. Unbalanced parentheses or any other character
  raise `ValueError`.
- `precedence(operator)` returns 1 for `+ -`, 2 for `* /`, 3 for `^`
  and 0 for anything else.

## Library use

```python
from dsakit.searching import binary_search
from dsakit.sorting import insertion_sort
from dsakit.bounded import BoundedStack
from dsakit.linked import DoublyLinkedList
from dsakit.postfix import infix_to_postfix

binary_search([1, 3, 5, 7], 5)        # 2
binary_search([1, 3, 5, 7], 4)        # None
insertion_sort([3, 6, 1, 8, 3])       # [1, 3, 3, 6, 8]

stack = BoundedStack()
stack.push(1)
stack.push(2)
stack.pop()                           # 2

items = DoublyLinkedList([1, 2, 3])
items.insert_after(2, 9)
list(items)                           # [1, 2, 9, 3]
list(reversed(items))                 # [3, 9, 2, 1]

infix_to_postfix("a+b*c")             # "abc*+"
```

## Command line

Three commands are installed. None of them prompts; input comes from
arguments or from standard input.

### `dsakit-search TARGET [ITEMS ...] [--linear]`

Searches for the integer `TARGET` among `ITEMS`, or among the integers
read from standard input when no items are given. It uses binary search
(items must be in ascending order) unless `--linear` is passed. It
prints `Element found at index: N` and exits with 0, or prints
`Element not found` and exits with 1.

```
dsakit-search 7 1 3 5 7 9
echo "23 4 56 2 7 1" | dsakit-search --linear 7
```

### `dsakit-matrix [--display]`

Reads whitespace-separated integers from standard input: the rows and
columns of A, the columns of B, then the elements of A and of B in row
order, and prints the product. With `--display` it reads the rows,
columns and elements of a single matrix and prints it.

```
echo "2 2 2  1 2 3 4  5 6 7 8" | dsakit-matrix
```

### `dsakit-postfix [EXPRESSION]`

Converts the infix expression given as an argument, or read from
standard input, and prints `Postfix expression is ...`.

```
dsakit-postfix "(a+b)*c"
```

## What it does not do

The containers and linked lists are library classes only; there is no
interactive menu or command for working with them, and nothing is kept
between runs. There is no command for sorting. Matrices are plain lists
of integers; there is no support for other matrix operations.

## Running the tests

```
pip install .[test]
pytest
```