# pushswap

Sorts a list of integers using two stacks, **a** and **b**, and a fixed set
of operations. Each operation performed is printed on its own line, so the
output is the sequence of moves that sorts stack **a** in ascending order
(smallest value on top).

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a: the top element becomes the last          |
| `rb`  | rotate b                                            |
| `rr`  | `ra` and `rb` together                              |
| `rra` | reverse-rotate a: the last element becomes the top  |
| `rrb` | reverse-rotate b                                    |
| `rrr` | `rra` and `rrb` together                            |

These are the methods of `pushswap.stacks.Stacks` (`swap_a`, `push_b`,
`rotate_both`, `rev_rotate_a`, ...). An operation on a stack with fewer than
two elements, or a push from an empty stack, does nothing and is not
reported. `rr` and `rrr` are reported only when both stacks moved; `ss` is
always reported.

## Command line

The numbers are given as a single argument, separated by spaces:

```
$ push-swap "2 1 3"
sa
```

The same entry point runs as `python -m pushswap.cli "2 1 3"`.

If the argument count is not exactly one, or the numbers are already in
order, nothing is printed. Three numbers are sorted with at most two moves;
any other count is sorted with a binary radix sort that uses `pb`, `ra` and
`pa`. Negative numbers are shifted into the non-negative range for the sort.

Each number is read like C's `atoi`: leading whitespace and one sign are
accepted, reading stops at the first non-digit, text without digits gives
0, and the result wraps to a 32-bit signed integer.

## Library use

```python
from pushswap.parsing import parse_stack
from pushswap.stacks import Stacks
from pushswap.sorting import is_sorted, radix_sort_with_negatives

moves = []
stacks = Stacks(parse_stack("3 -1 2 0"), [], moves.append)
if not is_sorted(stacks.a):
    radix_sort_with_negatives(stacks, len(stacks.a))
print(moves)
print(stacks.framed())
```

- `pushswap.parsing`: `split_words`, `parse_int`, `parse_stack`.
- `pushswap.stacks`: the list functions `rotate`, `rev_rotate`, `swap`
  (each returns whether it moved anything) and the `Stacks` class. Its
  `emit` callback receives each operation name; by default names are
  printed.
- `pushswap.sorting`: `find_max` and `find_min` (returning a `ValueInfo`
  with `value` and `pos`; they raise `ValueError` on an empty stack),
  `is_sorted`, `tiny_sort`, `radix_sort`, `radix_sort_with_negatives`.

`Stacks.render()` and `Stacks.framed()` return a side-by-side view of both
stacks, useful when following a sort step by step.

## What it does not do

- Input is not validated: non-numeric words are read as 0 (or as their
  leading digits), duplicates are accepted, and no error message is printed.
- There is no checker that reads a list of operations and verifies that it
  sorts the stack.
- The radix sort does not try to minimise the number of moves.

## Tests

```
pip install -e .[test]
pytest
```