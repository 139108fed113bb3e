# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations, and check whether a given sequence of operations sorts
the list.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` upwards (the top goes to the bottom)   |
| `rb`  | rotate `b` upwards                                |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` downwards (the bottom goes to the top) |
| `rrb` | rotate `b` downwards                              |
| `rrr` | `rra` and `rrb` together                          |

Operations on a stack with too few elements do nothing.

## Installation

    pip install .

## Command line

Print a sequence of operations that sorts the numbers, one per line:

    push-swap 3 2 5 1 4

The first number given is the top of stack `a`. Nothing is printed if the
numbers are already in ascending order, or if only one number is given.

Check a sequence read from standard input, one operation per line, each
line ending in a newline. It prints `OK` if stack `a` ends up sorted and
stack `b` empty, and `KO` otherwise:

    push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4

Both commands print `Error` to standard error for invalid input: tokens that
are not integers (optional leading whitespace, an optional sign, then digits
only), values outside the 32-bit signed range, or duplicates. The checker
also prints `Error` at the first line that is not an operation. With a single
number the checker validates it and then exits without reading input.

## Library

```python
from pushswap.solver import sort_operations
from pushswap.checker import run_checker
from pushswap.stacks import Stacks

values = [3, 2, 5, 1, 4]
ops = sort_operations(values)

stacks = Stacks(values, [])
for op in ops:
    stacks.apply(op)
assert stacks.is_solved()

assert run_checker(values, [op + "\n" for op in ops]) is True
```

- `pushswap.stacks.Stacks` holds the two stacks as lists (index 0 is the
  top), has one method per operation, `apply(name)` which raises
  `ValueError` for an unknown name, and `is_solved()`.
- `pushswap.parsing` has `parse_arguments`, which raises `InputError` for
  invalid tokens, `normalize`, which replaces values by their ranks, and the
  lower-level `is_integer_token` and `parse_long`.
- `pushswap.lis.longest_circular_increasing` finds the longest strictly
  increasing subsequence over all rotations of a sequence; the solver keeps
  those values in `a` and pushes the rest to `b`.
- `pushswap.moves` has `Moves`, `plan_moves`, `target_position` and
  `best_move`, which choose the cheapest element of `b` to push back and the
  rotations that bring it into place.
- `pushswap.checker` has `is_valid_operation`, `run_checker` (raises
  `CheckerError` for an invalid line) and the command's `main`.

The package also carries small helper modules: `chars` (ASCII
classification and case mapping), `textutil` and `textsearch` (string
conversion, splitting, searching and bounded copying), `memory` (byte-buffer
fill, search, compare and copy), `printer` (a small `printf` with `%c %s %d
%i %u %x %X %p %%`), `linereader` (`LineReader`, reading a stream line by
line through a fixed-size buffer) and `linkedlist` (`Node` and
`LinkedList`).

## Tests

    pip install .[test]
    pytest