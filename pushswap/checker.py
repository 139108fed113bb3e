"""Checking that a list of operations read from input sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Stacks

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")
_VALID_LINES = frozenset(f"{name}\n" for name in OPERATIONS)


class CheckerError(ValueError):
    """A line of input is not an operation."""


def is_valid_operation(line: str) -> bool:
    """True if ``line`` is an operation name followed by exactly one newline."""
    return line in _VALID_LINES


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply ``lines`` to a stack holding ``values``; True if it ends sorted.

    Raises CheckerError at the first line that is not an operation.
    """
    stacks = Stacks(values)
    for line in lines:
        if not is_valid_operation(line):
            raise CheckerError(f"invalid operation: {line!r}")
        stacks.apply(line[:-1])
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if len(args) == 1:
        return 0
    try:
        solved = run_checker(values, sys.stdin)
    except CheckerError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())