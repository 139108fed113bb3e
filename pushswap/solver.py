"""Working out a sequence of operations that sorts stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.lis import longest_circular_increasing
from pushswap.moves import best_move
from pushswap.parsing import InputError, normalize, parse_arguments
from pushswap.stacks import Stacks


def _mark_swaps(stacks: Stacks) -> set[int]:
    """Swap neighbours that are one apart and out of order, without recording it.

    Returns the values that ended up on top of such a swap; each one stands
    for an ``sa`` still owed to the output.
    """
    marked: set[int] = set()
    a = stacks.a
    if len(a) < 2:
        return marked
    if a[0] - 1 == a[1]:
        stacks.sa()
        marked.add(a[0])
    start = a[0]
    stacks.ra()
    while a and a[0] != start:
        if len(a) > 1 and a[0] - 1 == a[1] and a[1] != start:
            stacks.sa()
            marked.add(a[0])
        stacks.ra()
    return marked


def _push_unordered(stacks: Stacks, marked: set[int], ops: list[str]) -> None:
    """Emit the owed swaps and push to ``b`` whatever is not in the kept run."""
    keep = set(longest_circular_increasing(stacks.a))
    if not keep:
        return
    kept = len(keep)
    pending = len(marked)
    while pending or len(stacks.a) > kept:
        top = stacks.a[0]
        if top in marked:
            ops.append("sa")
            marked.discard(top)
            pending -= 1
        elif top in keep:
            stacks.ra()
            ops.append("ra")
        else:
            stacks.pb()
            ops.append("pb")


def _rotate_home(stacks: Stacks, ops: list[str]) -> None:
    """Rotate ``a`` the shorter way until its smallest element is on top."""
    forward = stacks.a.index(0) <= len(stacks.a) // 2
    name = "ra" if forward else "rra"
    while stacks.a[0] != 0:
        stacks.apply(name)
        ops.append(name)


def sort_operations(values: Sequence[int]) -> list[str]:
    """Operations that sort ``values`` (distinct integers) in stack ``a``."""
    stacks = Stacks(normalize(values))
    if stacks.is_solved():
        return []
    ops: list[str] = []
    marked = _mark_swaps(stacks)
    _push_unordered(stacks, marked, ops)
    placed = set(stacks.a)
    while stacks.b:
        for name in best_move(stacks.a, stacks.b, placed).operations():
            stacks.apply(name)
            ops.append(name)
        stacks.pa()
        ops.append("pa")
        placed.add(stacks.a[0])
    _rotate_home(stacks, ops)
    return ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if len(args) < 2:
        return 0
    sys.stdout.write("".join(f"{name}\n" for name in sort_operations(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())