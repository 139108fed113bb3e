"""Choosing and spelling out the rotations that bring two elements to the tops."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Moves:
    """Rotation counts for both stacks; ``rr`` and ``rrr`` turn both at once."""

    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    def _merged(self) -> Moves:
        ra, rb, rr = self.ra, self.rb, self.rr
        rra, rrb, rrr = self.rra, self.rrb, self.rrr
        if ra > 0 and rb > 0:
            shared = min(ra, rb)
            ra, rb, rr = ra - shared, rb - shared, rr + shared
        if rra > 0 and rrb > 0:
            shared = min(rra, rrb)
            rra, rrb, rrr = rra - shared, rrb - shared, rrr + shared
        return Moves(ra=ra, rb=rb, rr=rr, rra=rra, rrb=rrb, rrr=rrr)

    def total(self) -> int:
        """Number of operations these moves take."""
        return self.ra + self.rb + self.rr + self.rra + self.rrb + self.rrr

    def operations(self) -> list[str]:
        """Operation names in the order they are run: rr, rrr, ra, rb, rra, rrb."""
        merged = self._merged()
        counts = (
            ("rr", merged.rr),
            ("rrr", merged.rrr),
            ("ra", merged.ra),
            ("rb", merged.rb),
            ("rra", merged.rra),
            ("rrb", merged.rrb),
        )
        return [name for name, count in counts for _ in range(count)]


def _split(position: int, length: int) -> tuple[int, int]:
    """Forward and backward rotations to bring ``position`` to the top."""
    if position <= length // 2:
        return position, 0
    return 0, length - position


def plan_moves(a_pos: int, b_pos: int, len_a: int, len_b: int) -> Moves:
    """Moves that bring index ``a_pos`` of ``a`` and ``b_pos`` of ``b`` to the tops."""
    ra, rra = _split(a_pos, len_a)
    rb, rrb = _split(b_pos, len_b)
    rr = min(ra, rb)
    rrr = min(rra, rrb)
    return Moves(ra=ra - rr, rb=rb - rr, rr=rr, rra=rra - rrr, rrb=rrb - rrr, rrr=rrr)


def target_position(a: Sequence[int], value: int, placed: Collection[int]) -> int:
    """Index in ``a`` of the element ``value`` must be pushed on top of.

    That element is the smallest placed value not below ``value``, or the
    smallest placed value if there is none; ``len(a)`` if it is not in ``a``.
    """
    if not placed:
        raise ValueError("no value has been placed yet")
    higher = [item for item in placed if item >= value]
    target = min(higher) if higher else min(placed)
    try:
        return list(a).index(target)
    except ValueError:
        return len(a)


def best_move(a: Sequence[int], b: Sequence[int], placed: Collection[int]) -> Moves:
    """The cheapest moves that bring an element of ``b`` above its place in ``a``.

    Ties go to the earlier element of ``b``; a choice costing nothing is
    replaced by whichever candidate follows it.
    """
    best = Moves()
    fewest = 0
    for b_pos, value in enumerate(b):
        moves = plan_moves(target_position(a, value, placed), b_pos, len(a), len(b))
        total = moves.total()
        if total < fewest or fewest == 0:
            best, fewest = moves, total
    return best