"""Longest increasing subsequence over the rotations of a circular sequence."""

from __future__ import annotations

from collections.abc import Sequence


class _PrefixMax:
    """Fenwick tree giving the maximum key over a prefix of positions."""

    def __init__(self, size: int) -> None:
        self._tree: list[tuple[int, int]] = [(0, 0)] * (size + 1)

    def query(self, count: int) -> tuple[int, int]:
        best = (0, 0)
        while count > 0:
            if self._tree[count] > best:
                best = self._tree[count]
            count -= count & -count
        return best

    def update(self, position: int, key: tuple[int, int]) -> None:
        position += 1
        while position < len(self._tree):
            if key > self._tree[position]:
                self._tree[position] = key
            position += position & -position


def _run_from(ranks: Sequence[int], size: int, start: int) -> tuple[list[int], list[int]]:
    """Length and predecessor of the best chain ending at each offset from ``start``.

    The predecessor is the earliest offset among those with the longest chain,
    and -1 where there is none.
    """
    count = len(ranks)
    tree = _PrefixMax(size)
    lengths: list[int] = []
    previous: list[int] = []
    for offset in range(count):
        rank = ranks[(start + offset) % count]
        best_length, neg_index = tree.query(rank)
        if best_length == 0:
            lengths.append(1)
            previous.append(-1)
        else:
            lengths.append(best_length + 1)
            previous.append(-neg_index)
        tree.update(rank, (lengths[-1], -offset))
    return lengths, previous


def longest_circular_increasing(values: Sequence[int]) -> list[int]:
    """Longest strictly increasing subsequence of any rotation of ``values``.

    Rotations are tried from start 0 upwards and a later one wins only if it
    is strictly longer; within a rotation the chain ends at its earliest
    longest position and each step back takes the earliest candidate.
    """
    count = len(values)
    if count == 0:
        return []
    distinct = sorted(set(values))
    rank_of = {value: rank for rank, value in enumerate(distinct)}
    ranks = [rank_of[value] for value in values]

    best: list[int] = []
    for start in range(count):
        lengths, previous = _run_from(ranks, len(distinct), start)
        longest = max(lengths)
        if longest <= len(best):
            continue
        chain: list[int] = []
        offset = lengths.index(longest)
        while offset != -1 and len(chain) < longest:
            chain.append(values[(start + offset) % count])
            offset = previous[offset]
        chain.reverse()
        best = chain
    return best