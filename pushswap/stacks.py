"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top of the stack."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self._operations: dict[str, Callable[[], None]] = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rr": self.rr,
            "rra": self.rra,
            "rrb": self.rrb,
            "rrr": self.rrr,
        }

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stacks):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.insert(0, stack.pop())

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)

    def ss(self) -> None:
        """Do ``sa`` and ``sb`` together."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if self.b:
            self.a.insert(0, self.b.pop(0))

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if self.a:
            self.b.insert(0, self.a.pop(0))

    def ra(self) -> None:
        """Shift ``a`` up by one: the top element goes to the bottom."""
        self._rotate(self.a)

    def rb(self) -> None:
        """Shift ``b`` up by one: the top element goes to the bottom."""
        self._rotate(self.b)

    def rr(self) -> None:
        """Do ``ra`` and ``rb`` together."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Shift ``a`` down by one: the bottom element goes to the top."""
        self._reverse_rotate(self.a)

    def rrb(self) -> None:
        """Shift ``b`` down by one: the bottom element goes to the top."""
        self._reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb`` together."""
        self.rra()
        self.rrb()

    def apply(self, name: str) -> None:
        """Run the operation called ``name``; raise ValueError for unknown names."""
        try:
            operation = self._operations[name]
        except KeyError:
            raise ValueError(f"unknown operation: {name!r}") from None
        operation()

    def is_solved(self) -> bool:
        """True when ``a`` is in ascending order and ``b`` is empty."""
        if self.b:
            return False
        return all(low <= high for low, high in zip(self.a, self.a[1:]))