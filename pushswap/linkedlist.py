"""A singly linked list whose nodes each carry one item."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of the list: an item and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front insertion, back insertion and mapping."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def push_front(self, value: Any) -> None:
        """Put ``value`` in a new node at the front of the list."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Put ``value`` in a new node at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Any:
        """The item in the last node, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(item)`` for every item, in order."""
        return LinkedList(func(item) for item in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each item to ``delete`` first if given."""
        if delete is not None:
            for item in self:
                delete(item)
        self.head = None
        self._tail = None
        self._size = 0