"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link: a value and the link that follows it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A chain of nodes reached from ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, on_delete: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each value to ``on_delete`` first if given."""
        if on_delete is not None:
            for node in self._nodes():
                on_delete(node.content)
        self.head = None

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on every value in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """Return a new list of ``f(value)`` for every value in order."""
        return LinkedList(f(content) for content in self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"