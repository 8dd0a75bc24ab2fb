"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose nodes are reachable from ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in items:
                self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first if given."""
        if delete is not None:
            for node in list(self._nodes()):
                delete(node.content)
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f`` applied to every content."""
        return LinkedList(f(content) for content in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"