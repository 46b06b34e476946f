"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One list cell holding *content* and a link to the next cell."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append *content* at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, calling *delete* on each content that is not None."""
        if delete is not None:
            for node in self._nodes():
                if node.content is not None:
                    delete(node.content)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list of func(content) for each content.

        If *func* raises, *delete* is called on the contents mapped so far
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())