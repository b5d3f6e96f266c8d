"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One cell of a linked list: its content and the cell after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps a pointer to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last element and return its node."""
        node = Node(content)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Any:
        """The content of the last node.

        Raises IndexError when the list is empty.
        """
        if self.head is None:
            raise IndexError("last() on an empty list")
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        return tail.content

    def clear(self, release: Release = None) -> None:
        """Remove every node, passing each content to ``release`` first."""
        if release is not None:
            for content in self:
                release(content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> LinkedList:
        """A new list holding ``func(content)`` for every content.

        If ``func`` raises part way, the contents already produced are
        passed to ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(release)
            raise
        return result