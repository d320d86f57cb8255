"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps the order its contents were added in."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element, pass it to ``delete`` if given, and return it.

        Raises IndexError on an empty list.
        """
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def for_each(self, f: Callable[[Any], Any] | None) -> None:
        """Call ``f`` on every element in order; nothing happens without ``f``."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``f`` applied to each element.

        If ``f`` fails part way, the elements already built are passed to
        ``delete`` and the error propagates.
        """
        if f is None:
            raise TypeError("a mapping function is required")
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each element to ``delete`` if given."""
        if delete is not None:
            while self.head is not None:
                self.pop_front(delete)
        self.head = None