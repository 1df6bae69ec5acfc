"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list addressed through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def nodes(self) -> Iterator[Node]:
        """Iterate over the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the tail and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The tail node, or None for an empty list."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content from head to tail."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of ``func`` applied to each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result