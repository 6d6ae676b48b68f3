"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_one(node: Optional[Node], delete: Deleter) -> None:
    """Release the content of a single node with delete and detach it."""
    if node is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list kept through its head node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Optional[Node]) -> None:
        """Insert node at the start of the list; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Append node at the end of the list; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Deleter) -> None:
        """Release every content with delete and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            delete_one(node, delete)
            node = following
        self.head = None

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> "LinkedList":
        """Return a new list of f applied to every content.

        If f fails, the contents built so far are released with delete
        and the error is raised again.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(Node(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result