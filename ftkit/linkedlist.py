"""A doubly linked list of arbitrary contents.

Nodes keep links in both directions, so any node can reach the ends of
its list. The list owns its nodes; optional ``delete`` callbacks let a
caller release each content when nodes are dropped.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

_T = TypeVar("_T")
_U = TypeVar("_U")


@dataclass(eq=False)
class Node(Generic[_T]):
    """One element of a :class:`LinkedList`."""

    content: _T
    prev: Optional["Node[_T]"] = field(default=None, repr=False)
    next: Optional["Node[_T]"] = field(default=None, repr=False)

    def first(self) -> "Node[_T]":
        """Return the first node of the chain this node belongs to."""
        node = self
        while node.prev is not None:
            node = node.prev
        return node

    def last(self) -> "Node[_T]":
        """Return the last node of the chain this node belongs to."""
        node = self
        while node.next is not None:
            node = node.next
        return node


class LinkedList(Generic[_T]):
    """A doubly linked list; iterating it yields the contents in order."""

    def __init__(self, items: Optional[Iterable[_T]] = None) -> None:
        self._head: Optional[Node[_T]] = None
        self._tail: Optional[Node[_T]] = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def append(self, content: _T) -> Node[_T]:
        """Add ``content`` at the end and return its new node."""
        node = Node(content, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, content: _T) -> Node[_T]:
        """Add ``content`` at the front and return its new node."""
        node = Node(content, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[_T]:
        return (node.content for node in self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def nodes(self) -> Iterator[Node[_T]]:
        """Yield the nodes from first to last."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def first(self) -> Optional[Node[_T]]:
        """Return the first node, or None when the list is empty."""
        return self._head

    def last(self) -> Optional[Node[_T]]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[_T], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        for node in self.nodes():
            if delete is not None:
                delete(node.content)
            node.prev = node.next = None
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[_T], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[_T], _U],
        delete: Optional[Callable[[_U], Any]] = None,
    ) -> "LinkedList[_U]":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` before the exception propagates.
        """
        result: LinkedList[_U] = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def copy(self) -> "LinkedList[_T]":
        """Return a new list holding copies of each content."""
        return LinkedList(copy.copy(content) for content in self)