"""A singly linked list of arbitrary values."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with head insertion, appending and in-place sorting."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> tuple[Node | None, Node]:
        """Return ``(previous, node)`` for the node at *index*."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"expected an int index, got {type(index).__name__}")
        previous: Node | None = None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return previous, node
            previous = node
        raise IndexError(f"list index {index} out of range")

    def _swap(self, previous: Node | None, first: Node, second: Node) -> None:
        """Exchange *first* and the *second* node that follows it."""
        if previous is None:
            self._head = second
        else:
            previous.next = second
        first.next = second.next
        second.next = first

    def add(self, content: Any) -> None:
        """Insert *content* at the front of the list."""
        self._head = Node(content, self._head)
        self._size += 1

    def push(self, content: Any) -> None:
        """Append *content* at the end of the list."""
        new = Node(content)
        if self._head is None:
            self._head = new
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = new
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the first item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        node.next = None
        self._size -= 1
        return node.content

    def at(self, index: int) -> Any:
        """Return the item at position *index*, counting from zero."""
        return self._node_at(index)[1].content

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        previous: Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def sort(self, compare: Callable[[Any, Any], int]) -> None:
        """Bubble-sort the list in place.

        Two neighbours are exchanged when ``compare(left, right) > 0``, so
        items that compare equal keep their order.
        """
        size = self._size
        for done in range(size - 1):
            previous: Node | None = None
            node = self._head
            for _ in range(size - done - 1):
                assert node is not None and node.next is not None
                following = node.next
                if compare(node.content, following.content) > 0:
                    self._swap(previous, node, following)
                    node = following
                previous = node
                node = node.next

    def swap_with_next(self, index: int) -> None:
        """Exchange the item at *index* with the one after it."""
        previous, node = self._node_at(index)
        if node.next is None:
            raise IndexError(f"no item follows index {index}")
        self._swap(previous, node, node.next)

    def copy(self) -> LinkedList:
        """Return a new list holding copies of the items."""
        return LinkedList(_copy.copy(item) for item in self)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list of ``func(item)`` for every item, in order."""
        return LinkedList(func(item) for item in self)

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call *func* on every item, starting from the last one."""
        for node in reversed(list(self._nodes())):
            func(node.content)

    def clear(self) -> None:
        """Remove every item."""
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self._head = None
        self._size = 0