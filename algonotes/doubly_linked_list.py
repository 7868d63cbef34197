"""Doubly linked list with positional insertion and deletion and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list; nodes compare by identity."""

    value: Any
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list with ``head`` and ``tail`` nodes; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the front and return its node."""
        node = DoublyNode(value, None, self.head)
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._size += 1
        return node

    def append(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the end and return its node."""
        node = DoublyNode(value, self.tail, None)
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._size += 1
        return node

    def node_at(self, position: int) -> DoublyNode:
        """Return the node at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        node = self.head
        for _ in range(position - 1):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def insert_after(self, node: DoublyNode | None, value: Any) -> DoublyNode:
        """Insert ``value`` directly after ``node`` and return the new node."""
        if node is None:
            raise ValueError("previous node is required, it cannot be None")
        new = DoublyNode(value, node, node.next)
        if node.next is not None:
            node.next.prev = new
        else:
            self.tail = new
        node.next = new
        self._size += 1
        return new

    def insert_at(self, position: int, value: Any) -> DoublyNode:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            return self.push_front(value)
        return self.insert_after(self.node_at(position - 1), value)

    def _unlink(self, node: DoublyNode) -> Any:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove_first(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self.head)

    def remove_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        return self._unlink(self.node_at(position))

    def remove_last(self) -> Any:
        """Remove the last node and return its value."""
        if self.tail is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self.tail)

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the values joined by "<==>" and ending in "NULL"."""
        return "".join(f"{value}<==>" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"