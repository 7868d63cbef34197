"""Singly linked list with in-place insertion sort, merging of sorted lists and intersection lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    value: Any
    next: ListNode | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list whose nodes are reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def push_front(self, value: Any) -> ListNode:
        """Insert ``value`` at the front and return its node."""
        self.head = ListNode(value, self.head)
        return self.head

    def append(self, value: Any) -> ListNode:
        """Insert ``value`` at the end and return its node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def middle(self) -> Any:
        """Return the middle value; for an even length, the first of the two middle values."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        slow = self.head
        fast = self.head.next
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next  # type: ignore[assignment]
        return slow.value

    def insertion_sort(self) -> None:
        """Sort the list ascending in place by relinking its nodes."""
        ordered: ListNode | None = None
        node = self.head
        while node is not None:
            following = node.next
            if ordered is None or ordered.value >= node.value:
                node.next = ordered
                ordered = node
            else:
                current = ordered
                while current.next is not None and current.next.value < node.value:
                    current = current.next
                node.next = current.next
                current.next = node
            node = following
        self.head = ordered

    def render(self) -> str:
        """Return the values separated by single spaces."""
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def merge_sorted(first: SinglyLinkedList, second: SinglyLinkedList) -> SinglyLinkedList:
    """Merge two ascending lists by relinking their nodes; both inputs are left empty.

    On equal values the node from ``second`` comes first.
    """
    left, right = first.head, second.head
    anchor = ListNode(None)
    tail = anchor
    while left is not None and right is not None:
        if left.value < right.value:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    merged = SinglyLinkedList()
    merged.head = anchor.next
    first.head = None
    second.head = None
    return merged


def intersection_value(first: SinglyLinkedList, second: SinglyLinkedList) -> Any:
    """Return the value of the first node shared by both lists, or None if they do not meet."""
    first_length, second_length = len(first), len(second)
    if first_length > second_length:
        longer, shorter = first.head, second.head
    else:
        longer, shorter = second.head, first.head
    for _ in range(abs(first_length - second_length)):
        if longer is None:
            return None
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer.value
        longer, shorter = longer.next, shorter.next
    return None