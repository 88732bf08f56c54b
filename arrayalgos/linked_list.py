"""Singly linked lists: building, reversing and rotating."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def build_list(values: Iterable[Any]) -> Node | None:
    """Link the values into a list and return its head, or ``None`` if empty."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def rotate_list(head: Node | None, k: int) -> Node | None:
    """Rotate the list left by ``k`` nodes in place and return the new head."""
    if k < 0:
        raise ValueError("rotation count must not be negative")
    if head is None:
        return None
    k %= sum(1 for _ in head)
    if k == 0:
        return head
    tail = head
    for _ in range(k - 1):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    last = new_head
    while last.next is not None:
        last = last.next
    last.next = head
    return new_head