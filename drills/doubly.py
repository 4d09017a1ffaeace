"""Doubly linked lists of integers and a few exercises on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class DNode:
    """One cell of a doubly linked list; compared by identity."""

    data: int
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)


def push_front(head: DNode | None, value: int) -> DNode:
    """Put ``value`` in front of the list and return the new head."""
    node = DNode(value, head)
    if head is not None:
        head.prev = node
    return node


def from_values(values: Iterable[int]) -> DNode | None:
    """Build a list holding ``values`` in order; None when there are none."""
    head: DNode | None = None
    for value in reversed(list(values)):
        head = push_front(head, value)
    return head


def to_list(head: DNode | None) -> list[int]:
    """The values from ``head`` onwards, following ``next``."""
    values = []
    node = head
    while node is not None:
        values.append(node.data)
        node = node.next
    return values


def to_list_backward(tail: DNode | None) -> list[int]:
    """The values from ``tail`` back to the head, following ``prev``."""
    values = []
    node = tail
    while node is not None:
        values.append(node.data)
        node = node.prev
    return values


def delete_last(head: DNode | None) -> DNode | None:
    """Drop the last node and return the head; None once the list is empty."""
    if head is None or head.next is None:
        return None
    last = head
    while last.next is not None:
        last = last.next
    last.prev.next = None
    last.prev = None
    return head


def reverse(head: DNode | None) -> DNode | None:
    """Swap every node's links in place and return the new head."""
    last: DNode | None = None
    node = head
    while node is not None:
        node.prev, node.next = node.next, node.prev
        last = node
        node = node.prev
    return last