"""Singly linked lists of integers and the classic exercises on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list; compared by identity."""

    data: int
    next: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    """Yield each node once, raising ValueError if the list loops back on itself."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order; None when there are none."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head: Node | None) -> list[int]:
    """The values of an acyclic list, from the head onwards."""
    return [node.data for node in _nodes(head)]


def length(head: Node | None) -> int:
    """Number of nodes in an acyclic list."""
    return sum(1 for _ in _nodes(head))


def find(head: Node | None, target: int) -> Node | None:
    """The first node holding ``target``, or None if no node does."""
    return next((node for node in _nodes(head) if node.data == target), None)


def push_front(head: Node | None, value: int) -> Node:
    """Put ``value`` in front of the list and return the new head."""
    return Node(value, head)


def delete_last(head: Node | None) -> Node | None:
    """Drop the last node and return the head; None once the list is empty."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def has_cycle_visited(head: Node | None) -> bool:
    """True if following ``next`` ever revisits a node, remembering each one seen."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def _meeting_point(head: Node | None) -> Node | None:
    """Where a one-step and a two-step walker meet, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Node | None) -> bool:
    """True if the list loops, found with a slow and a fast walker."""
    return _meeting_point(head) is not None


def cycle_length(head: Node | None) -> int:
    """Number of nodes in the loop, 0 when the list ends."""
    meeting = _meeting_point(head)
    if meeting is None:
        return 0
    count = 1
    node = meeting.next
    while node is not meeting:
        node = node.next
        count += 1
    return count


def cycle_start_visited(head: Node | None) -> Node | None:
    """The first node reached twice, or None when the list ends."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return node
        seen.add(id(node))
        node = node.next
    return None


def cycle_start(head: Node | None) -> Node | None:
    """The node where the loop begins, found in constant space; None if there is none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    slow, fast = head, meeting
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def middle(head: Node | None) -> Node | None:
    """The middle node; of two middles, the second. None for an empty list."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse(head: Node | None) -> Node | None:
    """Reverse the links in place and return the new head."""
    previous: Node | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the links in place by recursing to the tail first."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def segregate_even_odd(head: Node | None) -> Node | None:
    """Relink so even values come first and odd values after, each keeping its order."""
    even_dummy, odd_dummy = Node(-1), Node(-1)
    even_tail, odd_tail = even_dummy, odd_dummy
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.data & 1:
            odd_tail.next = node
            odd_tail = node
        else:
            even_tail.next = node
            even_tail = node
        node = following
    even_tail.next = odd_dummy.next
    return even_dummy.next