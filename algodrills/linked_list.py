"""Singly linked lists: building, cycle detection, filtering and reversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [] if head is None else list(head)


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val`` and return the new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        if cur.val == val:
            if prev is None:
                head = cur.next
            else:
                prev.next = cur.next
        else:
            prev = cur
        cur = cur.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    reversed_head: Optional[ListNode] = None
    while head is not None:
        node = head
        head = head.next
        node.next = reversed_head
        reversed_head = node
    return reversed_head