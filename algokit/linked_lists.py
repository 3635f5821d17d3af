"""Singly linked list operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional[ListNode] = None


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Return the head of a new list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def push_front(head: Optional[ListNode], value: Any) -> ListNode:
    """Return a new head holding ``value`` in front of ``head``."""
    return ListNode(value, head)


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Stably sort the list by relinking its nodes; return the new head."""
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    sorted_head: Optional[ListNode] = None
    for node in reversed(nodes):
        if sorted_head is None or node.val <= sorted_head.val:
            node.next = sorted_head
            sorted_head = node
            continue
        cursor = sorted_head
        while cursor.next is not None and node.val > cursor.next.val:
            cursor = cursor.next
        node.next = cursor.next
        cursor.next = node
    return sorted_head


def delete_value(head: Optional[ListNode], key: Any) -> Optional[ListNode]:
    """Unlink the first node holding ``key``; return the possibly new head."""
    if head is None:
        return None
    if head.val == key:
        return head.next
    prev = head
    while prev.next is not None and prev.next.val != key:
        prev = prev.next
    if prev.next is not None:
        prev.next = prev.next.next
    return head


def merge_sorted(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists into one sorted list, preferring ``first`` on ties."""
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if second.val < first.val:
            tail.next = second
            second = second.next
        else:
            tail.next = first
            first = first.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right; return the new head."""
    if head is None:
        return None
    count = 0
    node: Optional[ListNode] = head
    while node is not None:
        count += 1
        node = node.next
    k %= count
    if k == 0:
        return head
    new_tail = head
    for _ in range(count - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    last = new_head
    while last.next is not None:
        last = last.next
    last.next = head
    return new_head