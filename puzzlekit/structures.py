"""Small data structures: a singly linked list node and a seat reservation system."""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Values from this node to the end of the list."""
        return list(self)


def merge_nodes(head: ListNode) -> ListNode:
    """Replace each zero-delimited run with one node holding its sum, in place."""
    result = head.next
    if result is None:
        raise ValueError("list must contain at least one value between zeros")
    tail = result
    node = result.next
    while node is not None:
        if node.val == 0:
            if node.next is None:
                tail.next = None
            else:
                tail = tail.next
                tail.val = 0
        else:
            tail.val += node.val
        node = node.next
    return result


class SeatManager:
    """Hands out the lowest-numbered free seat among seats 1..n."""

    def __init__(self, n: int) -> None:
        self._free = list(range(1, n + 1))

    def reserve(self) -> int:
        """Reserve and return the smallest free seat number."""
        if not self._free:
            raise IndexError("no free seats")
        return heapq.heappop(self._free)

    def unreserve(self, seat_number: int) -> None:
        """Release a previously reserved seat."""
        heapq.heappush(self._free, seat_number)