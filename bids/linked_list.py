"""Singly linked list of bids.

Keeps both a head and a tail reference so that appending (the bulk-load
path) never walks the chain, plus a running count so size queries are O(1).
Search and removal are linear scans keyed on ``Bid.bid_id``; the list does
not enforce key uniqueness, so only the earliest match is ever addressed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from bids.bid import Bid


@dataclass
class _Node:
    bid: Bid
    next: Optional["_Node"] = None


class LinkedList:
    """Ordered bid container with O(1) append and prepend."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def append(self, bid: Bid) -> None:
        node = _Node(bid)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, bid: Bid) -> None:
        node = _Node(bid, next=self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def search(self, bid_id: str) -> Optional[Bid]:
        """Return the first bid whose id equals ``bid_id``, or None."""
        if not bid_id:
            return None
        current = self._head
        while current is not None:
            if current.bid.bid_id == bid_id:
                return current.bid
            current = current.next
        return None

    def contains(self, bid_id: str) -> bool:
        return self.search(bid_id) is not None

    def remove(self, bid_id: str) -> bool:
        """Unlink the first bid matching ``bid_id``.

        Returns False (and leaves the list untouched) when nothing matches,
        including when the list is empty.
        """
        if self._head is None:
            return False

        if self._head.bid.bid_id == bid_id:
            removed = self._head
            self._head = removed.next
            removed.next = None
            self._size -= 1
            if self._head is None:
                self._tail = None
            return True

        prev = self._head
        while prev.next is not None:
            current = prev.next
            if current.bid.bid_id == bid_id:
                prev.next = current.next
                if current is self._tail:
                    self._tail = prev
                current.next = None
                self._size -= 1
                return True
            prev = current
        return False

    def print_list(self, display: Callable[[Bid], None]) -> None:
        """Call ``display`` once per stored bid, head to tail."""
        for bid in self:
            display(bid)

    def clear(self) -> None:
        # Unlink front to back so every node is released exactly once.
        current = self._head
        while current is not None:
            nxt = current.next
            current.next = None
            current = nxt
        self._head = self._tail = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    @property
    def head_bid(self) -> Optional[Bid]:
        return self._head.bid if self._head is not None else None

    @property
    def tail_bid(self) -> Optional[Bid]:
        return self._tail.bid if self._tail is not None else None

    def __iter__(self) -> Iterator[Bid]:
        current = self._head
        while current is not None:
            yield current.bid
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"<LinkedList size={self._size}>"
