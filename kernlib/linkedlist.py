"""Doubly linked list with stable node handles and order-based operations."""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

Less = Callable[[Any, Any], bool]


class ListNode(Generic[T]):
    """A handle to one element of a :class:`LinkedList`."""

    __slots__ = ("value", "_prev", "_next", "_owner")

    def __init__(self, value: T) -> None:
        self.value = value
        self._prev: Optional[ListNode[T]] = None
        self._next: Optional[ListNode[T]] = None
        self._owner: Optional[LinkedList[T]] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _comparator(less: Optional[Less]) -> Callable[[Any, Any], int]:
    less = less or operator.lt

    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return compare


class LinkedList(Generic[T]):
    """A doubly linked list whose elements keep their node identity when moved.

    Orderings are given by a ``less(a, b)`` predicate; when it is omitted the
    values' own ``<`` is used.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._head: ListNode[T] = ListNode(None)  # type: ignore[arg-type]
        self._tail: ListNode[T] = ListNode(None)  # type: ignore[arg-type]
        self._head._next = self._tail
        self._tail._prev = self._head
        self._head._owner = self._tail._owner = self
        self._size = 0
        for value in iterable if iterable is not None else ():
            self.push_back(value)

    # -- internal linking -------------------------------------------------

    def _is_interior(self, node: ListNode[T]) -> bool:
        return (
            node._owner is self and node is not self._head and node is not self._tail
        )

    def _position(self, before: Optional[ListNode[T]]) -> ListNode[T]:
        if before is None:
            return self._tail
        if not self._is_interior(before):
            raise ValueError("node is not an element of this list")
        return before

    def _link(self, before: ListNode[T], node: ListNode[T]) -> None:
        prev = before._prev
        assert prev is not None
        node._prev = prev
        node._next = before
        prev._next = node
        before._prev = node
        node._owner = self
        self._size += 1

    @staticmethod
    def _unlink(node: ListNode[T]) -> None:
        owner = node._owner
        assert owner is not None and node._prev is not None and node._next is not None
        node._prev._next = node._next
        node._next._prev = node._prev
        owner._size -= 1
        node._prev = node._next = None
        node._owner = None

    def _relink(self, order: list[ListNode[T]]) -> None:
        prev = self._head
        for node in order:
            prev._next = node
            node._prev = prev
            prev = node
        prev._next = self._tail
        self._tail._prev = prev

    # -- traversal --------------------------------------------------------

    def nodes(self) -> Iterator[ListNode[T]]:
        """Yield the nodes front to back; the current node may be removed."""
        node = self._head._next
        while node is not None and node is not self._tail:
            following = node._next
            yield node
            node = following

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[T]:
        node = self._tail._prev
        while node is not None and node is not self._head:
            preceding = node._prev
            yield node.value
            node = preceding

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def front(self) -> T:
        """Return the first value; raises IndexError if the list is empty."""
        if not self:
            raise IndexError("front of empty list")
        assert self._head._next is not None
        return self._head._next.value

    def back(self) -> T:
        """Return the last value; raises IndexError if the list is empty."""
        if not self:
            raise IndexError("back of empty list")
        assert self._tail._prev is not None
        return self._tail._prev.value

    # -- insertion and removal -------------------------------------------

    def insert(self, before: Optional[ListNode[T]], value: T) -> ListNode[T]:
        """Insert VALUE just before node BEFORE (None means at the end)."""
        position = self._position(before)
        node = ListNode(value)
        self._link(position, node)
        return node

    def push_front(self, value: T) -> ListNode[T]:
        """Insert VALUE at the front and return its node."""
        node = ListNode(value)
        assert self._head._next is not None
        self._link(self._head._next, node)
        return node

    def push_back(self, value: T) -> ListNode[T]:
        """Insert VALUE at the back and return its node."""
        node = ListNode(value)
        self._link(self._tail, node)
        return node

    def remove(self, node: ListNode[T]) -> T:
        """Remove NODE from this list and return its value."""
        if not self._is_interior(node):
            raise ValueError("node is not an element of this list")
        self._unlink(node)
        return node.value

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if not self:
            raise IndexError("pop from empty list")
        assert self._head._next is not None
        return self.remove(self._head._next)

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if not self:
            raise IndexError("pop from empty list")
        assert self._tail._prev is not None
        return self.remove(self._tail._prev)

    def splice(
        self,
        before: Optional[ListNode[T]],
        first: ListNode[T],
        last: Optional[ListNode[T]],
    ) -> None:
        """Move nodes FIRST up to LAST (exclusive) to just before BEFORE.

        The moved nodes may come from any list.  LAST of None means the end
        of FIRST's list; BEFORE of None means the end of this list.
        """
        position = self._position(before)
        if first is last:
            return
        source = first._owner
        if source is None or not source._is_interior(first):
            raise ValueError("first is not an element of a list")
        if last is not None and last._owner is not source:
            raise ValueError("first and last belong to different lists")
        stop = source._tail if last is None else last

        moved: list[ListNode[T]] = []
        node: Optional[ListNode[T]] = first
        while node is not stop:
            if node is None or node is source._tail:
                raise ValueError("last does not follow first")
            moved.append(node)
            node = node._next
        if position in moved:
            raise ValueError("cannot splice a range before one of its own nodes")

        for node in moved:
            self._unlink(node)
        for node in moved:
            self._link(position, node)

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        order = list(self.nodes())
        order.reverse()
        self._relink(order)

    # -- ordered operations ----------------------------------------------

    def sort(self, less: Optional[Less] = None) -> None:
        """Stably sort the list in place by LESS, keeping node identity."""
        order = sorted(self.nodes(), key=lambda n: _Keyed(n.value, less))
        self._relink(order)

    def insert_ordered(self, value: T, less: Optional[Less] = None) -> ListNode[T]:
        """Insert VALUE into a list sorted by LESS, after any equal values."""
        less = less or operator.lt
        for node in self.nodes():
            if less(value, node.value):
                return self.insert(node, value)
        return self.push_back(value)

    def unique(
        self,
        less: Optional[Less] = None,
        duplicates: Optional[LinkedList[T]] = None,
    ) -> None:
        """Drop all but the first of each run of adjacent equal values.

        Dropped nodes are appended to DUPLICATES when it is given.
        """
        less = less or operator.lt
        previous: Optional[ListNode[T]] = None
        for node in self.nodes():
            if previous is not None and not less(previous.value, node.value) and not less(
                node.value, previous.value
            ):
                self._unlink(node)
                if duplicates is not None:
                    duplicates._link(duplicates._tail, node)
            else:
                previous = node

    def max(self, less: Optional[Less] = None) -> T:
        """Return the largest value, the earliest one among equals."""
        less = less or operator.lt
        if not self:
            raise ValueError("max of empty list")
        best = None
        for index, value in enumerate(self):
            if index == 0 or less(best, value):
                best = value
        return best  # type: ignore[return-value]

    def min(self, less: Optional[Less] = None) -> T:
        """Return the smallest value, the earliest one among equals."""
        less = less or operator.lt
        if not self:
            raise ValueError("min of empty list")
        best = None
        for index, value in enumerate(self):
            if index == 0 or less(value, best):
                best = value
        return best  # type: ignore[return-value]


class _Keyed:
    """Sort key adapting a ``less`` predicate."""

    __slots__ = ("value", "less")

    def __init__(self, value: Any, less: Optional[Less]) -> None:
        self.value = value
        self.less = less or operator.lt

    def __lt__(self, other: "_Keyed") -> bool:
        return bool(self.less(self.value, other.value))


# Kept for callers that prefer a three-way comparison.
_cmp_key = lambda less: cmp_to_key(_comparator(less))  # noqa: E731