"""Sets of integers kept in an unordered array, an ordered array or an ordered list."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

DEFAULT_CAPACITY = 64


class SetFullError(Exception):
    """Raised when a new element is added to a set that has no room left."""


def _format(elems: Iterable[int]) -> str:
    return "{" + ",".join(str(elem) for elem in elems) + "}"


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class ArraySet:
    """A bounded set whose elements are kept in insertion order.

    Deleting an element moves the last element into its place.
    """

    __slots__ = ("_elems", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._elems: list[int] = []

    def insert(self, elem: int) -> None:
        """Add ``elem``; raise SetFullError if it is new and there is no room."""
        if elem in self._elems:
            return
        if len(self._elems) >= self._capacity:
            raise SetFullError("set is full")
        self._elems.append(elem)

    def delete(self, elem: int) -> None:
        """Remove ``elem`` if present."""
        try:
            index = self._elems.index(elem)
        except ValueError:
            return
        last = self._elems.pop()
        if index < len(self._elems):
            self._elems[index] = last

    def __contains__(self, elem: object) -> bool:
        return elem in self._elems

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._elems))

    def __str__(self) -> str:
        return _format(self._elems)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elems!r})"


class OrderedArraySet:
    """A bounded set whose elements are kept in ascending order."""

    __slots__ = ("_elems", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._elems: list[int] = []

    def _ceiling_index(self, elem: int) -> int:
        return bisect_left(self._elems, elem)

    def _holds_at(self, index: int, elem: int) -> bool:
        return index < len(self._elems) and self._elems[index] == elem

    def insert(self, elem: int) -> None:
        """Add ``elem``; raise SetFullError if it is new and there is no room."""
        index = self._ceiling_index(elem)
        if self._holds_at(index, elem):
            return
        if len(self._elems) >= self._capacity:
            raise SetFullError("set is full")
        self._elems.insert(index, elem)

    def delete(self, elem: int) -> None:
        """Remove ``elem`` if present."""
        index = self._ceiling_index(elem)
        if self._holds_at(index, elem):
            del self._elems[index]

    def __contains__(self, elem: object) -> bool:
        if not isinstance(elem, int):
            return False
        return self._holds_at(self._ceiling_index(elem), elem)

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._elems))

    def __str__(self) -> str:
        return _format(self._elems)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elems!r})"


@dataclass
class _Node:
    elem: int
    next: Optional[_Node] = None


class OrderedListSet:
    """An unbounded set kept as an ascending linked list."""

    __slots__ = ("_head", "_size")

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, elem: int) -> None:
        """Add ``elem`` if it is not already present."""
        prev: Optional[_Node] = None
        cur = self._head
        while cur is not None and cur.elem < elem:
            prev, cur = cur, cur.next
        if cur is not None and cur.elem == elem:
            return
        new = _Node(elem, cur)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._size += 1

    def delete(self, elem: int) -> None:
        """Remove ``elem`` if present."""
        prev: Optional[_Node] = None
        cur = self._head
        while cur is not None and cur.elem < elem:
            prev, cur = cur, cur.next
        if cur is None or cur.elem != elem:
            return
        if prev is None:
            self._head = cur.next
        else:
            prev.next = cur.next
        self._size -= 1

    def __contains__(self, elem: object) -> bool:
        if not isinstance(elem, int):
            return False
        for node in self._nodes():
            if node.elem == elem:
                return True
            if node.elem > elem:
                break
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter([node.elem for node in self._nodes()])

    def __str__(self) -> str:
        return _format(node.elem for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"