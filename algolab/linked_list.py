"""Singly linked lists of integers, handled through their head node."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A list node holding ``data`` and a link to the ``next`` node."""

    data: int
    next: Optional[Node] = None


def _nodes(node: Optional[Node]) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(node: Optional[Node]) -> list[int]:
    """Return the data of the list as a Python list."""
    return [n.data for n in _nodes(node)]


def last(node: Optional[Node]) -> Optional[Node]:
    """Return the last node, or None for an empty list."""
    tail = None
    for tail in _nodes(node):
        pass
    return tail


def append(node: Optional[Node], value: int) -> Node:
    """Add ``value`` at the end of the list and return the head."""
    new = Node(value)
    tail = last(node)
    if tail is None:
        return new
    tail.next = new
    return node  # type: ignore[return-value]


def list_sum(node: Optional[Node]) -> int:
    """Return the sum of the list's data."""
    return sum(n.data for n in _nodes(node))


def format_list(node: Optional[Node]) -> str:
    """Render the list in Python list syntax."""
    return "[" + ", ".join(str(n.data) for n in _nodes(node)) + "]"


def length(node: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(node))


def find_node(node: Optional[Node], value: int) -> Optional[Node]:
    """Return the first node holding ``value``, or None."""
    return next((n for n in _nodes(node) if n.data == value), None)


def delete(node: Optional[Node], value: int) -> Optional[Node]:
    """Remove the first node holding ``value`` and return the new head.

    Warns if the value is not in the list, which is then left unchanged.
    """
    if node is not None and node.data == value:
        return node.next
    for current in _nodes(node):
        following = current.next
        if following is not None and following.data == value:
            current.next = following.next
            return node
    warnings.warn(f"value {value} is not in list", stacklevel=2)
    return node


def insert_ordered(node: Optional[Node], value: int) -> Node:
    """Insert ``value`` into an ascending list, before any equal values."""
    if node is None or node.data >= value:
        return Node(value, node)
    current = node
    while current.next is not None and current.next.data < value:
        current = current.next
    current.next = Node(value, current.next)
    return node