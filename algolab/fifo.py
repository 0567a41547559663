"""A first-in, first-out queue of items."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """Items leave in the order they were added."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"