"""A last-in, first-out stack and a bracket balance checker built on it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any, Optional

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class Stack:
    """Items leave in the reverse of the order they were added."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def brackets_balanced(text: str) -> bool:
    """Return whether the (), [] and {} brackets in ``text`` are balanced."""
    stack = Stack()
    for ch in text:
        if ch in _OPENERS:
            stack.push(ch)
        elif ch in _PAIRS:
            if len(stack) == 0 or stack.pop() != _PAIRS[ch]:
                return False
    return len(stack) == 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report whether the brackets read from standard input are balanced."""
    parser = argparse.ArgumentParser(
        prog="algolab-brackets",
        description="Check that brackets on standard input are balanced.",
    )
    parser.parse_args(argv)
    balanced = brackets_balanced(sys.stdin.read())
    print(f"brackets {'are' if balanced else 'are not'} balanced!")
    return 0


if __name__ == "__main__":
    sys.exit(main())