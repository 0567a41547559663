"""Linear and binary search over integer sequences, with simple timing."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from typing import Optional

SearchFunction = Callable[[Sequence[int], int], Optional[int]]

_ABSENT_VALUE = -99


def binary_search(items: Sequence[int], value: int) -> Optional[int]:
    """Return the index of ``value`` in ascending ``items``, or None if absent."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        probe = items[mid]
        if probe == value:
            return mid
        if value < probe:
            hi = mid - 1
        else:
            lo = mid + 1
    return None


def linear_search(items: Sequence[int], value: int) -> Optional[int]:
    """Return the index of the first occurrence of ``value``, or None if absent."""
    return next((index for index, item in enumerate(items) if item == value), None)


def time_search(search: SearchFunction, items: Sequence[int], value: int) -> float:
    """Run ``search`` once and return the processor time it took, in seconds."""
    start = time.process_time()
    search(items, value)
    return time.process_time() - start


_SEARCHES: dict[str, SearchFunction] = {
    "binary": binary_search,
    "linear": linear_search,
}


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _run_find(method: str) -> int:
    tokens = iter(sys.stdin.read().split())
    try:
        print("Enter array size: ", end="")
        size = max(_next_int(tokens), 0)
        if method == "binary":
            print("Enter array values (must be in ascending order): ", end="")
        else:
            print("Enter array values: ", end="")
        items = [_next_int(tokens) for _ in range(size)]
        print("Enter value to search for: ", end="")
        value = _next_int(tokens)
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = _SEARCHES[method](items, value)
    if result is not None:
        print(f"Found at index {result}")
    else:
        print(f"Did not find value {value}")
    return 0


def _run_timing(method: str, size: int) -> int:
    size = max(size, 0)
    items = list(range(size)) if method == "binary" else [0] * size
    elapsed = time_search(_SEARCHES[method], items, _ABSENT_VALUE)
    print(f"Time taken: {elapsed:f} seconds")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search an array read from standard input, or time a failing search."""
    parser = argparse.ArgumentParser(
        prog="algolab-search",
        description="Linear and binary search over integer arrays.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser(
        "find", help="read an array and a value from standard input and search"
    )
    find.add_argument("method", choices=sorted(_SEARCHES))

    timer = commands.add_parser(
        "time", help="time a search for a value that is not in the array"
    )
    timer.add_argument("method", choices=sorted(_SEARCHES))
    timer.add_argument("size", type=int, help="array size")

    args = parser.parse_args(argv)
    if args.command == "time":
        return _run_timing(args.method, args.size)
    return _run_find(args.method)


if __name__ == "__main__":
    sys.exit(main())