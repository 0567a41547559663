"""Comparison sorts over mutable sequences, with a command-line sorter."""

from __future__ import annotations

import argparse
import heapq
import random
import sys
from collections.abc import Callable, Iterator, MutableSequence, Sequence
from enum import Enum
from itertools import islice
from typing import Any, Optional, Union

MAX_ITEMS = 100_000_000
STR_ITEM_WIDTH = 9

PivotChooser = Callable[[MutableSequence[Any], int, int], None]


class SortMethod(Enum):
    """The available sorting algorithms, keyed by their one-letter code."""

    SELECTION = "s"
    BUBBLE = "b"
    INSERTION = "i"
    SHELL = "h"
    MERGE = "m"
    NAIVE_QUICK = "N"
    MEDIAN_OF_THREE_QUICK = "M"
    RANDOMISED_QUICK = "R"

    @property
    def label(self) -> str:
        """The method's name as used on the command line."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, text: Union[str, "SortMethod"]) -> "SortMethod":
        """Return the method named by a code, a label or a member."""
        if isinstance(text, cls):
            return text
        for method in cls:
            if text in (method.value, method.label):
                return method
        raise ValueError(f"invalid sorting method: {text!r}")


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        _swap(items, i, smallest)


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    for i in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(i):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(items)):
        item = items[i]
        j = i
        while j > 0 and item < items[j - 1]:
            items[j] = items[j - 1]
            j -= 1
        items[j] = item


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with h-sorting over the 3h+1 gap sequence."""
    size = len(items)
    if size < 2:
        return
    h = 1
    while h <= (size - 1) // 9:
        h = 3 * h + 1
    while h > 0:
        for i in range(h, size):
            item = items[i]
            j = i
            while j >= h and item < items[j - h]:
                items[j] = items[j - h]
                j -= h
            items[j] = item
        h //= 3


def _merge_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    _merge_sort(items, lo, mid)
    _merge_sort(items, mid + 1, hi)
    left = items[lo : mid + 1]
    right = items[mid + 1 : hi + 1]
    items[lo : hi + 1] = list(heapq.merge(left, right))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    _merge_sort(items, 0, len(items) - 1)


def _partition(items: MutableSequence[Any], lo: int, hi: int) -> int:
    pivot = items[lo]
    left, right = lo + 1, hi
    while True:
        while left < right and items[left] <= pivot:
            left += 1
        while left < right and items[right] >= pivot:
            right -= 1
        if left == right:
            break
        _swap(items, left, right)
    if pivot < items[left]:
        left -= 1
    _swap(items, lo, left)
    return left


def _quick_sort(items: MutableSequence[Any], choose_pivot: PivotChooser) -> None:
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        choose_pivot(items, lo, hi)
        pivot_index = _partition(items, lo, hi)
        pending.append((pivot_index + 1, hi))
        pending.append((lo, pivot_index - 1))


def _first_as_pivot(items: MutableSequence[Any], lo: int, hi: int) -> None:
    return None


def _median_of_three(items: MutableSequence[Any], lo: int, hi: int) -> None:
    mid = (lo + hi) // 2
    if items[mid] > items[lo]:
        _swap(items, mid, lo)
    if items[lo] > items[hi]:
        _swap(items, lo, hi)
    if items[mid] > items[lo]:
        _swap(items, mid, lo)


def naive_quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort pivoting on the first item."""
    _quick_sort(items, _first_as_pivot)


def median_of_three_quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort pivoting on a median of three."""
    _quick_sort(items, _median_of_three)


def randomised_quick_sort(
    items: MutableSequence[Any], rng: Optional[random.Random] = None
) -> None:
    """Sort ``items`` in place with quicksort pivoting on a random item."""
    generator = rng if rng is not None else random.Random()

    def choose(seq: MutableSequence[Any], lo: int, hi: int) -> None:
        _swap(seq, lo, generator.randint(lo, hi))

    _quick_sort(items, choose)


_SORTERS: dict[SortMethod, Callable[[MutableSequence[Any]], None]] = {
    SortMethod.SELECTION: selection_sort,
    SortMethod.BUBBLE: bubble_sort,
    SortMethod.INSERTION: insertion_sort,
    SortMethod.SHELL: shell_sort,
    SortMethod.MERGE: merge_sort,
    SortMethod.NAIVE_QUICK: naive_quick_sort,
    SortMethod.MEDIAN_OF_THREE_QUICK: median_of_three_quick_sort,
    SortMethod.RANDOMISED_QUICK: randomised_quick_sort,
}


def sort_items(items: Sequence[Any], method: Union[str, SortMethod]) -> list[Any]:
    """Return a new list of ``items`` sorted with the given method."""
    result = list(items)
    _SORTERS[SortMethod.parse(method)](result)
    return result


def _read_ints(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def _read_strings(text: str) -> Iterator[str]:
    for token in text.split():
        for start in range(0, len(token), STR_ITEM_WIDTH):
            yield token[start : start + STR_ITEM_WIDTH]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort items read from standard input and print one per line."""
    parser = argparse.ArgumentParser(
        prog="algolab-sort",
        description="Sort whitespace-separated items read from standard input.",
    )
    parser.add_argument(
        "method",
        help="one of: " + ", ".join(f"{m.label} ({m.value})" for m in SortMethod),
    )
    parser.add_argument(
        "--strings",
        action="store_true",
        help=f"sort words of up to {STR_ITEM_WIDTH} characters instead of integers",
    )
    parser.add_argument("--seed", type=int, help="seed for the randomised quicksort")
    args = parser.parse_args(argv)

    try:
        method = SortMethod.parse(args.method)
    except ValueError:
        print("Invalid sorting method", file=sys.stderr)
        return 1

    text = sys.stdin.read()
    reader = _read_strings if args.strings else _read_ints
    items: list[Any] = list(islice(reader(text), MAX_ITEMS))

    if method is SortMethod.RANDOMISED_QUICK:
        randomised_quick_sort(items, random.Random(args.seed))
    else:
        _SORTERS[method](items)

    sys.stdout.write("".join(f"{item}\n" for item in items))
    return 0


if __name__ == "__main__":
    sys.exit(main())