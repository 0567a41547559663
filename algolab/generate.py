"""Generate the integers 1..N in ascending, descending or random order."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence
from enum import Enum
from typing import Optional, Union

MAX_ITEMS = 100_000_000

_PROG = "algolab-generate"
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class Order(Enum):
    """The order in which the generated numbers are emitted."""

    ASCENDING = "A"
    DESCENDING = "D"
    RANDOM = "R"

    @classmethod
    def parse(cls, text: Union[str, "Order"]) -> "Order":
        """Return the order named by the first letter of ``text``."""
        if isinstance(text, cls):
            return text
        if text:
            for order in cls:
                if text[0].upper() == order.value:
                    return order
        raise ValueError("Invalid ordering")


def generate(
    count: int, order: Union[str, Order], seed: Optional[int] = None
) -> list[int]:
    """Return the numbers 1..count arranged in the given order."""
    if count < 1:
        raise ValueError("Too few items")
    if count > MAX_ITEMS:
        raise ValueError("Too many items")
    chosen = Order.parse(order)

    items = list(range(1, count + 1))
    if chosen is Order.DESCENDING:
        items.reverse()
    elif chosen is Order.RANDOM:
        rng = random.Random(seed)
        for i in range(1, count):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]
    return items


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def _give_up(message: str) -> int:
    print(
        f"{message}\n"
        f"Usage: {_PROG}  N  A|D|R  [seed]\n"
        f"       N = number of items (1-{MAX_ITEMS})\n"
        "       A|D|R = Ascending|Descending|Random",
        file=sys.stderr,
    )
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the generated numbers, one per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return _give_up("Not enough arguments")
    seed = _atoi(args[2]) if len(args) > 2 else None
    try:
        items = generate(_atoi(args[0]), args[1], seed)
    except ValueError as exc:
        return _give_up(str(exc))
    sys.stdout.write("".join(f"{item}\n" for item in items))
    return 0


if __name__ == "__main__":
    sys.exit(main())