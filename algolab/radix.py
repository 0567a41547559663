"""LSD radix sort for short lower-case keys, and a random key generator."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import Optional

MAX_ITEMS = 10_000_000
MAX_KEY_LEN = 8
ALPHABET_SIZE = 26
KEY_LEN = 8


def _bucket(key: str, position: int) -> int:
    if position >= len(key):
        return 0
    ch = key[position]
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 1
    raise ValueError(f"unexpected character '{ch}'")


def radix_sort(keys: Iterable[str]) -> list[str]:
    """Return ``keys`` sorted; each must be at most 8 letters from a to z."""
    items = list(keys)
    for key in items:
        if len(key) > MAX_KEY_LEN:
            raise ValueError(f"key longer than {MAX_KEY_LEN} characters: {key!r}")
    for position in reversed(range(MAX_KEY_LEN)):
        buckets: list[list[str]] = [[] for _ in range(ALPHABET_SIZE + 1)]
        for key in items:
            buckets[_bucket(key, position)].append(key)
        items = [key for bucket in buckets for key in bucket]
    return items


def generate_keys(count: int, rng: Optional[random.Random] = None) -> Iterator[str]:
    """Yield ``count`` random keys of 8 lower-case letters."""
    generator = rng if rng is not None else random.Random()
    for _ in range(count):
        yield "".join(generator.choice(string.ascii_lowercase) for _ in range(KEY_LEN))


def _read_keys(text: str) -> Iterator[str]:
    for token in text.split():
        for start in range(0, len(token), MAX_KEY_LEN):
            yield token[start : start + MAX_KEY_LEN]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Radix sort keys from standard input, or print random keys."""
    parser = argparse.ArgumentParser(
        prog="algolab-radix",
        description="Radix sort lower-case keys, or generate random keys.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("sort", help="sort keys read from standard input")
    gen = commands.add_parser("gen", help="print random 8-letter keys")
    gen.add_argument("count", type=int, help="number of keys")
    gen.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    if args.command == "gen":
        keys = generate_keys(args.count, random.Random(args.seed))
        sys.stdout.write("".join(f"{key}\n" for key in keys))
        return 0

    try:
        result = radix_sort(islice(_read_keys(sys.stdin.read()), MAX_ITEMS))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{key}\n" for key in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())