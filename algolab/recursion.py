"""Small recursive algorithms: Towers of Hanoi and factorial."""

from __future__ import annotations

from collections.abc import Iterator


def hanoi_moves(
    num_disks: int, from_rod: str, to_rod: str, other_rod: str
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_rod, to_rod)`` moves solving Towers of Hanoi."""
    if num_disks < 1:
        raise ValueError("number of disks must be at least 1")
    if num_disks == 1:
        yield (1, from_rod, to_rod)
        return
    yield from hanoi_moves(num_disks - 1, from_rod, other_rod, to_rod)
    yield (num_disks, from_rod, to_rod)
    yield from hanoi_moves(num_disks - 1, other_rod, to_rod, from_rod)


def factorial(n: int) -> int:
    """Return ``n!`` computed with an accumulator."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    acc = 1
    while n > 0:
        acc *= n
        n -= 1
    return acc