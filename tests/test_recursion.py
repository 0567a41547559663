import pytest

from algolab.recursion import factorial, hanoi_moves


def test_hanoi_three_disks_sequence():
    moves = list(hanoi_moves(3, "Rod A", "Rod C", "Rod B"))
    assert moves == [
        (1, "Rod A", "Rod C"),
        (2, "Rod A", "Rod B"),
        (1, "Rod C", "Rod B"),
        (3, "Rod A", "Rod C"),
        (1, "Rod B", "Rod A"),
        (2, "Rod B", "Rod C"),
        (1, "Rod A", "Rod C"),
    ]


def test_hanoi_single_disk():
    assert list(hanoi_moves(1, "A", "C", "B")) == [(1, "A", "C")]


@pytest.mark.parametrize("disks", [1, 2, 4, 6])
def test_hanoi_moves_are_legal_and_complete(disks):
    rods = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_moves(disks, "A", "C", "B"))
    for disk, src, dst in moves:
        assert rods[src][-1] == disk
        rods[src].pop()
        assert not rods[dst] or rods[dst][-1] > disk
        rods[dst].append(disk)
    assert rods["C"] == list(range(disks, 0, -1))
    assert rods["A"] == [] and rods["B"] == []
    assert len(moves) == 2**disks - 1


def test_hanoi_rejects_zero_disks():
    with pytest.raises(ValueError):
        list(hanoi_moves(0, "A", "C", "B"))


def test_factorial_of_five():
    assert factorial(5) == 120


def test_factorial_of_zero():
    assert factorial(0) == 1


@pytest.mark.parametrize("n", range(1, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)