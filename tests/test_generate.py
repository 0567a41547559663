import pytest

from algolab.generate import MAX_ITEMS, Order, generate, main


def test_ascending():
    assert generate(10, Order.ASCENDING) == list(range(1, 11))


def test_descending_is_reverse_of_ascending():
    assert generate(9, "D") == list(reversed(generate(9, "A")))


def test_random_is_permutation():
    result = generate(200, Order.RANDOM, seed=4)
    assert sorted(result) == list(range(1, 201))


def test_random_repeatable_with_seed():
    first = generate(50, "r", seed=11)
    second = generate(50, "r", seed=11)
    assert sorted(first) == list(range(1, 51))
    assert first == second


def test_single_item():
    assert generate(1, Order.RANDOM, seed=0) == [1]


@pytest.mark.parametrize("text", ["a", "A", "asc", "Ascending"])
def test_order_parsed_from_first_letter(text):
    assert Order.parse(text) is Order.ASCENDING


def test_invalid_order():
    with pytest.raises(ValueError, match="Invalid ordering"):
        generate(3, "x")


def test_too_few_items():
    with pytest.raises(ValueError, match="Too few items"):
        generate(0, "A")


def test_too_many_items():
    with pytest.raises(ValueError, match="Too many items"):
        generate(MAX_ITEMS + 1, "A")


def test_main_prints_numbers(capsys):
    assert main(["5", "d"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(v) for v in generate(5, "D")]


def test_main_with_seed(capsys):
    assert main(["20", "R", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(v) for v in generate(20, "R", seed=8)]


def test_main_not_enough_arguments(capsys):
    assert main(["5"]) == 1
    err = capsys.readouterr().err
    assert "Not enough arguments" in err
    assert "A|D|R = Ascending|Descending|Random" in err


def test_main_non_numeric_count_is_too_few(capsys):
    assert main(["abc", "A"]) == 1
    assert "Too few items" in capsys.readouterr().err


def test_main_invalid_order(capsys):
    assert main(["4", "z"]) == 1
    assert "Invalid ordering" in capsys.readouterr().err