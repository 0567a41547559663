import io

import pytest

from algolab.search import binary_search, linear_search, main, time_search

SORTED = [11, 14, 17, 19, 21, 24, 28, 31, 33, 36, 38]


@pytest.mark.parametrize("value", SORTED)
def test_binary_search_finds_every_element(value):
    index = binary_search(SORTED, value)
    assert SORTED[index] == value


@pytest.mark.parametrize("value", [13, 10, 39, 20])
def test_binary_search_missing_value(value):
    assert binary_search(SORTED, value) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


@pytest.mark.parametrize("value", SORTED)
def test_linear_search_finds_every_element(value):
    index = linear_search(SORTED, value)
    assert SORTED[index] == value


def test_linear_search_unsorted_and_missing():
    items = [9, 3, 7, 1]
    assert items[linear_search(items, 7)] == 7
    assert linear_search(items, 42) is None


def test_linear_search_returns_first_occurrence():
    assert linear_search([5, 5, 5], 5) == 0


def test_searches_agree_on_sorted_input():
    items = list(range(0, 200, 3))
    for value in range(-5, 205):
        assert binary_search(items, value) == linear_search(items, value)


def test_time_search_is_non_negative():
    elapsed = time_search(linear_search, [0] * 1000, -99)
    assert elapsed >= 0.0


def test_main_find_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n2\n"))
    assert main(["find", "binary"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter array size: ")
    assert out.endswith("Found at index 1\n")


def test_main_find_not_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4 6\n5\n"))
    assert main(["find", "linear"]) == 0
    assert capsys.readouterr().out.endswith("Did not find value 5\n")


def test_main_find_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))
    assert main(["find", "linear"]) == 1
    assert "error" in capsys.readouterr().err


@pytest.mark.parametrize("method", ["binary", "linear"])
def test_main_time(method, capsys):
    assert main(["time", method, "1000"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Time taken: ")
    assert out.endswith(" seconds\n")


def test_main_time_requires_size():
    with pytest.raises(SystemExit):
        main(["time", "binary"])