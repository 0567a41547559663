import pytest

from algolab.linked_list import (
    Node,
    append,
    delete,
    find_node,
    format_list,
    from_iterable,
    insert_ordered,
    last,
    length,
    list_sum,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [3, 1, 4, 1, 5, 9]])
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_append_builds_in_order():
    head = None
    for value in [7, 8, 9]:
        head = append(head, value)
    assert to_list(head) == [7, 8, 9]


def test_last():
    assert last(None) is None
    head = from_iterable([4, 5, 6])
    assert last(head).data == 6
    assert last(head).next is None


def test_length_and_sum():
    values = [10, -2, 33, 4]
    head = from_iterable(values)
    assert length(head) == len(values)
    assert list_sum(head) == sum(values)
    assert length(None) == 0
    assert list_sum(None) == 0


def test_format_list():
    assert format_list(None) == "[]"
    assert format_list(from_iterable([1, 2, 3])) == "[1, 2, 3]"


def test_find_node():
    head = from_iterable([5, 42, 7, 42])
    found = find_node(head, 42)
    assert found is head.next
    assert find_node(head, 100) is None


def test_delete_head_middle_and_tail():
    head = from_iterable([1, 2, 3, 4])
    head = delete(head, 1)
    assert to_list(head) == [2, 3, 4]
    head = delete(head, 3)
    assert to_list(head) == [2, 4]
    head = delete(head, 4)
    assert to_list(head) == [2]
    assert delete(head, 2) is None


def test_delete_only_first_occurrence():
    head = delete(from_iterable([50, 1, 50]), 50)
    assert to_list(head) == [1, 50]


def test_delete_missing_warns():
    head = from_iterable([1, 2])
    with pytest.warns(UserWarning, match="50"):
        result = delete(head, 50)
    assert to_list(result) == [1, 2]


def test_delete_from_empty_warns():
    with pytest.warns(UserWarning):
        assert delete(None, 3) is None


def test_insert_ordered_worked_example():
    head = from_iterable([12, 27, 33, 55, 78])
    head = insert_ordered(head, 52)
    assert to_list(head) == [12, 27, 33, 52, 55, 78]


@pytest.mark.parametrize("value", [-5, 0, 12, 40, 78, 100])
def test_insert_ordered_keeps_sorted(value):
    values = [12, 27, 33, 55, 78]
    head = insert_ordered(from_iterable(values), value)
    assert to_list(head) == sorted(values + [value])


def test_insert_into_empty():
    node = insert_ordered(None, 9)
    assert node == Node(9)