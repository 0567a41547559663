import io

import pytest

from algolab.stack import Stack, brackets_balanced, main


def test_stack_sequence():
    s = Stack()
    assert len(s) == 0

    s.push(3)
    assert len(s) == 1
    assert s.peek() == 3

    s.push(1)
    assert len(s) == 2
    assert s.peek() == 1

    s.push(4)
    assert len(s) == 3
    assert s.peek() == 4

    assert s.pop() == 4
    assert len(s) == 2
    assert s.peek() == 1

    assert s.pop() == 1
    assert len(s) == 1
    assert s.peek() == 3

    s.push(1)
    assert len(s) == 2
    assert s.peek() == 1

    s.push(5)
    assert len(s) == 3
    assert s.peek() == 5

    assert s.pop() == 5
    assert len(s) == 2
    assert s.peek() == 1

    assert s.pop() == 1
    assert len(s) == 1
    assert s.peek() == 3

    assert s.pop() == 3
    assert len(s) == 0


def test_lifo_order():
    s = Stack()
    values = list(range(15))
    for value in values:
        s.push(value)
    assert [s.pop() for _ in values] == values[::-1]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


@pytest.mark.parametrize(
    "text", ["", "()", "([]{})", "{[()()]}", "int main(void) { return a[0]; }"]
)
def test_balanced(text):
    assert brackets_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "}{"])
def test_unbalanced(text):
    assert brackets_balanced(text) is False


def test_main_balanced(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("f(a[1], {b})\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "brackets are balanced!\n"


def test_main_unbalanced(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("f(a[1)]\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "brackets are not balanced!\n"