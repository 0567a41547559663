import pytest

from algolab.fifo import Queue


def test_queue_sequence():
    q = Queue()
    assert len(q) == 0

    q.enqueue(3)
    assert len(q) == 1
    q.enqueue(1)
    assert len(q) == 2
    q.enqueue(4)
    assert len(q) == 3
    assert q.peek() == 3

    assert q.dequeue() == 3
    assert len(q) == 2
    assert q.peek() == 1

    assert q.dequeue() == 1
    assert len(q) == 1
    assert q.peek() == 4

    q.enqueue(1)
    assert len(q) == 2
    q.enqueue(5)
    assert len(q) == 3

    assert q.dequeue() == 4
    assert len(q) == 2
    assert q.peek() == 1

    assert q.dequeue() == 1
    assert len(q) == 1
    assert q.peek() == 5

    assert q.dequeue() == 5
    assert len(q) == 0


def test_fifo_order():
    q = Queue()
    values = list(range(20))
    for value in values:
        q.enqueue(value)
    assert [q.dequeue() for _ in values] == values


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_peek_empty_raises():
    q = Queue()
    q.enqueue(7)
    q.dequeue()
    with pytest.raises(IndexError):
        q.peek()