import pytest

from veriyapilari.kuyruk import EMPTY_TEXT, Queue


def test_pop_returns_values_in_insertion_order():
    queue = Queue()
    for value in (4, 9, 2):
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == [4, 9, 2]
    assert queue.is_empty()


def test_peek_does_not_remove():
    queue = Queue([5, 6])
    assert queue.peek() == 5
    assert len(queue) == 2
    assert queue.pop() == 5
    assert queue.peek() == 6


def test_length_tracks_push_and_pop():
    queue = Queue()
    queue.push(1)
    queue.push(2)
    assert len(queue) == 2
    queue.pop()
    assert len(queue) == 1


def test_pop_on_empty_raises():
    with pytest.raises(IndexError, match="Kuyruk Bos"):
        Queue().pop()


def test_peek_on_empty_raises():
    with pytest.raises(IndexError, match="Kuyruk Bos"):
        Queue().peek()


def test_is_empty_after_draining():
    queue = Queue([3])
    assert not queue.is_empty()
    queue.pop()
    assert queue.is_empty()


def test_str_of_empty_queue():
    assert str(Queue()) == EMPTY_TEXT == "----KUYRUK BOS----"


def test_str_right_aligns_each_value_in_five_columns():
    assert str(Queue([7, 123])) == "    7  123"


def test_iteration_lists_values_front_to_back():
    queue = Queue([1, 2])
    queue.push(3)
    assert list(queue) == [1, 2, 3]