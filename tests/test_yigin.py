import pytest

from veriyapilari.yigin import Stack


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_returns_last_pushed():
    stack = Stack()
    for value in (3, 8, 1):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [1, 8, 3]
    assert stack.is_empty()


def test_grows_past_initial_capacity():
    stack = Stack()
    values = list(range(100))
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError, match="Yigin Bos"):
        stack.pop()


def test_pop_after_draining_raises():
    stack = Stack()
    stack.push(4)
    assert stack.pop() == 4
    with pytest.raises(IndexError):
        stack.pop()