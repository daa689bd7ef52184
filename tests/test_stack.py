import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.stack import Stack, StackOverflowError, StackUnderflowError


def test_push_peek_pop_sequence():
    s = Stack()
    for value in (5, 10, 15):
        s.push(value)
    assert s.peek() == 15
    assert s.pop() == 15
    assert s.peek() == 10
    assert s.is_empty() is False
    assert s.is_full() is False


def test_default_capacity_is_one_hundred():
    s = Stack()
    for value in range(100):
        s.push(value)
    assert s.is_full() is True
    with pytest.raises(StackOverflowError):
        s.push(100)


def test_overflow_with_small_capacity():
    s = Stack(capacity=2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflowError):
        s.push(3)
    assert len(s) == 2


def test_pop_empty_raises_underflow():
    with pytest.raises(StackUnderflowError):
        Stack().pop()


def test_peek_empty_raises_underflow():
    with pytest.raises(StackUnderflowError):
        Stack().peek()


def test_new_stack_is_empty():
    s = Stack()
    assert s.is_empty() is True
    assert len(s) == 0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)


@given(st.lists(st.integers(), max_size=100))
def test_pops_return_values_in_reverse(values):
    s = Stack()
    for value in values:
        s.push(value)
    assert len(s) == len(values)
    popped = [s.pop() for _ in values]
    assert popped == values[::-1]
    assert s.is_empty()