import pytest

from dsakit.stack import Stack, StackOverflowError, StackUnderflowError


@pytest.fixture
def full_stack():
    stack = Stack(5)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    return stack


def test_push_beyond_capacity_raises(full_stack):
    assert full_stack.is_full()
    with pytest.raises(StackOverflowError):
        full_stack.push(60)
    assert len(full_stack) == 5


def test_peek_counts_from_top(full_stack):
    assert full_stack.peek(1) == 50
    assert full_stack.peek(5) == 10


def test_peek_invalid_index(full_stack):
    with pytest.raises(IndexError):
        full_stack.peek(6)
    with pytest.raises(IndexError):
        full_stack.peek(0)


def test_top_is_last_pushed(full_stack):
    assert full_stack.top() == 50
    assert len(full_stack) == 5


def test_iteration_from_top(full_stack):
    assert list(full_stack) == [50, 40, 30, 20, 10]


def test_pop_is_lifo(full_stack):
    popped = [full_stack.pop() for _ in range(5)]
    assert popped == [50, 40, 30, 20, 10]
    assert full_stack.is_empty()


def test_pop_empty_raises():
    stack = Stack(3)
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_top_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().top()


def test_unbounded_stack_never_full():
    stack = Stack()
    for value in range(1000):
        stack.push(value)
    assert not stack.is_full()
    assert len(stack) == 1000
    assert stack.top() == 999


def test_empty_and_full_flags_transition():
    stack = Stack(1)
    assert stack.is_empty() and not stack.is_full()
    stack.push(7)
    assert stack.is_full() and not stack.is_empty()
    assert stack.pop() == 7
    assert stack.is_empty()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)