import pytest

from algokit.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_overflow_and_drain():
    stack = BoundedStack()
    for i in range(1, 6):
        stack.push(i * 10)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(60)
    drained = []
    while not stack.is_empty():
        drained.append(stack.pop())
    assert drained == [50, 40, 30, 20, 10]
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_peek_does_not_remove():
    stack = BoundedStack(3)
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    assert list(stack) == ["b", "a"]


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack().peek()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)