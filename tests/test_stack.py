from enum import Enum

import pytest

from pushdown.stack import Stack


class StackElement(Enum):
    BOTTOM = "$"
    A = "A"


def test_stack_initial_is_empty():
    stack = Stack[StackElement]()
    assert list(stack) == []
    assert len(stack) == 0
    assert not stack
    assert stack.top is None


@pytest.mark.parametrize(
    "initial,expected_top",
    [
        ([StackElement.BOTTOM], StackElement.BOTTOM),
        ([StackElement.BOTTOM, StackElement.A], StackElement.A),
        ((StackElement.A, StackElement.BOTTOM), StackElement.BOTTOM),
    ],
)
def test_stack_initial_last_element_is_top(initial, expected_top: StackElement):
    stack = Stack(initial)
    assert stack.top == expected_top
    assert list(stack) == list(initial)


def test_stack_push_multiple():
    stack = Stack[StackElement]()
    stack.push(StackElement.BOTTOM)
    stack.push(StackElement.A)
    stack.push(StackElement.A)
    assert list(stack) == [StackElement.BOTTOM, StackElement.A, StackElement.A]
    assert stack.top == StackElement.A


def test_stack_pop_multiple():
    stack = Stack([StackElement.BOTTOM, StackElement.A])

    assert stack.pop() == StackElement.A
    assert stack.top == StackElement.BOTTOM

    assert stack.pop() == StackElement.BOTTOM
    assert stack.top is None


def test_stack_pop_empty_returns_none():
    stack = Stack[StackElement]()
    assert stack.pop() is None
    assert len(stack) == 0


def test_stack_pop_after_emptying_returns_none():
    stack = Stack([StackElement.BOTTOM])
    stack.pop()
    assert stack.pop() is None
    assert stack.pop() is None


@pytest.mark.parametrize(
    "replacement,expected",
    [
        ([], ["$"]),
        (["x"], ["$", "x"]),
        (["x", "y"], ["$", "y", "x"]),
        (("x", "y", "z"), ["$", "z", "y", "x"]),
    ],
)
def test_stack_push_all_puts_first_symbol_on_top(replacement, expected):
    stack = Stack(["$"])
    stack.push_all(replacement)
    assert list(stack) == expected
    if replacement:
        assert stack.top == replacement[0]


def test_stack_top_does_not_modify_stack():
    stack = Stack([1, 2])

    _ = stack.top
    _ = stack.top

    assert list(stack) == [1, 2]


def test_stack_copy_is_independent():
    original = Stack([1, 2])
    clone = original.copy()

    clone.push(3)
    original.pop()

    assert list(original) == [1]
    assert list(clone) == [1, 2, 3]


def test_stack_does_not_alias_initial_sequence():
    initial = [1, 2]
    stack = Stack(initial)
    stack.push(3)
    assert initial == [1, 2]


def test_stack_equality():
    assert Stack([1, 2]) == Stack([1, 2])
    assert Stack([1, 2]) != Stack([2, 1])
    assert Stack() == Stack([])
    assert Stack([1]) != [1]


def test_stack_repr():
    assert repr(Stack(["a", "b"])) == "Stack(['a', 'b'])"


def test_stack_many_pop_operations():
    stack = Stack[int]()
    for i in range(100):
        stack.push(i)

    for i in range(99, -1, -1):
        assert stack.pop() == i

    assert len(stack) == 0
    assert stack.top is None
