import pytest

from dsakit.bounded import (
    BoundedStack,
    CircularDeque,
    ContainerEmptyError,
    ContainerFullError,
    LinearQueue,
)


def test_stack_full_at_default_capacity():
    stack = BoundedStack()
    for value in range(5):
        stack.push(value)
    assert stack.is_full()
    assert len(stack) == 5
    with pytest.raises(ContainerFullError):
        stack.push(99)
    assert list(stack) == list(range(5))


def test_queue_full_at_default_capacity():
    queue = LinearQueue()
    for value in range(5):
        queue.enqueue(value)
    assert queue.is_full()
    assert len(queue) == 5
    with pytest.raises(ContainerFullError):
        queue.enqueue(99)
    assert list(queue) == list(range(5))


def test_deque_full_at_default_capacity():
    dq = CircularDeque()
    for value in range(5):
        dq.push_back(value)
    assert dq.is_full()
    assert len(dq) == 5
    with pytest.raises(ContainerFullError):
        dq.push_front(99)
    with pytest.raises(ContainerFullError):
        dq.push_back(99)
    assert list(dq) == list(range(5))


def test_stack_pop_from_empty():
    with pytest.raises(ContainerEmptyError):
        BoundedStack().pop()


def test_queue_dequeue_from_empty():
    with pytest.raises(ContainerEmptyError):
        LinearQueue().dequeue()


def test_deque_pop_from_empty():
    dq = CircularDeque()
    with pytest.raises(ContainerEmptyError):
        dq.pop_front()
    with pytest.raises(ContainerEmptyError):
        dq.pop_back()


@pytest.mark.parametrize("cls", [BoundedStack, LinearQueue, CircularDeque])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(capacity=0)


def test_stack_is_lifo():
    stack = BoundedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [10, 20, 30]
    assert [stack.pop() for _ in range(3)] == [30, 20, 10]
    assert stack.is_empty()


def test_stack_reuses_space_after_pop():
    stack = BoundedStack(capacity=2)
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    stack.push("c")
    assert list(stack) == ["a", "c"]


def test_queue_is_fifo():
    queue = LinearQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue()] == [1, 2]
    assert list(queue) == [3]
    assert len(queue) == 1


def test_queue_does_not_reuse_freed_slots():
    queue = LinearQueue(capacity=3)
    for value in range(3):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [0, 1, 2]
    assert queue.is_empty()
    assert queue.is_full()
    with pytest.raises(ContainerFullError):
        queue.enqueue(7)
    with pytest.raises(ContainerEmptyError):
        queue.dequeue()


def test_deque_both_ends():
    dq = CircularDeque()
    dq.push_back(2)
    dq.push_front(1)
    dq.push_back(3)
    assert list(dq) == [1, 2, 3]
    assert dq.pop_front() == 1
    assert dq.pop_back() == 3
    assert list(dq) == [2]


def test_deque_reuses_space_after_wrap():
    dq = CircularDeque(capacity=3)
    for value in (1, 2, 3):
        dq.push_back(value)
    assert dq.pop_front() == 1
    dq.push_back(4)
    assert list(dq) == [2, 3, 4]
    assert dq.pop_back() == 4
    dq.push_front(0)
    assert list(dq) == [0, 2, 3]


def test_deque_single_element_pops_from_either_end():
    dq = CircularDeque()
    dq.push_front("x")
    assert dq.pop_back() == "x"
    assert dq.is_empty()