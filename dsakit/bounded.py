"""Fixed-capacity stack, linear queue and circular deque."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class ContainerFullError(OverflowError):
    """Raised when adding to a container that has no free slot."""


class ContainerEmptyError(IndexError):
    """Raised when removing from a container that holds nothing."""


class _Bounded:
    """Shared storage and capacity checks for bounded containers."""

    _full_message = "container is full"
    _empty_message = "container is empty"

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def _ensure_room(self) -> None:
        if self.is_full():
            raise ContainerFullError(self._full_message)

    def _ensure_items(self) -> None:
        if self.is_empty():
            raise ContainerEmptyError(self._empty_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self.capacity})"


class BoundedStack(_Bounded):
    """A last-in, first-out stack holding at most ``capacity`` items.

    Iteration runs from the bottom of the stack to the top.
    """

    _full_message = "stack overflow"
    _empty_message = "stack underflow"

    def push(self, value: Any) -> None:
        self._ensure_room()
        self._items.append(value)

    def pop(self) -> Any:
        self._ensure_items()
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class LinearQueue(_Bounded):
    """A first-in, first-out queue over a fixed row of slots.

    Slots freed by dequeuing are never reused: once ``capacity`` values have
    been enqueued the queue stays full, even after it has been emptied.
    """

    _full_message = "queue is full"
    _empty_message = "queue is empty"

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._enqueued = 0

    def enqueue(self, value: Any) -> None:
        self._ensure_room()
        self._items.append(value)
        self._enqueued += 1

    def dequeue(self) -> Any:
        self._ensure_items()
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._enqueued >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class CircularDeque(_Bounded):
    """A double-ended queue holding at most ``capacity`` items."""

    _full_message = "deque is full"
    _empty_message = "deque is empty"

    def push_front(self, value: Any) -> None:
        self._ensure_room()
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        self._ensure_room()
        self._items.append(value)

    def pop_front(self) -> Any:
        self._ensure_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        self._ensure_items()
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)