"""Singly and doubly linked lists built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class EmptyListError(IndexError):
    """Raised when removing from a linked list that holds no nodes."""


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class _LinkedBase:
    """Head, size and lookup shared by both lists."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_back(self, value: Any) -> None:
        raise NotImplementedError

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find_node(self, target: Any) -> _Node:
        for node in self._nodes():
            if node.value == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def _require_nodes(self) -> None:
        if self._head is None:
            raise EmptyListError("linked list is empty")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[node.value for node in self._nodes()]!r})"


class SinglyLinkedList(_LinkedBase):
    """A list of nodes, each pointing forward to the next one."""

    def push_front(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: Any) -> None:
        node = _Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self._head = node
        else:
            last.next = node
        self._size += 1

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``target``.

        An empty list simply receives ``value`` as its only node.
        """
        if self._head is None:
            self.push_back(value)
            return
        node = self._find_node(target)
        node.next = _Node(value, node.next)
        self._size += 1

    def _unlink_after(self, prev: _Node | None, node: _Node) -> Any:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        self._require_nodes()
        return self._unlink_after(None, self._head)

    def pop_back(self) -> Any:
        self._require_nodes()
        prev: _Node | None = None
        node = self._head
        while node.next is not None:
            prev, node = node, node.next
        return self._unlink_after(prev, node)

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``."""
        self._require_nodes()
        prev: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                self._unlink_after(prev, node)
                return
            prev = node
        raise ValueError(f"{value!r} is not in the list")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())


class DoublyLinkedList(_LinkedBase):
    """A list of nodes linked both forward and backward."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        super().__init__(values)

    def _link(self, prev: _Node | None, value: Any) -> None:
        nxt = self._head if prev is None else prev.next
        node = _Node(value, nxt, prev)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if nxt is None:
            self._tail = node
        else:
            nxt.prev = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        self._link(None, value)

    def push_back(self, value: Any) -> None:
        self._link(self._tail, value)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``target``."""
        self._link(self._find_node(target), value)

    def pop_front(self) -> Any:
        self._require_nodes()
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        self._require_nodes()
        return self._unlink(self._tail)

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``."""
        self._require_nodes()
        self._unlink(self._find_node(value))

    def find(self, value: Any) -> int | None:
        """Return the zero-based position of the first ``value``, or None."""
        return next(
            (index for index, item in enumerate(self) if item == value), None
        )

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev