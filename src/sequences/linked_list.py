"""Doubly linked ordered sequence.

This module defines LinkedList, built once from its elements and then only
traversed. Positional lookup walks from the nearer end.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Iterator

from sequences.sequence_ops import SequenceOps


class _Node:
    """One link holding an element and its neighbours."""

    __slots__ = ("value", "previous", "next")

    def __init__(self, value: Any, previous: _Node | None) -> None:
        self.value = value
        self.previous = previous
        self.next: _Node | None = None


class LinkedList(SequenceOps, Sequence):
    """Immutable-by-convention doubly linked sequence."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for element in elements:
            node = _Node(element, self._tail)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
            self._size += 1

    def _iterate(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _reverse_iterate(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.previous

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return LinkedList(self._snapshot()[index])
        position = index + self._size if index < 0 else index
        if not 0 <= position < self._size:
            raise IndexError("LinkedList index out of range")
        if position <= self._size // 2:
            node = self._head
            for _ in range(position):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - position):
                node = node.previous
        return node.value
