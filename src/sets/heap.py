"""Priority-ordered set of distinct elements.

This module defines Heap, a binary min-heap kept with heapq. Iteration walks
the heap array, which is deterministic for a given input order; use
into_sorted for ascending priority order.
"""

from __future__ import annotations

import heapq
from collections.abc import Set
from typing import Any, Iterable, Iterator

from sets.set_ops import SetOps


class Heap(SetOps, Set):
    """Immutable-by-convention min-heap of distinct elements."""

    __slots__ = ("_items", "_members")

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._members = dict.fromkeys(elements)
        self._items = list(self._members)
        heapq.heapify(self._items)

    def _iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._members

    def peek(self) -> Any:
        """Return the highest-priority (smallest) element, or None when empty."""
        return self._items[0] if self._items else None

    def pop(self) -> tuple[Any, Heap] | None:
        """Split off the smallest element.

        Returns:
            Pair of (smallest element, heap without it), or None when empty.
        """
        if not self._items:
            return None
        smallest = self._items[0]
        return smallest, Heap(item for item in self._items if item != smallest)

    def into_sorted(self) -> Any:
        """Return elements as a Vector in ascending priority order."""
        from sequences.vector import Vector

        return Vector(sorted(self._items))
