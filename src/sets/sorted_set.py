"""Tree-ordered set of distinct elements.

This module defines SortedSet, which keeps elements in ascending order in a
sorted list and answers membership by binary search. Elements only need to
be mutually comparable, not hashable.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Set
from typing import Any, Iterable, Iterator

from sets.set_ops import SetOps


class SortedSet(SetOps, Set):
    """Immutable-by-convention ordered set."""

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for element in sorted(elements):
            if not self._items or self._items[-1] != element:
                self._items.append(element)

    def _iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        index = bisect_left(self._items, element)
        return index < len(self._items) and self._items[index] == element

    def first(self) -> Any:
        """Return the smallest element, or None when empty."""
        return self._items[0] if self._items else None

    def last(self) -> Any:
        """Return the largest element, or None when empty."""
        return self._items[-1] if self._items else None
