"""Hash-ordered set of distinct elements.

This module defines HashSet. Iteration follows first-insertion order, which
keeps every fold and tie-break repeatable across runs.
"""

from __future__ import annotations

from collections.abc import Set
from typing import Any, Iterable, Iterator

from sets.set_ops import SetOps


class HashSet(SetOps, Set):
    """Immutable-by-convention hash set."""

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        """Create a hash set.

        Args:
            elements: Hashable elements; later duplicates are ignored.
        """
        self._items = dict.fromkeys(elements)

    def _iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._items
