"""Double-ended ordered sequence.

This module defines Deque, backed by collections.deque, which traverses
from either end at the same cost.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any, Iterable, Iterator

from sequences.sequence_ops import SequenceOps


class Deque(SequenceOps, Sequence):
    """Immutable-by-convention double-ended sequence."""

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items = deque(elements)

    def _iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def _reverse_iterate(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Deque(list(self._items)[index])
        return self._items[index]

    def __contains__(self, element: object) -> bool:
        return element in self._items
