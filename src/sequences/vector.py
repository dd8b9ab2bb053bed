"""List-backed ordered sequence.

This module defines Vector, the contiguous sequence family. It is the only
sequence that can lend its storage to a borrowed SliceView.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Iterator

from sequences.sequence_ops import SequenceOps


class Vector(SequenceOps, Sequence):
    """Immutable-by-convention contiguous sequence."""

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        """Create a vector.

        Args:
            elements: Initial elements, copied in iteration order.
        """
        self._items = list(elements)

    def _iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def _reverse_iterate(self) -> Iterator[Any]:
        return reversed(self._items)

    def _snapshot(self) -> list[Any]:
        return self._items.copy()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[index]

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def view(self, start: int = 0, stop: int | None = None) -> Any:
        """Borrow a read-only view of the range [start, stop).

        Raises:
            FoldkitIndexError: If the range is reversed or exceeds the length.
        """
        from slices.slice_view import SliceView

        return SliceView(self._items, start, stop)
