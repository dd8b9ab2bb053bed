"""Order-aware read-only operations.

This module implements positional searches and reverse traversal shared by
owned sequences and borrowed slice views. Families provide _iterate and
_reverse_iterate; the contract is identical whatever the traversal cost.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator

from core.types import Combiner, Predicate, T


def sequence_equals(sequence: OrderedOps, other: object) -> bool | Any:
    """Compare ordered elements against another ordered collection.

    Args:
        sequence: Ordered family instance or view.
        other: Ordered family instance, view, list, tuple, or deque.

    Returns:
        Element-wise equality, or NotImplemented for unrelated types.
    """
    if not isinstance(other, (OrderedOps, list, tuple, deque)):
        return NotImplemented
    return len(sequence) == len(other) and all(
        left == right for left, right in zip(sequence._iterate(), iter(other))
    )


class OrderedOps:
    """Capability mixin for position-based queries on ordered elements."""

    __slots__ = ()

    def _reverse_iterate(self) -> Iterator[Any]:
        raise NotImplementedError

    def position(self, predicate: Predicate) -> int | None:
        """Return the index of the first matching element, or None."""
        for index, item in enumerate(self._iterate()):
            if predicate(item):
                return index
        return None

    def position_of(self, element: Any) -> int | None:
        """Return the index of the first element equal to the value, or None."""
        return self.position(lambda item: item == element)

    def positions(self, predicate: Predicate) -> list[int]:
        """Return indices of all matching elements in ascending order."""
        return [index for index, item in enumerate(self._iterate()) if predicate(item)]

    def positions_of(self, element: Any) -> list[int]:
        """Return indices of all elements equal to the value."""
        return self.positions(lambda item: item == element)

    def rposition(self, predicate: Predicate) -> int | None:
        """Return the index, counted from the front, of the last match."""
        last_index = len(self) - 1
        for offset, item in enumerate(self._reverse_iterate()):
            if predicate(item):
                return last_index - offset
        return None

    def rfind(self, predicate: Predicate) -> T | None:
        """Return the last element matching the predicate, or None."""
        for item in self._reverse_iterate():
            if predicate(item):
                return item
        return None

    def rfold(self, initial: Any, combine: Combiner) -> Any:
        """Accumulate elements from the end towards the front."""
        accumulator = initial
        for item in self._reverse_iterate():
            accumulator = combine(accumulator, item)
        return accumulator

    def common_prefix_length(self, elements: Iterable[Any]) -> int:
        """Count leading elements equal to those of another sequence."""
        length = 0
        for item, other in zip(self._iterate(), elements):
            if item != other:
                break
            length += 1
        return length

    def common_suffix_length(self, elements: Iterable[Any]) -> int:
        """Count trailing elements equal to those of another sequence."""
        length = 0
        for item, other in zip(self._reverse_iterate(), reversed(list(elements))):
            if item != other:
                break
            length += 1
        return length

    def all_equal(self) -> bool:
        """Test whether all elements are equal; true when empty."""
        iterator = self._iterate()
        for first in iterator:
            return all(item == first for item in iterator)
        return True

    def all_unique(self) -> bool:
        """Test whether no two elements are equal; true when empty."""
        seen: set[Any] = set()
        for item in self._iterate():
            if item in seen:
                return False
            seen.add(item)
        return True
