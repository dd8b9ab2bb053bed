"""Sorting and sorted-merge operations for sequences.

Stable variants keep the relative order of equal elements. Unstable variants
make no such promise; they currently share the stable Timsort path.
"""

from __future__ import annotations

import heapq
from functools import cmp_to_key
from typing import Any, Iterable

from core.types import Comparator, KeyFunction


class SortingOps:
    """Capability mixin for ordering sequence elements."""

    __slots__ = ()

    def sorted(self) -> Any:
        """Sort elements in ascending natural order, stably."""
        return self._build(sorted(self._iterate()))

    def sorted_by(self, compare: Comparator) -> Any:
        """Sort elements stably using a three-way comparator."""
        return self._build(sorted(self._iterate(), key=cmp_to_key(compare)))

    def sorted_by_key(self, to_key: KeyFunction) -> Any:
        """Sort elements stably by a derived key."""
        return self._build(sorted(self._iterate(), key=to_key))

    def sorted_by_cached_key(self, to_key: KeyFunction) -> Any:
        """Sort stably by a key evaluated exactly once per element.

        Args:
            to_key: Key function; may be expensive.

        Returns:
            Sorted sequence.
        """
        items = self._snapshot()
        keys = [to_key(item) for item in items]
        order = sorted(range(len(items)), key=keys.__getitem__)
        return self._build(items[index] for index in order)

    def sorted_unstable(self) -> Any:
        """Sort elements in ascending natural order."""
        return self.sorted()

    def sorted_unstable_by(self, compare: Comparator) -> Any:
        """Sort elements using a three-way comparator."""
        return self.sorted_by(compare)

    def sorted_unstable_by_key(self, to_key: KeyFunction) -> Any:
        """Sort elements by a derived key."""
        return self.sorted_by_key(to_key)

    def merge(self, elements: Iterable[Any]) -> Any:
        """Merge with another ascending sequence into one ascending sequence.

        On ties, receiver elements come first.
        """
        return self._build(heapq.merge(self._iterate(), elements))

    def merge_by(self, elements: Iterable[Any], compare: Comparator) -> Any:
        """Merge with another sequence sorted under the same comparator."""
        return self._build(heapq.merge(self._iterate(), elements, key=cmp_to_key(compare)))
