"""Common capability layer shared by every collection family.

This module implements operations meaningful for any finite collection
regardless of order or uniqueness. Families plug in through _iterate().
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator

from core.constants import DEFAULT_JOIN_SEPARATOR
from core.types import Comparator, Combiner, KeyFunction, Predicate, T


class TraversableOps(Generic[T]):
    """Capability mixin for folding, searching, and extreme selection.

    Families provide ``_iterate`` yielding elements in their deterministic
    order. Maps yield ``(key, value)`` pairs.
    """

    __slots__ = ()

    def _iterate(self) -> Iterator[T]:
        raise NotImplementedError

    def fold(self, initial: Any, combine: Combiner) -> Any:
        """Accumulate elements left to right starting from a seed.

        Args:
            initial: Initial accumulator value.
            combine: Function of (accumulator, element) returning the next accumulator.

        Returns:
            Final accumulator value.
        """
        accumulator = initial
        for item in self._iterate():
            accumulator = combine(accumulator, item)
        return accumulator

    def reduce(self, combine: Combiner) -> Any:
        """Fold using the first element as the seed.

        Returns:
            Combined value, or None for an empty collection.
        """
        iterator = self._iterate()
        for first in iterator:
            accumulator = first
            for item in iterator:
                accumulator = combine(accumulator, item)
            return accumulator
        return None

    def all(self, predicate: Predicate) -> bool:
        """Test whether every element satisfies the predicate."""
        return all(predicate(item) for item in self._iterate())

    def any(self, predicate: Predicate) -> bool:
        """Test whether at least one element satisfies the predicate."""
        return any(predicate(item) for item in self._iterate())

    def find(self, predicate: Predicate) -> T | None:
        """Return the first element matching the predicate, or None."""
        for item in self._iterate():
            if predicate(item):
                return item
        return None

    def find_map(self, function: Callable[[T], Any]) -> Any:
        """Return the first non-None result of applying the function."""
        for item in self._iterate():
            result = function(item)
            if result is not None:
                return result
        return None

    def count_by(self, predicate: Predicate) -> int:
        """Count elements satisfying the predicate."""
        return sum(1 for item in self._iterate() if predicate(item))

    def count_unique(self) -> int:
        """Count distinct elements by equality."""
        return len(set(self._iterate()))

    def for_each(self, function: Callable[[T], Any]) -> None:
        """Call the function once per element in iteration order."""
        for item in self._iterate():
            function(item)

    def min_item(self) -> T | None:
        """Return the first smallest element, or None when empty."""
        return self.min_by_key(_identity)

    def max_item(self) -> T | None:
        """Return the last largest element, or None when empty."""
        return self.max_by_key(_identity)

    def min_by(self, compare: Comparator) -> T | None:
        """Return the first element that no other element precedes.

        Args:
            compare: Comparator returning negative, zero, or positive.

        Returns:
            Smallest element, the earliest one on ties, or None when empty.
        """
        found = False
        result = None
        for item in self._iterate():
            if not found or compare(item, result) < 0:
                result = item
                found = True
        return result

    def max_by(self, compare: Comparator) -> T | None:
        """Return the largest element, the latest one on ties, or None."""
        found = False
        result = None
        for item in self._iterate():
            if not found or compare(item, result) >= 0:
                result = item
                found = True
        return result

    def min_by_key(self, to_key: KeyFunction) -> T | None:
        """Return the element with the smallest key, earliest on ties."""
        found = False
        result = None
        result_key = None
        for item in self._iterate():
            key = to_key(item)
            if not found or key < result_key:
                result, result_key = item, key
                found = True
        return result

    def max_by_key(self, to_key: KeyFunction) -> T | None:
        """Return the element with the largest key, latest on ties."""
        found = False
        result = None
        result_key = None
        for item in self._iterate():
            key = to_key(item)
            if not found or key >= result_key:
                result, result_key = item, key
                found = True
        return result

    def minmax_item(self) -> tuple[T, T] | None:
        """Return the smallest and largest elements in one pass."""
        return self.minmax_by_key(_identity)

    def minmax_by(self, compare: Comparator) -> tuple[T, T] | None:
        """Return both extremes under a comparator in one pass.

        Ties follow min_by and max_by: earliest minimum, latest maximum.
        """
        found = False
        smallest = largest = None
        for item in self._iterate():
            if not found:
                smallest = largest = item
                found = True
                continue
            if compare(item, smallest) < 0:
                smallest = item
            if compare(item, largest) >= 0:
                largest = item
        return (smallest, largest) if found else None

    def minmax_by_key(self, to_key: KeyFunction) -> tuple[T, T] | None:
        """Return both extremes under a key function in one pass."""
        found = False
        smallest = largest = None
        smallest_key = largest_key = None
        for item in self._iterate():
            key = to_key(item)
            if not found:
                smallest = largest = item
                smallest_key = largest_key = key
                found = True
                continue
            if key < smallest_key:
                smallest, smallest_key = item, key
            if key >= largest_key:
                largest, largest_key = item, key
        return (smallest, largest) if found else None

    def group_fold(self, to_key: KeyFunction, initial: Any, combine: Combiner) -> Any:
        """Fold elements separately per derived key.

        Args:
            to_key: Group discriminator.
            initial: Seed used for every group.
            combine: Function of (accumulator, element).

        Returns:
            HashMap from group key to folded value.
        """
        from maps.hash_map import HashMap

        groups: dict[Any, Any] = {}
        for item in self._iterate():
            key = to_key(item)
            groups[key] = combine(groups.get(key, initial), item)
        return HashMap(groups)

    def group_reduce(self, to_key: KeyFunction, combine: Combiner) -> Any:
        """Reduce elements separately per derived key into a HashMap."""
        from maps.hash_map import HashMap

        groups: dict[Any, Any] = {}
        for item in self._iterate():
            key = to_key(item)
            groups[key] = combine(groups[key], item) if key in groups else item
        return HashMap(groups)

    def disjoint(self, elements: Iterable[Any]) -> bool:
        """Test whether no element is also present in the other collection."""
        other = set(elements)
        return not any(item in other for item in self._iterate())

    def subset(self, elements: Iterable[Any]) -> bool:
        """Test whether every element is present in the other collection."""
        other = set(elements)
        return all(item in other for item in self._iterate())

    def superset(self, elements: Iterable[Any]) -> bool:
        """Test whether every element of the other collection is present."""
        own = set(self._iterate())
        return all(item in own for item in elements)

    def join_items(self, separator: str = DEFAULT_JOIN_SEPARATOR) -> str:
        """Join textual element representations with a separator."""
        return separator.join(str(item) for item in self._iterate())

    def to_list(self) -> list[T]:
        """Return elements as a plain list in iteration order."""
        return list(self._iterate())

    def to_vector(self) -> Any:
        """Return elements as a Vector in iteration order."""
        from sequences.vector import Vector

        return Vector(self._iterate())

    def to_deque(self) -> Any:
        """Return elements as a Deque in iteration order."""
        from sequences.deque import Deque

        return Deque(self._iterate())

    def to_linked_list(self) -> Any:
        """Return elements as a LinkedList in iteration order."""
        from sequences.linked_list import LinkedList

        return LinkedList(self._iterate())

    def to_hash_set(self) -> Any:
        """Return distinct elements as a HashSet."""
        from sets.hash_set import HashSet

        return HashSet(self._iterate())

    def to_sorted_set(self) -> Any:
        """Return distinct elements as a SortedSet."""
        from sets.sorted_set import SortedSet

        return SortedSet(self._iterate())

    def to_heap(self) -> Any:
        """Return distinct elements as a Heap."""
        from sets.heap import Heap

        return Heap(self._iterate())

    def to_hash_map(self) -> Any:
        """Return (key, value) elements as a HashMap, last pair wins."""
        from maps.hash_map import HashMap

        return HashMap(self._iterate())

    def to_sorted_map(self) -> Any:
        """Return (key, value) elements as a SortedMap, last pair wins."""
        from maps.sorted_map import SortedMap

        return SortedMap(self._iterate())


def _identity(item: Any) -> Any:
    return item
