"""Element-building operations shared by sequences and sets.

This module rebuilds collections from transformed elements through the
family _build hook, so sets keep uniqueness and sequences keep order
without each family repeating the same loops.
"""

from __future__ import annotations

import heapq
from collections import Counter
from functools import cmp_to_key
from itertools import chain
from typing import Any, Callable, Iterable

from core.types import Combiner, Comparator, KeyFunction, Predicate
from core.validation import check_non_negative


class CollectibleOps:
    """Capability mixin for filtering, mapping, and rebuilding elements."""

    __slots__ = ()

    def _build(self, elements: Iterable[Any]) -> Any:
        return type(self)(elements)

    @classmethod
    def fill(cls, value: Any, size: int) -> Any:
        """Create a collection holding the value size times.

        Raises:
            FoldkitArgumentError: If size is negative.
        """
        check_non_negative("fill", "size", size)
        return cls(value for _ in range(size))

    @classmethod
    def fill_with(cls, to_value: Callable[[], Any], size: int) -> Any:
        """Create a collection from size calls of a zero-argument generator.

        Raises:
            FoldkitArgumentError: If size is negative.
        """
        check_non_negative("fill_with", "size", size)
        return cls(to_value() for _ in range(size))

    def add(self, element: Any) -> Any:
        """Return a collection with the element appended."""
        return self._build(chain(self._iterate(), (element,)))

    def add_all(self, elements: Iterable[Any]) -> Any:
        """Return a collection with all given elements appended."""
        return self._build(chain(self._iterate(), elements))

    def delete(self, element: Any) -> Any:
        """Return a collection without the first occurrence of the element."""
        return self.delete_all((element,))

    def delete_all(self, elements: Iterable[Any]) -> Any:
        """Remove one occurrence per listed element, earliest first.

        Args:
            elements: Elements to remove; repeated values remove repeated occurrences.

        Returns:
            Collection without the removed occurrences.
        """
        pending = Counter(elements)
        retained = []
        for item in self._iterate():
            if pending[item] > 0:
                pending[item] -= 1
                continue
            retained.append(item)
        return self._build(retained)

    def replace(self, value: Any, replacement: Any) -> Any:
        """Replace the first occurrence of a value."""
        return self.replace_all((value,), (replacement,))

    def replace_all(self, elements: Iterable[Any], replacements: Iterable[Any]) -> Any:
        """Replace occurrences of listed elements with successive replacements.

        Occurrences are consumed in iteration order. An occurrence is kept
        unchanged once the replacements run out.
        """
        pending = Counter(elements)
        supply = iter(replacements)
        exhausted = object()
        result = []
        for item in self._iterate():
            if pending[item] > 0:
                pending[item] -= 1
                substitute = next(supply, exhausted)
                result.append(item if substitute is exhausted else substitute)
                continue
            result.append(item)
        return self._build(result)

    def filter(self, predicate: Predicate) -> Any:
        """Keep only elements satisfying the predicate."""
        return self._build(item for item in self._iterate() if predicate(item))

    def filter_map(self, function: Callable[[Any], Any]) -> Any:
        """Map elements and keep only non-None results."""
        return self._build(
            result for result in (function(item) for item in self._iterate()) if result is not None
        )

    def map(self, function: Callable[[Any], Any]) -> Any:
        """Apply the function to every element."""
        return self._build(function(item) for item in self._iterate())

    def flat_map(self, function: Callable[[Any], Iterable[Any]]) -> Any:
        """Map every element to an iterable and concatenate the results."""
        return self._build(chain.from_iterable(function(item) for item in self._iterate()))

    def flatten(self) -> Any:
        """Concatenate elements that are themselves iterables."""
        return self._build(chain.from_iterable(self._iterate()))

    def partition(self, predicate: Predicate) -> tuple[Any, Any]:
        """Split into (matching, non-matching) collections."""
        matching = []
        rest = []
        for item in self._iterate():
            (matching if predicate(item) else rest).append(item)
        return self._build(matching), self._build(rest)

    def partition_map(self, function: Callable[[Any], tuple[bool, Any]]) -> tuple[Any, Any]:
        """Split mapped values by a flag returned alongside each value.

        Args:
            function: Returns (True, value) for the left side or (False, value) for the right.

        Returns:
            Pair of (left, right) collections.
        """
        left = []
        right = []
        for item in self._iterate():
            is_left, value = function(item)
            (left if is_left else right).append(value)
        return self._build(left), self._build(right)

    def intersect(self, elements: Iterable[Any]) -> Any:
        """Keep only elements also present in the other collection."""
        retained = set(elements)
        return self._build(item for item in self._iterate() if item in retained)

    def scan(self, initial: Any, step: Combiner) -> Any:
        """Return the accumulator state after each element.

        Args:
            initial: Seed accumulator, not included in the result.
            step: Function of (accumulator, element) returning the next accumulator.

        Returns:
            Collection of states in iteration order; sets keep one copy of
            each distinct state.
        """
        return self._scan(self._iterate(), initial, step)

    def grouped_by(self, to_key: KeyFunction) -> Any:
        """Group elements by derived key into a HashMap of same-family groups.

        Within each group, elements keep their iteration order.
        """
        from maps.hash_map import HashMap

        groups: dict[Any, list[Any]] = {}
        for item in self._iterate():
            groups.setdefault(to_key(item), []).append(item)
        return HashMap((key, self._build(members)) for key, members in groups.items())

    def largest(self, k: int, compare: Comparator | None = None) -> Any:
        """Select the k largest elements in descending order.

        Ties keep iteration order. Unordered families iterate deterministically,
        so the selection is repeatable within and across runs.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("largest", "k", k)
        key = cmp_to_key(compare) if compare else None
        return self._build(heapq.nlargest(k, self._iterate(), key=key))

    def smallest(self, k: int, compare: Comparator | None = None) -> Any:
        """Select the k smallest elements in ascending order.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("smallest", "k", k)
        key = cmp_to_key(compare) if compare else None
        return self._build(heapq.nsmallest(k, self._iterate(), key=key))

    def _scan(self, iterator: Iterable[Any], initial: Any, step: Combiner) -> Any:
        states = []
        accumulator = initial
        for item in iterator:
            accumulator = step(accumulator, item)
            states.append(accumulator)
        return self._build(states)
