"""Map capability layer.

This module implements key/value operations in three shapes: whole-pair
functions receive (key, value) as two arguments, key-only functions receive
the key, and value-only functions receive the value. Results are rebuilt in
iteration order, so colliding keys resolve last-write-wins.
"""

from __future__ import annotations

import math
from itertools import chain
from typing import Any, Callable, Iterable, Iterator

from capabilities.traversable import TraversableOps
from core.validation import check_non_negative


class MapOps(TraversableOps):
    """Capability mixin for collections of unique keys with values.

    Families provide ``_iterate`` yielding ``(key, value)`` pairs, plus
    ``__getitem__`` and ``__len__``. Common operations see those pairs.
    """

    __slots__ = ()

    def _build(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        return type(self)(pairs)

    def __hash__(self) -> int:
        return hash(frozenset(self._iterate()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._iterate())!r})"

    @classmethod
    def fill(cls, key: Any, value: Any, size: int) -> Any:
        """Create a map from size copies of one pair.

        Keys are unique, so any positive size yields a single entry.

        Raises:
            FoldkitArgumentError: If size is negative.
        """
        check_non_negative("fill", "size", size)
        return cls((key, value) for _ in range(size))

    @classmethod
    def fill_with(cls, to_pair: Callable[[], tuple[Any, Any]], size: int) -> Any:
        """Create a map from size calls of a pair generator.

        Raises:
            FoldkitArgumentError: If size is negative.
        """
        check_non_negative("fill_with", "size", size)
        return cls(to_pair() for _ in range(size))

    def add(self, key: Any, value: Any) -> Any:
        """Insert a pair; an existing key has its value updated in place."""
        return self._build(chain(self._iterate(), ((key, value),)))

    def add_all(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        """Insert pairs in order; later pairs overwrite earlier values."""
        return self._build(chain(self._iterate(), pairs))

    def delete(self, key: Any) -> Any:
        """Remove the pair for a key, if present."""
        return self._build(pair for pair in self._iterate() if pair[0] != key)

    def delete_all(self, keys: Iterable[Any]) -> Any:
        """Remove the pairs for all listed keys."""
        removed = set(keys)
        return self._build(pair for pair in self._iterate() if pair[0] not in removed)

    def replace(self, key: Any, value: Any) -> Any:
        """Update the value of a present key; absent keys are ignored."""
        return self.replace_all(((key, value),))

    def replace_all(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        """Update values of present keys without changing key cardinality."""
        updates = dict(pairs)
        return self._build(
            (key, updates[key] if key in updates else value) for key, value in self._iterate()
        )

    def filter(self, predicate: Callable[[Any, Any], bool]) -> Any:
        """Keep pairs for which predicate(key, value) holds."""
        return self._build((key, value) for key, value in self._iterate() if predicate(key, value))

    def filter_keys(self, predicate: Callable[[Any], bool]) -> Any:
        """Keep pairs whose key satisfies the predicate."""
        return self._build((key, value) for key, value in self._iterate() if predicate(key))

    def filter_values(self, predicate: Callable[[Any], bool]) -> Any:
        """Keep pairs whose value satisfies the predicate."""
        return self._build((key, value) for key, value in self._iterate() if predicate(value))

    def filter_map(self, function: Callable[[Any, Any], tuple[Any, Any] | None]) -> Any:
        """Map pairs and keep only non-None results."""
        mapped = (function(key, value) for key, value in self._iterate())
        return self._build(pair for pair in mapped if pair is not None)

    def map(self, function: Callable[[Any, Any], tuple[Any, Any]]) -> Any:
        """Map every pair to a new (key, value) pair.

        Args:
            function: Called with (key, value); returns the new pair.

        Returns:
            Map of new pairs; a repeated new key keeps the later pair.
        """
        return self._build(function(key, value) for key, value in self._iterate())

    def map_keys(self, function: Callable[[Any], Any]) -> Any:
        """Transform keys, keeping values.

        When two original keys map to the same new key, the pair processed
        later in iteration order overwrites the earlier one.
        """
        return self._build((function(key), value) for key, value in self._iterate())

    def map_values(self, function: Callable[[Any], Any]) -> Any:
        """Transform values, keeping keys."""
        return self._build((key, function(value)) for key, value in self._iterate())

    def flat_map(self, function: Callable[[Any, Any], Iterable[tuple[Any, Any]]]) -> Any:
        """Map every pair to several pairs and merge them, last write wins."""
        return self._build(
            chain.from_iterable(function(key, value) for key, value in self._iterate())
        )

    def partition(self, predicate: Callable[[Any, Any], bool]) -> tuple[Any, Any]:
        """Split into (matching, non-matching) maps."""
        matching = []
        rest = []
        for key, value in self._iterate():
            (matching if predicate(key, value) else rest).append((key, value))
        return self._build(matching), self._build(rest)

    def partition_map(
        self,
        function: Callable[[Any, Any], tuple[bool, tuple[Any, Any]]],
    ) -> tuple[Any, Any]:
        """Split mapped pairs by a flag returned alongside each new pair."""
        left = []
        right = []
        for key, value in self._iterate():
            is_left, pair = function(key, value)
            (left if is_left else right).append(pair)
        return self._build(left), self._build(right)

    def intersect(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        """Keep pairs that also appear, with an equal value, in the other pairs."""
        other = dict(pairs)
        missing = object()
        return self._build(
            (key, value) for key, value in self._iterate() if other.get(key, missing) == value
        )

    def scan(self, initial: Any, step: Callable[[Any, Any, Any], Any]) -> Any:
        """Map every key to the running accumulator after its pair.

        Args:
            initial: Seed accumulator, not included in the result.
            step: Function of (accumulator, key, value) returning the next accumulator.

        Returns:
            Map from each key to the state reached after visiting it.
        """
        states = []
        accumulator = initial
        for key, value in self._iterate():
            accumulator = step(accumulator, key, value)
            states.append((key, accumulator))
        return self._build(states)

    def sum_keys(self, start: Any = 0) -> Any:
        """Return the sum of all keys."""
        return sum((key for key, _ in self._iterate()), start)

    def sum_values(self, start: Any = 0) -> Any:
        """Return the sum of all values."""
        return sum((value for _, value in self._iterate()), start)

    def product_keys(self, start: Any = 1) -> Any:
        """Return the product of all keys."""
        return math.prod((key for key, _ in self._iterate()), start=start)

    def product_values(self, start: Any = 1) -> Any:
        """Return the product of all values."""
        return math.prod((value for _, value in self._iterate()), start=start)

    def all_values_equal(self) -> bool:
        """Test whether every value is equal; true when empty."""
        values = self._values()
        for first in values:
            return all(value == first for value in values)
        return True

    def all_values_unique(self) -> bool:
        """Test whether no two values are equal; true when empty."""
        seen: set[Any] = set()
        for value in self._values():
            if value in seen:
                return False
            seen.add(value)
        return True

    def _values(self) -> Iterator[Any]:
        return (value for _, value in self._iterate())
