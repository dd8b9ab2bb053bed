"""Sequence capability layer.

This module assembles every order-sensitive operation for owned sequences.
Families implement _iterate, _reverse_iterate, __len__, and __getitem__;
every operation rebuilds a new sequence of the receiver's family.
"""

from __future__ import annotations

from collections import deque
from itertools import chain, islice
from typing import Any, Callable, Iterator

from capabilities.aggregable import AggregableOps
from capabilities.collectible import CollectibleOps
from capabilities.ordered import OrderedOps, sequence_equals
from capabilities.traversable import TraversableOps
from core.types import Combiner, KeyFunction, Predicate
from core.validation import check_non_negative, check_positive
from sequences.combining import CombiningOps
from sequences.indexed import IndexedOps
from sequences.sorting import SortingOps
from sequences.windowing import WindowingOps


class SequenceOps(
    IndexedOps,
    WindowingOps,
    SortingOps,
    CombiningOps,
    CollectibleOps,
    OrderedOps,
    AggregableOps,
    TraversableOps,
):
    """Capability mixin combining the full sequence operation catalogue."""

    __slots__ = ()

    def _snapshot(self) -> list[Any]:
        return list(self._iterate())

    def __iter__(self) -> Iterator[Any]:
        return self._iterate()

    def __reversed__(self) -> Iterator[Any]:
        return self._reverse_iterate()

    def __eq__(self, other: object) -> bool:
        return sequence_equals(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self._iterate()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._snapshot()!r})"

    def first(self) -> Any:
        """Return the first element, or None when empty."""
        return next(self._iterate(), None)

    def last(self) -> Any:
        """Return the last element, or None when empty."""
        return next(self._reverse_iterate(), None)

    def delete(self, element: Any) -> Any:
        """Remove the first element equal to the value, if any."""
        items = self._snapshot()
        if element in items:
            items.remove(element)
        return self._build(items)

    def replace(self, value: Any, replacement: Any) -> Any:
        """Replace the first element equal to the value, if any."""
        items = self._snapshot()
        if value in items:
            items[items.index(value)] = replacement
        return self._build(items)

    def enumerate(self, start: int = 0) -> Any:
        """Pair every element with its index."""
        return self._build(enumerate(self._iterate(), start))

    def take(self, n: int) -> Any:
        """Keep the first n elements, or all of them when shorter.

        Raises:
            FoldkitArgumentError: If n is negative.
        """
        check_non_negative("take", "n", n)
        return self._build(islice(self._iterate(), n))

    def skip(self, n: int) -> Any:
        """Drop the first n elements.

        Raises:
            FoldkitArgumentError: If n is negative.
        """
        check_non_negative("skip", "n", n)
        return self._build(islice(self._iterate(), n, None))

    def take_while(self, predicate: Predicate) -> Any:
        """Keep the leading run of elements satisfying the predicate."""
        result = []
        for item in self._iterate():
            if not predicate(item):
                break
            result.append(item)
        return self._build(result)

    def skip_while(self, predicate: Predicate) -> Any:
        """Drop the leading run of elements satisfying the predicate."""
        iterator = self._iterate()
        for item in iterator:
            if not predicate(item):
                return self._build(chain((item,), iterator))
        return self._build(())

    def step_by(self, step: int) -> Any:
        """Keep the first element and every step-th one after it.

        Raises:
            FoldkitArgumentError: If step is not positive.
        """
        check_positive("step_by", "step", step)
        return self._build(islice(self._iterate(), 0, None, step))

    def init(self) -> Any:
        """Drop the last element; empty stays empty."""
        items = self._snapshot()
        return self._build(items[:-1])

    def tail(self) -> Any:
        """Drop the first element; empty stays empty."""
        return self._build(islice(self._iterate(), 1, None))

    def rev(self) -> Any:
        """Reverse the element order."""
        return self._build(self._reverse_iterate())

    def cycle(self, n: int) -> Any:
        """Repeat the whole sequence n times.

        Raises:
            FoldkitArgumentError: If n is negative.
        """
        check_non_negative("cycle", "n", n)
        items = self._snapshot()
        return self._build(items * n)

    def rtake(self, n: int) -> Any:
        """Keep the last n elements in their original order.

        Raises:
            FoldkitArgumentError: If n is negative.
        """
        check_non_negative("rtake", "n", n)
        kept = deque(islice(self._reverse_iterate(), n))
        kept.reverse()
        return self._build(kept)

    def rskip(self, n: int) -> Any:
        """Drop the last n elements.

        Raises:
            FoldkitArgumentError: If n is negative.
        """
        check_non_negative("rskip", "n", n)
        kept = deque(islice(self._reverse_iterate(), n, None))
        kept.reverse()
        return self._build(kept)

    def rtake_while(self, predicate: Predicate) -> Any:
        """Keep the trailing run of elements satisfying the predicate."""
        kept: deque[Any] = deque()
        for item in self._reverse_iterate():
            if not predicate(item):
                break
            kept.appendleft(item)
        return self._build(kept)

    def rskip_while(self, predicate: Predicate) -> Any:
        """Drop the trailing run of elements satisfying the predicate."""
        iterator = self._reverse_iterate()
        kept: deque[Any] = deque()
        for item in iterator:
            if not predicate(item):
                kept.append(item)
                kept.extend(iterator)
                break
        kept.reverse()
        return self._build(kept)

    def unique(self) -> Any:
        """Keep the first occurrence of every distinct element."""
        return self._build(dict.fromkeys(self._iterate()))

    def unique_by(self, to_key: KeyFunction) -> Any:
        """Keep the first element for every distinct derived key."""
        seen: set[Any] = set()
        result = []
        for item in self._iterate():
            key = to_key(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
        return self._build(result)

    def duplicates(self) -> Any:
        """Return every element occurring more than once, once each.

        Elements appear in the order of their first repeated occurrence.
        """
        return self.duplicates_by(lambda item: item)

    def duplicates_by(self, to_key: KeyFunction) -> Any:
        """Return one element per derived key occurring more than once.

        The first element seen for each such key is returned, ordered by
        the position where the key first repeats.
        """
        first_seen: dict[Any, Any] = {}
        repeated: dict[Any, Any] = {}
        for item in self._iterate():
            key = to_key(item)
            if key not in first_seen:
                first_seen[key] = item
            elif key not in repeated:
                repeated[key] = first_seen[key]
        return self._build(repeated.values())

    def frequencies(self) -> Any:
        """Count occurrences of every distinct element into a HashMap."""
        return self.frequencies_by(lambda item: item)

    def frequencies_by(self, to_key: KeyFunction) -> Any:
        """Count elements per derived key into a HashMap."""
        from maps.hash_map import HashMap

        counts: dict[Any, int] = {}
        for item in self._iterate():
            key = to_key(item)
            counts[key] = counts.get(key, 0) + 1
        return HashMap(counts)

    def rscan(self, initial: Any, step: Combiner) -> Any:
        """Return accumulator states while traversing from the end."""
        return self._scan(self._reverse_iterate(), initial, step)

    def map_while(self, function: Callable[[Any], Any]) -> Any:
        """Map elements until the function returns None.

        Returns:
            The mapped prefix preceding the first None result.
        """
        result = []
        for item in self._iterate():
            mapped = function(item)
            if mapped is None:
                break
            result.append(mapped)
        return self._build(result)

    def pad(self, size: int, value: Any) -> Any:
        """Append copies of the value until the length reaches size."""
        return self.pad_with(size, lambda _: value)

    def pad_with(self, size: int, to_value: Callable[[int], Any]) -> Any:
        """Append generated values until the length reaches size.

        Args:
            size: Target length; longer sequences are returned unchanged.
            to_value: Called with each index being filled.

        Returns:
            Sequence of length max(len, size).
        """
        items = self._snapshot()
        items.extend(to_value(index) for index in range(len(items), size))
        return self._build(items)

    def pad_left(self, size: int, value: Any) -> Any:
        """Prepend copies of the value until the length reaches size."""
        return self.pad_left_with(size, lambda _: value)

    def pad_left_with(self, size: int, to_value: Callable[[int], Any]) -> Any:
        """Prepend generated values until the length reaches size.

        The generator receives each index being filled, counted from the front.
        """
        items = self._snapshot()
        missing = max(size - len(items), 0)
        return self._build(chain((to_value(index) for index in range(missing)), items))
