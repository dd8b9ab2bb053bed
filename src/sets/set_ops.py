"""Set capability layer.

This module adds uniqueness-preserving operations to the shared element
operations. Insertion checks membership first, so present elements are a
silent no-op. No index-based operation exists on sets.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Iterable, Iterator

from capabilities.aggregable import AggregableOps
from capabilities.collectible import CollectibleOps
from capabilities.traversable import TraversableOps


class SetOps(CollectibleOps, AggregableOps, TraversableOps):
    """Capability mixin for unordered collections of distinct elements."""

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        return self._iterate()

    def __hash__(self) -> int:
        return hash(frozenset(self._iterate()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._iterate())!r})"

    def add(self, element: Any) -> Any:
        """Return a set that also holds the element; no-op when present."""
        if element in self:
            return self._build(self._iterate())
        return self._build(chain(self._iterate(), (element,)))

    def add_all(self, elements: Iterable[Any]) -> Any:
        """Return a set that also holds every new element."""
        added = [element for element in dict.fromkeys(elements) if element not in self]
        return self._build(chain(self._iterate(), added))

    def union(self, elements: Iterable[Any]) -> Any:
        """Combine with another collection, keeping one copy per element."""
        return self.add_all(elements)

    def difference(self, elements: Iterable[Any]) -> Any:
        """Keep only elements absent from the other collection."""
        excluded = set(elements)
        return self._build(item for item in self._iterate() if item not in excluded)

    def symmetric_difference(self, elements: Iterable[Any]) -> Any:
        """Keep elements present in exactly one of the two collections."""
        others = dict.fromkeys(elements)
        own = [item for item in self._iterate() if item not in others]
        return self._build(chain(own, (item for item in others if item not in self)))
