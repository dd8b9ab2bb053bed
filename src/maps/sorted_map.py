"""Tree-ordered key-value map.

This module defines SortedMap, which iterates its pairs in ascending key
order. Lookups go through a dict; the sorted key list fixes the order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from maps.map_ops import MapOps


class SortedMap(MapOps, Mapping):
    """Immutable-by-convention map ordered by key."""

    __slots__ = ("_entries", "_keys")

    def __init__(self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        self._entries = dict(pairs)
        self._keys = sorted(self._entries)

    def _iterate(self) -> Iterator[tuple[Any, Any]]:
        return ((key, self._entries[key]) for key in self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._keys)

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def first(self) -> tuple[Any, Any] | None:
        """Return the pair with the smallest key, or None when empty."""
        return next(self._iterate(), None)

    def last(self) -> tuple[Any, Any] | None:
        """Return the pair with the largest key, or None when empty."""
        if not self._keys:
            return None
        key = self._keys[-1]
        return key, self._entries[key]
