"""Hash-ordered key-value map.

This module defines HashMap, backed by a dict. Iteration follows the order
in which keys were first inserted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from maps.map_ops import MapOps


class HashMap(MapOps, Mapping):
    """Immutable-by-convention hash map."""

    __slots__ = ("_entries",)

    def __init__(self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        """Create a hash map.

        Args:
            pairs: Mapping or iterable of (key, value); a repeated key keeps
                its first position and its last value.
        """
        self._entries = dict(pairs)

    def _iterate(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries
