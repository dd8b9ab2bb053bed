"""Position-based sequence edits.

This module implements insertion, replacement, deletion, and splicing at
explicit positions. Every position is validated before the new sequence
is built, so an out-of-range call never produces a partial result.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.validation import check_element_index, check_position, check_range


class IndexedOps:
    """Capability mixin for edits addressed by index or half-open range."""

    __slots__ = ()

    def add_at(self, index: int, element: Any) -> Any:
        """Insert an element before the given position.

        Args:
            index: Position in [0, len]; len appends.
            element: Element to insert.

        Returns:
            New sequence one element longer.

        Raises:
            FoldkitIndexError: If index lies outside [0, len].
        """
        return self.add_all_at(index, (element,))

    def add_all_at(self, index: int, elements: Iterable[Any]) -> Any:
        """Insert all elements before the given position, keeping their order.

        Raises:
            FoldkitIndexError: If index lies outside [0, len].
        """
        items = self._snapshot()
        check_position("add_all_at", index, len(items))
        return self._build([*items[:index], *elements, *items[index:]])

    def replace_at(self, index: int, element: Any) -> Any:
        """Replace the element at an index.

        Raises:
            FoldkitIndexError: If index does not address an element.
        """
        items = self._snapshot()
        check_element_index("replace_at", index, len(items))
        items[index] = element
        return self._build(items)

    def replace_range(self, start: int, stop: int, replacement: Iterable[Any]) -> Any:
        """Replace the half-open range [start, stop) with other elements.

        Raises:
            FoldkitIndexError: If the range is reversed or exceeds the length.
        """
        return self.splice(start, stop, replacement)[1]

    def delete_at(self, index: int) -> Any:
        """Remove the element at an index.

        Raises:
            FoldkitIndexError: If index does not address an element.
        """
        items = self._snapshot()
        check_element_index("delete_at", index, len(items))
        del items[index]
        return self._build(items)

    def delete_range(self, start: int, stop: int) -> Any:
        """Remove the half-open range [start, stop).

        Raises:
            FoldkitIndexError: If the range is reversed or exceeds the length.
        """
        return self.splice(start, stop, ())[1]

    def splice(self, start: int, stop: int, replacement: Iterable[Any]) -> tuple[Any, Any]:
        """Replace a range and report what was removed.

        Args:
            start: Inclusive range start.
            stop: Exclusive range end.
            replacement: Elements inserted in place of the range.

        Returns:
            Pair of (removed elements, resulting sequence).

        Raises:
            FoldkitIndexError: If the range is reversed or exceeds the length.
        """
        items = self._snapshot()
        check_range("splice", start, stop, len(items))
        removed = items[start:stop]
        result = [*items[:start], *replacement, *items[stop:]]
        return self._build(removed), self._build(result)

    def move_at(self, source_index: int, target_index: int) -> Any:
        """Move one element so that it ends up at the target index.

        Raises:
            FoldkitIndexError: If either index does not address an element.
        """
        items = self._snapshot()
        check_element_index("move_at", source_index, len(items))
        check_element_index("move_at", target_index, len(items))
        element = items.pop(source_index)
        items.insert(target_index, element)
        return self._build(items)

    def swap_at(self, source_index: int, target_index: int) -> Any:
        """Exchange the elements at two indices.

        Raises:
            FoldkitIndexError: If either index does not address an element.
        """
        items = self._snapshot()
        check_element_index("swap_at", source_index, len(items))
        check_element_index("swap_at", target_index, len(items))
        items[source_index], items[target_index] = items[target_index], items[source_index]
        return self._build(items)
