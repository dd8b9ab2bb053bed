"""Chunking, windowing, and splitting of sequences.

This module partitions a sequence into runs of neighbouring elements.
Results are sequences of sequences of the receiver's own family.
"""

from __future__ import annotations

from typing import Any, Callable

from core.constants import DEFAULT_WINDOW_STEP
from core.types import PairPredicate, Predicate
from core.validation import check_positive


class WindowingOps:
    """Capability mixin for grouping consecutive elements."""

    __slots__ = ()

    def chunked(self, size: int) -> Any:
        """Split into consecutive non-overlapping chunks of the given size.

        The last chunk is shorter when the length is not a multiple of size.

        Raises:
            FoldkitArgumentError: If size is not positive.
        """
        check_positive("chunked", "size", size)
        return self._chunks(size, exact=False)

    def chunked_exact(self, size: int) -> Any:
        """Split into chunks of exactly the given size, dropping the remainder.

        Raises:
            FoldkitArgumentError: If size is not positive.
        """
        check_positive("chunked_exact", "size", size)
        return self._chunks(size, exact=True)

    def chunked_by(self, predicate: PairPredicate) -> Any:
        """Split where adjacent elements stop belonging together.

        Args:
            predicate: Called with (previous, current); False starts a new chunk.

        Returns:
            Sequence of chunks; empty when the receiver is empty.
        """
        chunks: list[list[Any]] = []
        for item in self._iterate():
            if chunks and predicate(chunks[-1][-1], item):
                chunks[-1].append(item)
            else:
                chunks.append([item])
        return self._build(self._build(chunk) for chunk in chunks)

    def windowed(self, size: int, step: int = DEFAULT_WINDOW_STEP) -> Any:
        """Return every contiguous window of the given size.

        Args:
            size: Window length.
            step: Distance between window starts.

        Returns:
            Windows in order; empty when size exceeds the length.

        Raises:
            FoldkitArgumentError: If size or step is not positive.
        """
        check_positive("windowed", "size", size)
        check_positive("windowed", "step", step)
        items = self._snapshot()
        starts = range(0, len(items) - size + 1, step)
        return self._build(self._build(items[start : start + size]) for start in starts)

    def windowed_circular(self, size: int, step: int = DEFAULT_WINDOW_STEP) -> Any:
        """Return windows of the given size that wrap around the end.

        One window starts at every step-th position of the receiver.

        Raises:
            FoldkitArgumentError: If size or step is not positive.
        """
        check_positive("windowed_circular", "size", size)
        check_positive("windowed_circular", "step", step)
        items = self._snapshot()
        length = len(items)
        return self._build(
            self._build(items[(start + offset) % length] for offset in range(size))
            for start in range(0, length, step)
        )

    def divide(self, separator: Any) -> Any:
        """Split around elements equal to the separator, dropping them."""
        return self.divide_by(lambda item: item == separator)

    def divide_by(self, predicate: Predicate) -> Any:
        """Split around elements matching the predicate, dropping them.

        Adjacent or boundary separators produce empty parts, so the result
        always holds one more part than there are separators.
        """
        parts: list[list[Any]] = [[]]
        for item in self._iterate():
            if predicate(item):
                parts.append([])
            else:
                parts[-1].append(item)
        return self._build(self._build(part) for part in parts)

    def coalesce(self, function: Callable[[Any, Any], Any]) -> Any:
        """Merge runs of adjacent elements.

        Args:
            function: Called with (previous, current); returns the merged element,
                or None to keep both and continue from current.

        Returns:
            Sequence of merged elements.
        """
        merged: list[Any] = []
        for item in self._iterate():
            if merged:
                combined = function(merged[-1], item)
                if combined is not None:
                    merged[-1] = combined
                    continue
            merged.append(item)
        return self._build(merged)

    def _chunks(self, size: int, exact: bool) -> Any:
        items = self._snapshot()
        limit = len(items) - len(items) % size if exact else len(items)
        return self._build(
            self._build(items[start : start + size]) for start in range(0, limit, size)
        )
