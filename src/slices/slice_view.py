"""Borrowed read-only views over contiguous storage.

This module defines SliceView, a fixed-length window [start, stop) into an
existing indexable sequence. A view never copies or resizes its storage:
narrowing operations return narrower views, and padding returns an owned
Vector because a view cannot grow.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Iterator

from capabilities.ordered import OrderedOps, sequence_equals
from capabilities.traversable import TraversableOps
from core.types import Predicate
from core.validation import check_range


class SliceView(OrderedOps, TraversableOps, Sequence):
    """Read-only view of a contiguous run of borrowed elements."""

    __slots__ = ("_source", "_start", "_stop")

    def __init__(self, source: Sequence[Any], start: int = 0, stop: int | None = None) -> None:
        """Borrow a range of an indexable sequence.

        Args:
            source: Storage to view; callers must not mutate it while viewing.
            start: Inclusive start position.
            stop: Exclusive end position; defaults to the source length.

        Raises:
            FoldkitIndexError: If the range is reversed or exceeds the source.
        """
        resolved_stop = len(source) if stop is None else stop
        check_range("SliceView", start, resolved_stop, len(source))
        self._source = source
        self._start = start
        self._stop = resolved_stop

    def _iterate(self) -> Iterator[Any]:
        source = self._source
        return (source[index] for index in range(self._start, self._stop))

    def _reverse_iterate(self) -> Iterator[Any]:
        source = self._source
        return (source[index] for index in range(self._stop - 1, self._start - 1, -1))

    def _narrow(self, start: int, stop: int) -> SliceView:
        return SliceView(self._source, self._start + start, self._start + stop)

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> Iterator[Any]:
        return self._iterate()

    def __reversed__(self) -> Iterator[Any]:
        return self._reverse_iterate()

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise TypeError("SliceView only supports contiguous slices with step 1")
            return self._narrow(start, max(start, stop))
        position = index + len(self) if index < 0 else index
        if not 0 <= position < len(self):
            raise IndexError("SliceView index out of range")
        return self._source[self._start + position]

    def __eq__(self, other: object) -> bool:
        return sequence_equals(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SliceView({list(self._iterate())!r})"

    def take_while(self, predicate: Predicate) -> SliceView:
        """Narrow to the leading run of elements satisfying the predicate."""
        end = self.position(lambda item: not predicate(item))
        return self._narrow(0, len(self) if end is None else end)

    def skip_while(self, predicate: Predicate) -> SliceView:
        """Narrow past the leading run of elements satisfying the predicate."""
        start = self.position(lambda item: not predicate(item))
        return self._narrow(len(self) if start is None else start, len(self))

    def rtake_while(self, predicate: Predicate) -> SliceView:
        """Narrow to the trailing run of elements satisfying the predicate."""
        start = self.rposition(lambda item: not predicate(item))
        return self._narrow(0 if start is None else start + 1, len(self))

    def rskip_while(self, predicate: Predicate) -> SliceView:
        """Narrow before the trailing run of elements satisfying the predicate."""
        end = self.rposition(lambda item: not predicate(item))
        return self._narrow(0, 0 if end is None else end + 1)

    def init(self) -> SliceView:
        """Narrow to all but the last element; empty stays empty."""
        return self._narrow(0, max(len(self) - 1, 0))

    def tail(self) -> SliceView:
        """Narrow to all but the first element; empty stays empty."""
        return self._narrow(min(1, len(self)), len(self))

    def pad(self, size: int, value: Any) -> Any:
        """Copy into a Vector padded with the value up to size."""
        return self.to_vector().pad(size, value)

    def pad_with(self, size: int, to_value: Callable[[int], Any]) -> Any:
        """Copy into a Vector padded with generated values up to size."""
        return self.to_vector().pad_with(size, to_value)
