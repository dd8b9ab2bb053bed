"""Unit tests for sequence sorting."""

from __future__ import annotations

from sequences.linked_list import LinkedList
from sequences.vector import Vector


def _by_first(left: tuple[int, str], right: tuple[int, str]) -> int:
    return left[0] - right[0]


def test_sorted_keeps_length_and_order() -> None:
    """Sorted output should be a non-decreasing permutation."""
    items = Vector([3, 1, 2, 1])

    result = items.sorted()

    assert len(result) == len(items)
    assert result == [1, 1, 2, 3]


def test_sorted_by_is_stable() -> None:
    """Equal elements should keep their input order."""
    items = Vector([(2, "a"), (1, "b"), (2, "c"), (1, "d")])

    assert items.sorted_by(_by_first) == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]
    assert items.sorted_by_key(lambda item: item[0]) == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


def test_sorted_by_cached_key_calls_key_once_per_element() -> None:
    """The key function should run exactly once per element."""
    calls: list[int] = []

    def to_key(item: int) -> int:
        calls.append(item)
        return -item

    result = Vector([3, 1, 2, 5, 4]).sorted_by_cached_key(to_key)

    assert result == [5, 4, 3, 2, 1]
    assert sorted(calls) == [1, 2, 3, 4, 5]


def test_sorted_by_cached_key_is_stable() -> None:
    """Cached-key sorting should keep equal keys in input order."""
    items = LinkedList(["bb", "a", "cc", "d"])

    assert items.sorted_by_cached_key(len) == ["a", "d", "bb", "cc"]


def test_unstable_variants_sort() -> None:
    """Unstable variants should still produce ascending output."""
    items = Vector([3, 1, 2])

    assert items.sorted_unstable() == [1, 2, 3]
    assert items.sorted_unstable_by(lambda left, right: right - left) == [3, 2, 1]
    assert items.sorted_unstable_by_key(lambda item: -item) == [3, 2, 1]


def test_merge_interleaves_sorted_inputs() -> None:
    """Merge should combine two ascending sequences."""
    assert Vector([1, 3, 5]).merge([2, 3, 6]) == [1, 2, 3, 3, 5, 6]
    assert Vector([5, 3]).merge_by([4, 1], lambda left, right: right - left) == [5, 4, 3, 1]


def test_sorting_does_not_mutate_receiver() -> None:
    """The receiver should keep its original order."""
    items = Vector([2, 1])

    items.sorted()

    assert items == [2, 1]
