"""Unit tests for sequence combination and combinatorics."""

from __future__ import annotations

import pytest

from core.errors import FoldkitArgumentError
from sequences.deque import Deque
from sequences.vector import Vector


def test_interleave_appends_longer_remainder() -> None:
    """Interleave should keep the tail of the longer side."""
    assert Vector([1, 2, 3]).interleave([4, 5]) == [1, 4, 2, 5, 3]
    assert Vector([1]).interleave([4, 5, 6]) == [1, 4, 5, 6]


def test_interleave_shortest_truncates() -> None:
    """Interleave_shortest should stop once either side is exhausted."""
    assert Vector([1, 2, 3]).interleave_shortest([4, 5]) == [1, 4, 2, 5]


def test_interleave_keeps_none_elements() -> None:
    """None elements should survive interleaving."""
    assert Vector([None, 1]).interleave([None]) == [None, None, 1]


def test_zip_truncates_to_shorter() -> None:
    """Zip should pair positionally up to the shorter length."""
    assert Vector([1, 2, 3]).zip(["a", "b"]) == [(1, "a"), (2, "b")]


def test_zip_padded_calls_generators_for_missing_sides() -> None:
    """Zip_padded should fill the shorter side."""
    assert Vector([1, 2, 3]).zip_padded(["a"], lambda: 0, lambda: "-") == [
        (1, "a"),
        (2, "-"),
        (3, "-"),
    ]
    assert Vector([1]).zip_padded(["a", "b"], lambda: 0, lambda: "-") == [(1, "a"), (0, "b")]


def test_unzip_splits_pairs() -> None:
    """Unzip should produce two sequences of the same family."""
    lefts, rights = Deque([(1, "a"), (2, "b")]).unzip()

    assert lefts == [1, 2]
    assert rights == ["a", "b"]
    assert isinstance(lefts, Deque)


def test_intersperse_places_separator_between_elements() -> None:
    """Separators should never lead or trail."""
    assert Vector([1, 2, 3]).intersperse(0) == [1, 0, 2, 0, 3]
    assert Vector([1]).intersperse(0) == [1]
    assert Vector([]).intersperse(0) == []


def test_intersperse_with_interval() -> None:
    """Separators should follow every interval elements."""
    assert Vector([1, 2, 3, 4, 5]).intersperse(0, 2) == [1, 2, 0, 3, 4, 0, 5]


def test_intersperse_with_calls_generator_per_gap() -> None:
    """Each gap should receive a freshly generated separator."""
    counter = iter(range(100))

    assert Vector(["a", "b", "c"]).intersperse_with(lambda: next(counter)) == ["a", 0, "b", 1, "c"]


def test_intersperse_rejects_zero_interval() -> None:
    """A zero interval should raise an argument error."""
    with pytest.raises(FoldkitArgumentError):
        Vector([1, 2]).intersperse(0, 0)


def test_combinations_follow_positions() -> None:
    """Combinations should be generated by position in input order."""
    items = Vector([1, 2, 3])

    assert items.combinations(2) == [[1, 2], [1, 3], [2, 3]]
    assert items.combinations(4) == []
    assert items.multicombinations(2) == [[1, 1], [1, 2], [1, 3], [2, 2], [2, 3], [3, 3]]


def test_variations_and_cartesian_product() -> None:
    """Ordered arrangements and products should enumerate lexicographically."""
    items = Vector([1, 2])

    assert items.variations(2) == [[1, 2], [2, 1]]
    assert items.cartesian_product(2) == [[1, 1], [1, 2], [2, 1], [2, 2]]


def test_powerset_lists_shortest_first() -> None:
    """Powerset should start with the empty subsequence."""
    assert Vector([1, 2]).powerset() == [[], [1], [2], [1, 2]]
