"""Unit tests for the concrete sequence families."""

from __future__ import annotations

from collections import deque

import pytest

from sequences.deque import Deque
from sequences.linked_list import LinkedList
from sequences.vector import Vector


@pytest.mark.parametrize("index", [0, 1, 3, 4, -1, -5])
def test_linked_list_indexing_matches_list(index: int) -> None:
    """Positional lookup should match list indexing from either end."""
    values = [10, 20, 30, 40, 50]

    assert LinkedList(values)[index] == values[index]


def test_linked_list_index_out_of_range() -> None:
    """Missing positions should raise IndexError."""
    with pytest.raises(IndexError):
        LinkedList([1])[1]


def test_slicing_keeps_family() -> None:
    """Slices should be owned sequences of the receiver family."""
    assert isinstance(Vector([1, 2, 3])[1:], Vector)
    assert Deque([1, 2, 3])[::2] == [1, 3]
    assert LinkedList([1, 2, 3])[:2] == [1, 2]


def test_sequences_compare_across_families() -> None:
    """Equal elements in equal order should compare equal."""
    assert Vector([1, 2]) == Deque([1, 2])
    assert LinkedList([1, 2]) == (1, 2)
    assert Deque([1, 2]) == deque([1, 2])
    assert Vector([1, 2]) != [2, 1]
    assert Vector([1, 2]) != {1, 2}


def test_sequences_are_hashable_by_content() -> None:
    """Sequences with hashable elements should hash by content."""
    assert hash(Vector([1, 2])) == hash(LinkedList([1, 2]))
    assert len({Vector([1]), Vector([1]), Vector([2])}) == 2


def test_repr_names_family() -> None:
    """The repr should show the family and its elements."""
    assert repr(Vector([1, 2])) == "Vector([1, 2])"
    assert repr(LinkedList([])) == "LinkedList([])"


def test_reversed_and_membership() -> None:
    """Reverse iteration and membership should follow element order."""
    items = LinkedList([1, 2, 3])

    assert list(reversed(items)) == [3, 2, 1]
    assert 2 in items
    assert 5 not in Deque([1])


def test_constructor_copies_input() -> None:
    """Mutating the source list should not affect the vector."""
    source = [1, 2]
    items = Vector(source)

    source.append(3)

    assert items == [1, 2]
