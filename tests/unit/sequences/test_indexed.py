"""Unit tests for position-based sequence edits."""

from __future__ import annotations

import pytest

from core.errors import FoldkitIndexError
from sequences.deque import Deque
from sequences.linked_list import LinkedList
from sequences.vector import Vector


@pytest.mark.parametrize(
    ("index", "expected"),
    [(0, [3, 1, 2]), (1, [1, 3, 2]), (2, [1, 2, 3])],
)
def test_add_at_inserts_before_position(index: int, expected: list[int]) -> None:
    """Add_at should accept every position in [0, len]."""
    assert Vector([1, 2]).add_at(index, 3) == expected


def test_add_at_rejects_position_past_length() -> None:
    """Add_at beyond the length should raise an index error."""
    with pytest.raises(FoldkitIndexError):
        Vector([1, 2]).add_at(3, 3)


def test_add_all_at_keeps_inserted_order() -> None:
    """Add_all_at should insert the elements as a block."""
    assert Deque([1, 2]).add_all_at(1, [3, 4]) == [1, 3, 4, 2]


def test_replace_at_and_replace_range() -> None:
    """Replacements should leave other positions untouched."""
    items = Vector([1, 2, 3, 4])

    assert items.replace_at(1, 9) == [1, 9, 3, 4]
    assert items.replace_range(1, 3, [7]) == [1, 7, 4]


def test_replace_at_rejects_length() -> None:
    """Replace_at at the length should raise."""
    with pytest.raises(FoldkitIndexError):
        Vector([1]).replace_at(1, 0)


def test_delete_at_last_index_shrinks_by_one() -> None:
    """Deleting at len - 1 should succeed and drop exactly one element."""
    items = LinkedList([1, 2, 3])

    result = items.delete_at(len(items) - 1)

    assert result == [1, 2]
    assert len(result) == len(items) - 1


def test_delete_at_length_raises_and_leaves_input_unchanged() -> None:
    """Deleting at the length should fail without touching the receiver."""
    items = Vector([1, 2, 3])

    with pytest.raises(FoldkitIndexError):
        items.delete_at(len(items))

    assert items == [1, 2, 3]


def test_delete_range_removes_half_open_range() -> None:
    """Delete_range should exclude the stop position."""
    assert Vector([1, 2, 3, 4]).delete_range(1, 3) == [1, 4]


def test_delete_range_rejects_range_past_length() -> None:
    """Ranges beyond the length should raise."""
    with pytest.raises(FoldkitIndexError):
        Vector([1, 2]).delete_range(1, 3)


def test_splice_returns_removed_and_result() -> None:
    """Splice should report the removed run and the new sequence."""
    removed, result = Vector([1, 2, 3, 4]).splice(1, 3, ["a", "b", "c"])

    assert removed == [2, 3]
    assert result == [1, "a", "b", "c", 4]


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        (1, 3, [1, 3, 4, 2, 5]),
        (2, 4, [1, 2, 4, 5, 3]),
        (3, 1, [1, 4, 2, 3, 5]),
        (4, 0, [5, 1, 2, 3, 4]),
        (3, 3, [1, 2, 3, 4, 5]),
    ],
)
def test_move_at_places_element_at_target(source: int, target: int, expected: list[int]) -> None:
    """Move_at should leave the element at the target index."""
    assert Vector([1, 2, 3, 4, 5]).move_at(source, target) == expected


def test_move_at_rejects_missing_source() -> None:
    """Moving from a missing index should raise."""
    with pytest.raises(FoldkitIndexError):
        Vector([1, 2]).move_at(2, 0)


def test_swap_at_exchanges_elements() -> None:
    """Swap_at should exchange two positions."""
    assert Deque([1, 2, 3]).swap_at(0, 2) == [3, 2, 1]
