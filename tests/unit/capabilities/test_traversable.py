"""Unit tests for the common capability layer."""

from __future__ import annotations

import pytest

from maps.hash_map import HashMap
from sequences.vector import Vector
from sets.hash_set import HashSet
from sets.sorted_set import SortedSet


def _compare(left: tuple[int, str], right: tuple[int, str]) -> int:
    return left[0] - right[0]


def test_fold_accumulates_left_to_right() -> None:
    """Fold should see elements in sequence order."""
    folded = Vector([1, 2, 3]).fold("", lambda acc, item: acc + str(item))

    assert folded == "123"


def test_reduce_returns_none_for_empty_collection() -> None:
    """Reduce on empty input should report no result."""
    assert Vector([]).reduce(lambda acc, item: acc + item) is None


def test_reduce_combines_in_order() -> None:
    """Reduce should seed with the first element."""
    assert Vector([10, 3, 2]).reduce(lambda acc, item: acc - item) == 5


def test_all_and_any_on_empty_collection() -> None:
    """Empty all is true and empty any is false."""
    empty = HashSet()

    assert empty.all(lambda item: False)
    assert not empty.any(lambda item: True)


def test_all_short_circuits() -> None:
    """All should stop at the first failing element."""
    seen: list[int] = []

    def predicate(item: int) -> bool:
        seen.append(item)
        return item < 2

    assert not Vector([1, 2, 3]).all(predicate)
    assert seen == [1, 2]


def test_find_returns_first_match() -> None:
    """Find should return the earliest matching element."""
    assert Vector([1, 4, 6]).find(lambda item: item % 2 == 0) == 4


def test_find_map_returns_first_non_none() -> None:
    """Find_map should skip None results."""
    result = Vector(["a", "12", "7"]).find_map(lambda text: int(text) if text.isdigit() else None)

    assert result == 12


def test_count_by_counts_matches() -> None:
    """Count_by should count elements satisfying the predicate."""
    assert Vector([1, 2, 3, 4]).count_by(lambda item: item > 1) == 3


def test_count_unique_ignores_repeats() -> None:
    """Count_unique should count distinct elements."""
    assert Vector([1, 1, 2, 3, 3]).count_unique() == 3


def test_min_by_prefers_first_on_ties() -> None:
    """Minimum ties should resolve to the first encountered element."""
    items = Vector([(1, "a"), (0, "b"), (0, "c")])

    assert items.min_by(_compare) == (0, "b")
    assert items.min_by_key(lambda item: item[0]) == (0, "b")


def test_max_by_prefers_last_on_ties() -> None:
    """Maximum ties should resolve to the last encountered element."""
    items = Vector([(2, "a"), (0, "b"), (2, "c")])

    assert items.max_by(_compare) == (2, "c")
    assert items.max_by_key(lambda item: item[0]) == (2, "c")


def test_min_and_max_item_on_empty_return_none() -> None:
    """Extremes of an empty collection should be absent."""
    assert Vector([]).min_item() is None
    assert Vector([]).max_item() is None
    assert Vector([]).minmax_item() is None


def test_minmax_matches_separate_extremes() -> None:
    """Minmax should agree with min_by and max_by tie rules."""
    items = Vector([(1, "a"), (0, "b"), (3, "c"), (0, "d"), (3, "e")])

    assert items.minmax_by(_compare) == ((0, "b"), (3, "e"))
    assert items.minmax_by_key(lambda item: item[0]) == ((0, "b"), (3, "e"))
    assert Vector([5, 1, 9]).minmax_item() == (1, 9)


def test_group_fold_folds_per_key() -> None:
    """Group_fold should fold each key independently."""
    grouped = Vector([1, 2, 3]).group_fold(lambda item: item % 2, 0, lambda acc, item: acc + item)

    assert grouped == {0: 2, 1: 4}


def test_group_reduce_reduces_per_key() -> None:
    """Group_reduce should seed every group with its first element."""
    grouped = Vector([1, 2, 3, 4]).group_reduce(lambda item: item % 2, max)

    assert grouped == {1: 3, 0: 4}


def test_subset_superset_and_disjoint() -> None:
    """Membership predicates should compare against other iterables."""
    items = HashSet([1, 2])

    assert items.subset([1, 2, 3])
    assert not items.superset([1, 2, 3])
    assert items.superset([2])
    assert items.disjoint([3, 4])


def test_join_items_uses_separator() -> None:
    """Join_items should join element text with the separator."""
    assert Vector([1, 2, 3]).join_items("-") == "1-2-3"
    assert Vector([1, 2]).join_items() == "1, 2"


def test_common_operations_on_maps_see_pairs() -> None:
    """Maps should traverse (key, value) pairs in common operations."""
    mapping = HashMap({"a": 1, "b": 2})

    assert mapping.find(lambda pair: pair[1] == 2) == ("b", 2)
    assert mapping.count_by(lambda pair: pair[0] == "a") == 1


def test_conversions_apply_target_family_rules() -> None:
    """Conversions should build the requested family."""
    items = Vector([3, 1, 3, 2])

    assert items.to_sorted_set().to_list() == [1, 2, 3]
    assert items.to_hash_set() == {1, 2, 3}
    assert Vector([("a", 1), ("a", 2)]).to_hash_map() == {"a": 2}
    assert SortedSet([2, 1]).to_vector() == [1, 2]


@pytest.mark.parametrize("collection", [Vector([4, 2, 9]), HashSet([4, 2, 9]), SortedSet([4, 2, 9])])
def test_min_and_max_item_across_families(collection: object) -> None:
    """Every family should expose the same extreme selection contract."""
    assert collection.min_item() == 2
    assert collection.max_item() == 9
