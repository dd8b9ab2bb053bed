"""Sequence combination and combinatorics.

This module pairs, alternates, and separates elements, and enumerates
position-based combinations. Combinations treat equal elements at
different positions as distinct.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable

from core.constants import DEFAULT_INTERSPERSE_INTERVAL
from core.validation import check_non_negative, check_positive


class CombiningOps:
    """Capability mixin for combining a sequence with itself or another."""

    __slots__ = ()

    def interleave(self, elements: Iterable[Any]) -> Any:
        """Alternate elements with another sequence, appending the longer remainder.

        Example: [1, 2, 3] interleaved with [4, 5] yields [1, 4, 2, 5, 3].
        """
        missing = object()
        alternated = itertools.chain.from_iterable(
            itertools.zip_longest(self._iterate(), elements, fillvalue=missing)
        )
        return self._build(item for item in alternated if item is not missing)

    def interleave_shortest(self, elements: Iterable[Any]) -> Any:
        """Alternate elements with another sequence until either is exhausted."""
        return self._build(itertools.chain.from_iterable(zip(self._iterate(), elements)))

    def zip(self, elements: Iterable[Any]) -> Any:
        """Pair elements positionally, truncating to the shorter length."""
        return self._build(zip(self._iterate(), elements))

    def zip_padded(
        self,
        elements: Iterable[Any],
        to_left: Callable[[], Any],
        to_right: Callable[[], Any],
    ) -> Any:
        """Pair elements positionally, padding the shorter side.

        Args:
            elements: Right-hand elements.
            to_left: Generator called once per missing left element.
            to_right: Generator called once per missing right element.

        Returns:
            Sequence of pairs as long as the longer input.
        """
        missing = object()
        pairs = []
        for left, right in itertools.zip_longest(self._iterate(), elements, fillvalue=missing):
            pairs.append(
                (
                    to_left() if left is missing else left,
                    to_right() if right is missing else right,
                )
            )
        return self._build(pairs)

    def unzip(self) -> tuple[Any, Any]:
        """Split a sequence of pairs into a pair of sequences."""
        lefts = []
        rights = []
        for left, right in self._iterate():
            lefts.append(left)
            rights.append(right)
        return self._build(lefts), self._build(rights)

    def intersperse(self, separator: Any, interval: int = DEFAULT_INTERSPERSE_INTERVAL) -> Any:
        """Insert a separator between every group of interval elements.

        No separator is added before the first or after the last element.

        Raises:
            FoldkitArgumentError: If interval is not positive.
        """
        check_positive("intersperse", "interval", interval)
        return self._intersperse(lambda: separator, interval)

    def intersperse_with(
        self,
        to_separator: Callable[[], Any],
        interval: int = DEFAULT_INTERSPERSE_INTERVAL,
    ) -> Any:
        """Insert a freshly generated separator into every gap.

        Raises:
            FoldkitArgumentError: If interval is not positive.
        """
        check_positive("intersperse_with", "interval", interval)
        return self._intersperse(to_separator, interval)

    def combinations(self, k: int) -> Any:
        """Return all k-element combinations in positional order.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("combinations", "k", k)
        return self._build(self._build(group) for group in itertools.combinations(self._iterate(), k))

    def multicombinations(self, k: int) -> Any:
        """Return all k-element combinations with repetition.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("multicombinations", "k", k)
        return self._build(
            self._build(group)
            for group in itertools.combinations_with_replacement(self._iterate(), k)
        )

    def variations(self, k: int) -> Any:
        """Return all ordered k-element arrangements without repetition.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("variations", "k", k)
        return self._build(self._build(group) for group in itertools.permutations(self._iterate(), k))

    def cartesian_product(self, k: int) -> Any:
        """Return the k-fold cartesian product of the sequence with itself.

        Raises:
            FoldkitArgumentError: If k is negative.
        """
        check_non_negative("cartesian_product", "k", k)
        return self._build(
            self._build(group) for group in itertools.product(self._snapshot(), repeat=k)
        )

    def powerset(self) -> Any:
        """Return all subsequences, shortest first, in positional order."""
        items = self._snapshot()
        return self._build(
            self._build(group)
            for size in range(len(items) + 1)
            for group in itertools.combinations(items, size)
        )

    def _intersperse(self, to_separator: Callable[[], Any], interval: int) -> Any:
        result = []
        for index, item in enumerate(self._iterate()):
            if index > 0 and index % interval == 0:
                result.append(to_separator())
            result.append(item)
        return self._build(result)
