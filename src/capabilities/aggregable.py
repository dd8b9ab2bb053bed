"""Numeric aggregation shortcuts.

This module provides sum and product folds for element collections.
"""

from __future__ import annotations

import math
from typing import Any


class AggregableOps:
    """Capability mixin for numeric folds over elements."""

    __slots__ = ()

    def sum(self, start: Any = 0) -> Any:
        """Return the sum of all elements, or start when empty."""
        return sum(self._iterate(), start)

    def product(self, start: Any = 1) -> Any:
        """Return the product of all elements, or start when empty."""
        return math.prod(self._iterate(), start=start)
