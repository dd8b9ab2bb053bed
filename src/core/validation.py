"""Argument validation helpers for collection operations.

This module checks positions, ranges, and structural sizes before an
operation builds anything, so failures never leave a partial result.
"""

from __future__ import annotations

from core.errors import FoldkitArgumentError, FoldkitIndexError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def check_position(operation: str, index: int, size: int) -> None:
    """Validate an insertion position in [0, size].

    Args:
        operation: Operation name for diagnostics.
        index: Requested insertion position.
        size: Current collection length.

    Raises:
        FoldkitIndexError: If index lies outside [0, size].
    """
    if not 0 <= index <= size:
        _raise_index_error(operation, f"position {index} is outside [0, {size}]")


def check_element_index(operation: str, index: int, size: int) -> None:
    """Validate an element index in [0, size).

    Args:
        operation: Operation name for diagnostics.
        index: Requested element index.
        size: Current collection length.

    Raises:
        FoldkitIndexError: If index does not address an existing element.
    """
    if not 0 <= index < size:
        _raise_index_error(operation, f"index {index} is outside [0, {size})")


def check_range(operation: str, start: int, stop: int, size: int) -> None:
    """Validate a half-open range [start, stop) against a length.

    Raises:
        FoldkitIndexError: If the range is reversed or exceeds the length.
    """
    if not 0 <= start <= stop <= size:
        _raise_index_error(operation, f"range [{start}, {stop}) is outside [0, {size}]")


def check_positive(operation: str, name: str, value: int) -> None:
    """Validate a structural size parameter that must be at least one.

    Raises:
        FoldkitArgumentError: If value is zero or negative.
    """
    if value < 1:
        _raise_argument_error(operation, f"{name} must be positive, got {value}")


def check_non_negative(operation: str, name: str, value: int) -> None:
    """Validate a count parameter that must not be negative.

    Raises:
        FoldkitArgumentError: If value is negative.
    """
    if value < 0:
        _raise_argument_error(operation, f"{name} must not be negative, got {value}")


def _raise_index_error(operation: str, message: str) -> None:
    _LOGGER.debug("index_out_of_bounds", operation=operation, detail=message)
    raise FoldkitIndexError(f"{operation}: {message}.")


def _raise_argument_error(operation: str, message: str) -> None:
    _LOGGER.debug("invalid_argument", operation=operation, detail=message)
    raise FoldkitArgumentError(f"{operation}: {message}.")
