"""Shared callable and element type aliases.

This module names the shapes of caller-supplied functions so that
every family signature reads the same way.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]
PairPredicate = Callable[[Any, Any], bool]
Comparator = Callable[[Any, Any], int]
KeyFunction = Callable[[Any], Any]
Combiner = Callable[[Any, Any], Any]
