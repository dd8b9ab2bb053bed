"""Public surface for Foldkit.

This module provides a stable import path for library users.
It re-exports the collection families, errors, and configuration.
"""

from __future__ import annotations

from core.config import FoldkitConfig
from core.errors import (
    FoldkitArgumentError,
    FoldkitConfigError,
    FoldkitError,
    FoldkitIndexError,
)
from maps.hash_map import HashMap
from maps.sorted_map import SortedMap
from sequences.deque import Deque
from sequences.linked_list import LinkedList
from sequences.vector import Vector
from sets.hash_set import HashSet
from sets.heap import Heap
from sets.sorted_set import SortedSet
from slices.slice_view import SliceView

__all__ = [
    "Deque",
    "FoldkitArgumentError",
    "FoldkitConfig",
    "FoldkitConfigError",
    "FoldkitError",
    "FoldkitIndexError",
    "HashMap",
    "HashSet",
    "Heap",
    "LinkedList",
    "SliceView",
    "SortedMap",
    "SortedSet",
    "Vector",
]
