"""Foldkit exception hierarchy.

This module defines the failures an operation or configuration can raise.
Absence of a value is never an error and is reported as None instead.
"""

from __future__ import annotations


class FoldkitError(Exception):
    """Base exception for all Foldkit failures."""


class FoldkitIndexError(FoldkitError, IndexError):
    """Raised when a position or range lies outside the collection bounds."""


class FoldkitArgumentError(FoldkitError, ValueError):
    """Raised when a structural parameter is outside its documented domain."""


class FoldkitConfigError(FoldkitError):
    """Raised for invalid diagnostic configuration."""
