"""Borrowed read-only views.

This package defines SliceView over contiguous storage.
"""
