"""Unordered set families.

This package defines HashSet, SortedSet, and Heap, which preserve element
uniqueness across every operation.
"""
