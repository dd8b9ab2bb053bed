"""Key-value map families.

This package defines HashMap and SortedMap with pair, key-only, and
value-only operation variants.
"""
