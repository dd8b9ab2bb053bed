"""Ordered sequence families.

This package defines Vector, Deque, and LinkedList together with the
sequence operation mixins they share.
"""
