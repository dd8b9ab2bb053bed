"""Capability layers shared across collection families.

This package holds the mixins that families compose: common traversal,
numeric aggregation, ordered queries, and element rebuilding.
"""
