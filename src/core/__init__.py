"""Core errors, configuration, logging, and validation.

This package carries the ambient pieces every collection family relies on.
"""
