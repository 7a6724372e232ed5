"""Exception hierarchy for sortkey.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class SortKeyError(Exception):
    """Base exception for all sortkey errors."""
    pass


class ConfigError(SortKeyError):
    """Raised when a KeySet is built from invalid alphabets."""
    pass


class InvalidValueError(SortKeyError):
    """Raised when a key does not conform to the active KeySet."""
    pass


class KeyOverflowError(SortKeyError):
    """Raised when no larger key exists in the configured bands."""

    def __init__(self, message: str = "unable to generate larger value"):
        super().__init__(message)


class KeyUnderflowError(SortKeyError):
    """Raised when no smaller key exists in the configured bands."""

    def __init__(self, message: str = "unable to generate smaller value"):
        super().__init__(message)


class OrderingError(SortKeyError):
    """Raised when asked to bisect a pair where the lower bound is not below the upper."""
    pass
