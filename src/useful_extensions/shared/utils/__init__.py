"""
Shared Utilities

Responsibility:
    Generic helper functions layered on primitive types.

Contains:
    - strings: emptiness, formatting, masking, filtering, validation,
      hashing, random strings, currency
    - dates: period boundaries, weekday navigation, month enumeration
    - collections: membership, tree flattening, paged-query exhaustion

Usage:
    >>> from useful_extensions.shared.utils import strings, dates
    >>> strings.mask("1234567890")
    '******7890'
"""

from . import collections, dates, strings

__all__ = ["collections", "dates", "strings"]
