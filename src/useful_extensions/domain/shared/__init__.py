"""
Shared Domain

Cross-cutting domain elements used by every utility group.
"""

from .exceptions import (
    CultureNotFoundError,
    ExtensionsException,
    FormatError,
    NullArgumentError,
)

__all__ = [
    "ExtensionsException",
    "NullArgumentError",
    "FormatError",
    "CultureNotFoundError",
]
