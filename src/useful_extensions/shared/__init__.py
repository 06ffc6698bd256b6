"""
Shared Layer

Responsibility:
    Helper functions used by callers of the library.
    Generic helpers that don't belong to any specific domain.

Contains:
    - utils: string, date and collection helpers
"""
