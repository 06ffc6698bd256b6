"""
Ports (Interfaces)

Contains Protocol definitions for external collaborators.
Callers implement these protocols.
"""

from useful_extensions.application.ports.paged_query import PagedQuerySource

__all__ = ["PagedQuerySource"]
