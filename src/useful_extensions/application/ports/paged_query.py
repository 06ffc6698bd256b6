"""
PagedQuerySource Interface

Protocol for a remote query that returns results in bounded batches.
Consumed by collections.fetch_all_pages().

Architecture Notes:
    - Protocol-based interface (structural typing)
    - Implementations live with the caller (HTTP clients, OData services, ORMs)
    - End of data is signalled by an empty batch, not by a total count
"""

from typing import Iterable, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class PagedQuerySource(Protocol[T_co]):
    """
    Protocol defining a paged query.

    Any object with an execute_at(offset) method satisfies it, e.g.:

        >>> class UsersQuery:
        ...     def __init__(self, client):
        ...         self.client = client
        ...
        ...     def execute_at(self, offset: int) -> list[dict]:
        ...         return self.client.get("/users", params={"skip": offset}).json()

    Implementation Notes:
        - execute_at() is called with the number of items already consumed
        - Returning an empty iterable ends the iteration
        - Errors propagate to the consumer unchanged (no retries)
    """

    def execute_at(self, offset: int) -> Iterable[T_co]:
        """
        Execute the query, skipping the first `offset` results.

        Args:
            offset: Number of results to skip (0-based)

        Returns:
            Next batch of results (empty when exhausted)
        """
        ...
