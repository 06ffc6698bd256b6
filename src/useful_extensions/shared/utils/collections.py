"""
Collection Utilities

Responsibility:
    Free functions over iterables: membership test, tree flattening and
    paged-query exhaustion.

Architecture Notes:
    - flatten() and fetch_all_pages() are generators: nothing is computed
      until the caller iterates
    - fetch_all_pages() is the only helper that performs I/O (through the
      PagedQuerySource it is given); pages are requested strictly one at a time
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from useful_extensions.application.ports.paged_query import PagedQuerySource
from useful_extensions.domain.shared.exceptions import NullArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_in(value: Any, *candidates: Any) -> bool:
    """
    Check whether value equals one of the candidates.

    Args:
        value: Value to look for (must not be None)
        *candidates: Values to compare against

    Returns:
        True if value == any candidate

    Raises:
        NullArgumentError: If value is None

    Examples:
        >>> is_in("b", "a", "b", "c")
        True
        >>> is_in(4, 1, 2, 3)
        False
    """
    if value is None:
        raise NullArgumentError("value")
    return value in candidates


def flatten(roots: Iterable[T], children_of: Callable[[T], Optional[Iterable[T]]]) -> Iterator[T]:
    """
    Lazily flatten a tree (or forest) into a single sequence.

    Traversal uses an explicit stack seeded with the roots in order:
    each popped node is yielded immediately, then its children are pushed
    in the order children_of returns them. Consequently the last root and
    the last child of every node are visited first:

        A
        ├── B
        │   └── D
        └── C

        list(flatten([A], children)) -> [A, C, B, D]

    There is no cycle detection; a cycle reachable through children_of
    makes the iteration infinite.

    Args:
        roots: Starting nodes
        children_of: Returns the children of a node (None means no children)

    Yields:
        Every reachable node, once per path that reaches it
    """
    stack = list(roots)

    while stack:
        item = stack.pop()
        yield item
        stack.extend(children_of(item) or ())


def fetch_all_pages(source: PagedQuerySource[T]) -> Iterator[T]:
    """
    Lazily retrieve every result of a paged query.

    Calls source.execute_at(offset) with offset equal to the number of
    results yielded so far, yielding each result as it arrives, until a
    call produces no new results. Each page is requested only after the
    previous one has been fully consumed.

    Args:
        source: Paged query (see PagedQuerySource)

    Yields:
        Every result across all pages, in page order

    Raises:
        Any exception raised by source.execute_at() propagates unchanged
        and ends the iteration.

    Examples:
        >>> # pages of 3, 3, 3 then an empty page
        >>> len(list(fetch_all_pages(query)))
        9
    """
    count = 0
    page_number = 0

    while True:
        former_count = count
        page_number += 1

        for entry in source.execute_at(count):
            count += 1
            yield entry

        logger.debug(
            f"Page {page_number} at offset {former_count} returned {count - former_count} items"
        )

        if count == former_count:
            break

    logger.debug(f"Paged query exhausted after {page_number} requests, {count} items total")
