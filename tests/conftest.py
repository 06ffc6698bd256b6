"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - isolated_config: Clears EXTENSIONS_* variables and the cached config (autouse)
    - family_tree: Small acyclic tree for flatten() tests
    - paged_query_factory: Builds in-memory PagedQuerySource fakes

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(family_tree):
        assert list(flatten(["A"], family_tree.get))
"""

import logging
from typing import Callable, Iterable

import pytest

from useful_extensions.domain.extensions_config import get_config

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_ENV_VARS = (
    "EXTENSIONS_DEFAULT_LOCALE",
    "EXTENSIONS_EMAIL_MATCH_TIMEOUT_MS",
)


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """
    Run every test against default configuration.

    Removes EXTENSIONS_* variables from the environment and clears the
    memoized get_config() before and after each test, so a test that
    sets variables cannot leak them into the next one.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()

    yield

    get_config.cache_clear()


# ============================================================================
# COLLECTION FIXTURES
# ============================================================================


@pytest.fixture
def family_tree() -> dict[str, list[str]]:
    """
    Acyclic tree used by flatten() tests.

        A
        ├── B
        │   ├── D
        │   └── E
        └── C
            └── F
    """
    return {
        "A": ["B", "C"],
        "B": ["D", "E"],
        "C": ["F"],
        "D": [],
        "E": [],
        "F": [],
    }


class FakePagedQuery:
    """In-memory PagedQuerySource returning predefined page sizes."""

    def __init__(self, page_sizes: list[int]) -> None:
        self.page_sizes = list(page_sizes)
        self.offsets: list[int] = []

    def execute_at(self, offset: int) -> Iterable[int]:
        self.offsets.append(offset)
        call_index = len(self.offsets) - 1
        size = self.page_sizes[call_index] if call_index < len(self.page_sizes) else 0
        return list(range(offset, offset + size))


@pytest.fixture
def paged_query_factory() -> Callable[[list[int]], FakePagedQuery]:
    """
    Provide a factory for FakePagedQuery.

    Examples:
        >>> def test_pages(paged_query_factory):
        ...     query = paged_query_factory([3, 3, 0])
        ...     assert len(list(fetch_all_pages(query))) == 6
        ...     assert query.offsets == [0, 3, 6]
    """
    return FakePagedQuery


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers for test categorization.

    Markers:
        - unit: Unit tests (no external dependencies)
        - slow: Slow tests (>1s execution time)
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests (>1s execution time)"
    )
