"""Shared test fixtures for nucleus-meditation.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from nucleus.data.array_list import ArrayList
from nucleus.data.array_map import ArrayMap


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "nucleus"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def numbers() -> ArrayList:
    return ArrayList([1, 2, 3, 4])


@pytest.fixture()
def prices() -> ArrayMap:
    return ArrayMap({"apple": 3, "pear": 5, "plum": 2})
