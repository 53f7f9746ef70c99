"""Shared test fixtures for hetdb.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "hetdb"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def fixtures_dir() -> Path:
    """Directory holding the ``.hetdb`` fixture files."""
    return FIXTURES_DIR


@pytest.fixture()
def tag_db() -> dict[str, Any]:
    """A small valid database with one ``tag`` table of three rows."""
    return {
        "_tabledef": [
            {
                "name": "tag",
                "mandatory": ["name", "title"],
                "optional": ["main"],
                "unique": ["name"],
            },
        ],
        "tag": [
            {"name": "cooking", "title": "How to Cook", "main": "true"},
            {"name": "mechanics", "title": "How to Make Things", "main": "true"},
            {"name": "article", "title": "An Article", "main": "false"},
        ],
    }
