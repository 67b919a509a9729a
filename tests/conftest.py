"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

pytest_plugins = ["littlemock.pytest_plugin", "pytester"]


@pytest.fixture
def temp_dir() -> Path:
    """Temporary directory for filesystem-based tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def _mock_context(littlemock):
    """Run every test in its own mock context with the teardown leak check."""
    yield littlemock
