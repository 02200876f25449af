"""Shared fixtures: every test gets its own storage root under tmp_path."""

from pathlib import Path

import pytest

from docstore.storage.local_storage import LocalStorage


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Root directory that does not exist yet."""
    return tmp_path / "uploads"


@pytest.fixture
def storage(storage_root: Path) -> LocalStorage:
    return LocalStorage(storage_root)
