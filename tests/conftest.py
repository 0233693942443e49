"""Pytest fixtures for openapi-merge tooling tests."""

from pathlib import Path

import pytest


@pytest.fixture
def spec_root(tmp_path: Path) -> Path:
    """Empty spec root directory for unit tests."""
    root = tmp_path / "specs"
    root.mkdir()
    return root
