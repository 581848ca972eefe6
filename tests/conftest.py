"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from japm.store.memory import InMemoryPackageStore


@pytest.fixture
def empty_store() -> InMemoryPackageStore:
    """An in-memory store with nothing installed."""
    return InMemoryPackageStore()


@pytest.fixture
def fs_root(tmp_path: Path) -> Path:
    """An empty directory standing in for the real filesystem root."""
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Staging root for package builds."""
    return tmp_path / "build"


@pytest.fixture
def sample_document() -> str:
    """A complete package document as served by a remote."""
    return """{
    "package_data": {
        "name": "neofetch",
        "version": "7.1.0",
        "description": "System information tool"
    },
    "dependencies": ["bash"],
    "pre_install": [],
    "install": ["mkdir -p usr/bin", "touch usr/bin/neofetch"],
    "post_install": [],
    "pre_remove": [],
    "post_remove": []
}"""
