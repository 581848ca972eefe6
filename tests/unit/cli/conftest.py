"""Fixtures for CLI tests.

The CLI is wired to an in-memory store, a dict-backed finder and a
configuration pointing at temporary directories.
"""

from collections.abc import Iterator
from contextlib import ExitStack
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from japm.core.config import JapmConfig
from japm.store.memory import InMemoryPackageStore

from tests.helpers import CliEnv, DictPackageFinder


@pytest.fixture
def cli_env(tmp_path: Path, fs_root: Path) -> Iterator[CliEnv]:
    """Patch config loading, store and finder creation for every command."""
    config = JapmConfig(install_root=tmp_path / "build", fs_root=fs_root, build_workers=2)
    store = InMemoryPackageStore()
    finder = DictPackageFinder([])
    create_finder = MagicMock(return_value=finder)

    with ExitStack() as stack:
        stack.enter_context(patch("japm.cli.types.ensure_default_config", return_value=config))
        for module in ("japm.cli.types", "japm.cli.commands.info"):
            stack.enter_context(patch(f"{module}.open_store", return_value=store))
            stack.enter_context(patch(f"{module}.create_finder", create_finder))
        yield CliEnv(
            config=config,
            store=store,
            finder=finder,
            create_finder=create_finder,
            fs_root=fs_root,
        )
