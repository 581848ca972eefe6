"""Unit tests for system path management.

Tests for the paths module that provides japm's directory paths.
"""

import os
from pathlib import Path
from unittest.mock import patch

from japm.core.paths import (
    APP_NAME,
    get_build_dir,
    get_cache_dir,
    get_config_dir,
    get_config_path,
    get_database_path,
    get_state_dir,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns /etc/japm when JAPM_CONFIG_DIR is not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()

        assert result == Path("/etc") / APP_NAME

    def test_respects_override(self, tmp_path: Path) -> None:
        """get_config_dir respects JAPM_CONFIG_DIR."""
        with patch.dict(os.environ, {"JAPM_CONFIG_DIR": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path

    def test_empty_override_is_ignored(self) -> None:
        """An empty JAPM_CONFIG_DIR falls back to the default."""
        with patch.dict(os.environ, {"JAPM_CONFIG_DIR": ""}):
            result = get_config_dir()

        assert result == Path("/etc/japm")


class TestGetStateDir:
    """Tests for get_state_dir function."""

    def test_default_state_dir(self) -> None:
        """get_state_dir returns /var/lib/japm by default."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_state_dir()

        assert result == Path("/var/lib/japm")

    def test_respects_override(self, tmp_path: Path) -> None:
        """get_state_dir respects JAPM_STATE_DIR."""
        with patch.dict(os.environ, {"JAPM_STATE_DIR": str(tmp_path)}):
            result = get_state_dir()

        assert result == tmp_path


class TestGetCacheDir:
    """Tests for get_cache_dir function."""

    def test_default_cache_dir(self) -> None:
        """get_cache_dir returns /var/cache/japm by default."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_cache_dir()

        assert result == Path("/var/cache/japm")


class TestFilePaths:
    """Tests for file path helpers."""

    def test_config_path(self, tmp_path: Path) -> None:
        """The config file lives in the config directory."""
        with patch.dict(os.environ, {"JAPM_CONFIG_DIR": str(tmp_path)}):
            assert get_config_path() == tmp_path / "config.toml"

    def test_database_path(self, tmp_path: Path) -> None:
        """The package database lives in the state directory."""
        with patch.dict(os.environ, {"JAPM_STATE_DIR": str(tmp_path)}):
            assert get_database_path() == tmp_path / "packages.db"

    def test_build_dir(self, tmp_path: Path) -> None:
        """Builds are staged under the cache directory."""
        with patch.dict(os.environ, {"JAPM_CACHE_DIR": str(tmp_path)}):
            assert get_build_dir() == tmp_path / "build"
