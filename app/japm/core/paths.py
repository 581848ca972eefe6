"""System path management for japm.

japm manages system-wide packages, so its directories live in system
locations. Each can be overridden with an environment variable.

Defaults:
- Config: /etc/japm/ (JAPM_CONFIG_DIR)
- State: /var/lib/japm/ (JAPM_STATE_DIR)
- Cache: /var/cache/japm/ (JAPM_CACHE_DIR)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "japm"


def _get_dir(env_var: str, default: Path) -> Path:
    """Get a directory respecting an environment variable override.

    Args:
        env_var: Environment variable name (e.g., "JAPM_CONFIG_DIR").
        default: Directory used when the variable is unset or empty.

    Returns:
        Path to the application directory.
    """
    override = os.environ.get(env_var)
    if override:
        return Path(override)
    return default


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to /etc/japm/ (or JAPM_CONFIG_DIR).
    """
    return _get_dir("JAPM_CONFIG_DIR", Path("/etc") / APP_NAME)


def get_state_dir() -> Path:
    """Get the state directory path.

    State data is the installed package database.

    Returns:
        Path to /var/lib/japm/ (or JAPM_STATE_DIR).
    """
    return _get_dir("JAPM_STATE_DIR", Path("/var/lib") / APP_NAME)


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Returns:
        Path to /var/cache/japm/ (or JAPM_CACHE_DIR).
    """
    return _get_dir("JAPM_CACHE_DIR", Path("/var/cache") / APP_NAME)


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to /etc/japm/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_database_path() -> Path:
    """Get the installed package database path.

    Returns:
        Path to /var/lib/japm/packages.db.
    """
    return get_state_dir() / "packages.db"


def get_build_dir() -> Path:
    """Get the default staging root for package builds.

    Returns:
        Path to /var/cache/japm/build.
    """
    return get_cache_dir() / "build"
