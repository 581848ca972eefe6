"""japm configuration.

Configuration is stored as TOML in /etc/japm/config.toml. Remotes are
tried in the order they appear in the file.

Example:
    build_workers = 3
    fs_root = "/"

    [remotes]
    base = "https://raw.githubusercontent.com/TheAlexDev23/japm-official-packages/main/"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from japm.core.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from japm.core.paths import get_build_dir, get_config_path

logger = logging.getLogger(__name__)

DEFAULT_REMOTES: dict[str, str] = {
    "base": "https://raw.githubusercontent.com/TheAlexDev23/japm-official-packages/main/",
}


class JapmConfig(BaseModel):
    """Configuration for japm.

    Attributes:
        remotes: Remote name to base URL, highest priority first.
        build_workers: Maximum number of concurrent builds.
        install_root: Staging root for builds. None means the cache build dir.
        fs_root: Real filesystem root packages are installed onto.
        request_timeout: HTTP timeout per remote request, in seconds.
    """

    model_config = ConfigDict(extra="forbid")

    remotes: Annotated[
        dict[str, str],
        Field(description="Remote name to base URL, tried in order"),
    ] = Field(default_factory=lambda: dict(DEFAULT_REMOTES))
    build_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Concurrent builds (1-64)"),
    ] = 3
    install_root: Annotated[
        Path | None,
        Field(description="Staging root (None = cache build directory)"),
    ] = None
    fs_root: Annotated[
        Path,
        Field(description="Real filesystem root"),
    ] = Path("/")
    request_timeout: Annotated[
        float,
        Field(gt=0, description="HTTP timeout in seconds"),
    ] = 30.0

    @field_validator("remotes")
    @classmethod
    def validate_remotes(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate that every remote has a non-empty URL."""
        for name, url in v.items():
            if not url.strip():
                msg = f"Remote '{name}' has an empty URL"
                raise ValueError(msg)
        return v

    @property
    def effective_install_root(self) -> Path:
        """Get the staging root, falling back to the cache build directory."""
        if self.install_root is not None:
            return self.install_root
        return get_build_dir()

    @property
    def remote_urls(self) -> list[str]:
        """Remote base URLs in priority order."""
        return list(self.remotes.values())


def load_config(path: Path | None = None) -> JapmConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated JapmConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return JapmConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: JapmConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The JapmConfig object to save.
        path: Path to save the config. If None, uses the default path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def ensure_default_config(path: Path | None = None) -> JapmConfig:
    """Load the configuration, writing the default one first if it is missing.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If the file cannot be written, read or validated.
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        logger.info("Creating default config at %s", config_path)
        save_config(JapmConfig(), config_path)
    return load_config(config_path)


def _config_to_dict(config: JapmConfig) -> dict[str, object]:
    """Convert JapmConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset install_root is left out.
    """
    result: dict[str, object] = {
        "build_workers": config.build_workers,
        "fs_root": str(config.fs_root),
        "request_timeout": config.request_timeout,
    }
    if config.install_root is not None:
        result["install_root"] = str(config.install_root)
    # Tables must come after plain keys.
    result["remotes"] = dict(config.remotes)
    return result
