"""Unit tests for the main CLI application."""

from pathlib import Path
from unittest.mock import patch

from japm import __version__
from japm.cli.main import app
from japm.core.errors import ConfigParseError
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])
        assert "Usage" in result.output

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help_lists_commands(self) -> None:
        """Every command is registered."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("install", "remove", "update", "info"):
            assert command in result.stdout

    def test_config_error(self) -> None:
        """A broken config file is reported as a config error."""
        with patch(
            "japm.cli.types.ensure_default_config",
            side_effect=ConfigParseError("Invalid TOML syntax"),
        ):
            result = runner.invoke(app, ["install", "hello"])

        assert result.exit_code == 1
        assert "Error: Config: Invalid TOML syntax" in result.stderr

    def test_config_option_is_passed(self, tmp_path: Path) -> None:
        """--config selects the configuration file."""
        path = tmp_path / "custom.toml"
        with patch(
            "japm.cli.types.ensure_default_config",
            side_effect=ConfigParseError("stop here"),
        ) as mock_config:
            runner.invoke(app, ["--config", str(path), "remove", "hello"])

        mock_config.assert_called_once_with(path)
