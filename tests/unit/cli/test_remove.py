"""Unit tests for the remove command."""

from japm.cli.main import app
from typer.testing import CliRunner

from tests.helpers import CliEnv, make_remote

runner = CliRunner()


class TestRemoveCommand:
    """Tests for remove execution."""

    def test_removes_package_and_files(self, cli_env: CliEnv) -> None:
        """A removed package loses its files and its record."""
        (cli_env.fs_root / "app").touch()
        package = make_remote("app")
        package.package_files = [str(cli_env.fs_root / "app")]
        cli_env.store.add(package)

        result = runner.invoke(app, ["remove", "--yes", "app"])

        assert result.exit_code == 0, result.output
        assert cli_env.store.get("app") is None
        assert not (cli_env.fs_root / "app").exists()

    def test_dependency_break(self, cli_env: CliEnv) -> None:
        """Removing a needed package without --recursive fails."""
        cli_env.store.add(make_remote("lib"))
        cli_env.store.add(make_remote("app", dependencies=["lib"]))

        result = runner.invoke(app, ["remove", "--yes", "lib"])

        assert result.exit_code == 1
        assert "Error: Resolve:" in result.stderr
        assert cli_env.store.get("lib") is not None

    def test_recursive(self, cli_env: CliEnv) -> None:
        """--recursive removes dependents too."""
        cli_env.store.add(make_remote("lib"))
        cli_env.store.add(make_remote("app", dependencies=["lib"]))

        result = runner.invoke(app, ["remove", "--recursive", "--yes", "lib"])

        assert result.exit_code == 0
        assert cli_env.store.get_all() == []

    def test_not_installed(self, cli_env: CliEnv) -> None:
        """Removing an unknown package fails."""
        result = runner.invoke(app, ["remove", "--yes", "ghost"])

        assert result.exit_code == 1
        assert "Package ghost not installed" in result.stderr

    def test_dry_run(self, cli_env: CliEnv) -> None:
        """--dry-run lists the removal without executing it."""
        cli_env.store.add(make_remote("app"))

        result = runner.invoke(app, ["remove", "--dry-run", "app"])

        assert result.exit_code == 0
        assert "1 to remove" in result.stdout
        assert cli_env.store.get("app") is not None
