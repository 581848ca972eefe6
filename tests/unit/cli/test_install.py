"""Unit tests for the install command."""

from japm.cli.main import app
from typer.testing import CliRunner

from tests.helpers import CliEnv, make_local, make_remote

runner = CliRunner()


class TestInstallCommandHelp:
    """Tests for install command help."""

    def test_install_help_shows_options(self) -> None:
        """Install help shows all available options."""
        result = runner.invoke(app, ["install", "--help"])

        assert result.exit_code == 0
        assert "--reinstall" in result.stdout
        assert "--from-file" in result.stdout
        assert "--yes" in result.stdout
        assert "--dry-run" in result.stdout

    def test_install_requires_names(self) -> None:
        """At least one package name is required."""
        result = runner.invoke(app, ["install"])
        assert result.exit_code == 2


class TestInstallCommand:
    """Tests for install execution."""

    def test_installs_with_dependencies(self, cli_env: CliEnv) -> None:
        """--yes builds and records the package and its dependency."""
        cli_env.finder.packages.update(
            {
                "lib": make_remote("lib", install=["touch lib.so"]),
                "app": make_remote("app", dependencies=["lib"], install=["touch app"]),
            }
        )

        result = runner.invoke(app, ["install", "--yes", "app"])

        assert result.exit_code == 0, result.output
        assert [p.name for p in cli_env.store.get_all()] == ["lib", "app"]
        assert (cli_env.fs_root / "app").exists()
        assert "completed successfully" in result.stdout

    def test_dry_run_changes_nothing(self, cli_env: CliEnv) -> None:
        """--dry-run shows the plan without executing it."""
        cli_env.finder.packages["app"] = make_remote("app", install=["touch app"])

        result = runner.invoke(app, ["install", "--dry-run", "app"])

        assert result.exit_code == 0
        assert "Dry Run" in result.stdout
        assert "app" in result.stdout
        assert cli_env.store.get_all() == []
        assert not (cli_env.fs_root / "app").exists()

    def test_declined_confirmation(self, cli_env: CliEnv) -> None:
        """Answering no aborts without changes."""
        cli_env.finder.packages["app"] = make_remote("app")

        result = runner.invoke(app, ["install", "app"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.stdout
        assert cli_env.store.get_all() == []

    def test_accepted_confirmation(self, cli_env: CliEnv) -> None:
        """Answering yes executes the plan."""
        cli_env.finder.packages["app"] = make_remote("app")

        result = runner.invoke(app, ["install", "app"], input="y\n")

        assert result.exit_code == 0
        assert cli_env.store.get("app") is not None

    def test_already_installed(self, cli_env: CliEnv) -> None:
        """Installed packages are left alone."""
        cli_env.store.add(make_remote("app"))

        result = runner.invoke(app, ["install", "app"])

        assert result.exit_code == 0
        assert "Nothing to do" in result.stdout
        assert cli_env.finder.calls == []

    def test_reinstall(self, cli_env: CliEnv) -> None:
        """--reinstall removes and installs again."""
        cli_env.store.add(make_remote("app"))
        cli_env.finder.packages["app"] = make_remote("app")

        result = runner.invoke(app, ["install", "--reinstall", "--dry-run", "app"])

        assert result.exit_code == 0
        assert "1 to install" in result.stdout
        assert "1 to remove" in result.stdout

    def test_unknown_package(self, cli_env: CliEnv) -> None:
        """Unknown packages fail resolution."""
        result = runner.invoke(app, ["install", "--yes", "ghost"])

        assert result.exit_code == 1
        assert "Error: Resolve: Package ghost not found" in result.stderr

    def test_build_failure(self, cli_env: CliEnv) -> None:
        """A failing build is reported and nothing is recorded."""
        cli_env.finder.packages["app"] = make_remote("app", install=["false"])

        result = runner.invoke(app, ["install", "--yes", "app"])

        assert result.exit_code == 1
        assert "Error: Build:" in result.stderr
        assert cli_env.store.get_all() == []

    def test_from_file_uses_file_finder(self, cli_env: CliEnv) -> None:
        """--from-file asks for a file-based finder."""
        runner.invoke(app, ["install", "--from-file", "--dry-run", "./pkg.json"])

        assert cli_env.create_finder.call_args.args[1] is True

    def test_installed_dependency_is_skipped(self, cli_env: CliEnv) -> None:
        """Only the missing package is installed."""
        cli_env.store.add(make_remote("lib"))
        cli_env.finder.packages["app"] = make_remote("app", dependencies=["lib"])

        result = runner.invoke(app, ["install", "--yes", "app"])

        assert result.exit_code == 0
        assert cli_env.store.get("app") is not None
        assert cli_env.store.get("lib") == make_local("lib")
