"""Shared types and utilities for CLI commands.

This module provides the helpers every transaction command goes through:
loading the configuration, opening the store and finder, showing the
planned actions and running them with a progress bar.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn

import typer
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from japm.cli.display import create_actions_table, print_actions_summary
from japm.core import progress as core_progress
from japm.core.config import JapmConfig, ensure_default_config
from japm.core.errors import (
    ActionBuildError,
    CommitError,
    ConfigError,
    JapmError,
    PackageLookupError,
    ResolveError,
    StoreError,
)
from japm.core.paths import get_database_path
from japm.core.pipeline import execute_actions
from japm.core.progress import ProgressCategory, ProgressTracker
from japm.lookup.base import PackageFinder
from japm.lookup.file import FilePackageFinder
from japm.lookup.remote import RemotePackageFinder
from japm.models.action import Action
from japm.store.base import PackageStore
from japm.store.sqlite import SqlitePackageStore
from japm.utils.formatting import console, err_console, print_error, print_info, print_success

Resolver = Callable[[core_progress.Progress], list[Action]]


def fail(phase: str, error: JapmError | str) -> NoReturn:
    """Print ``Error: <phase>: <message>`` and exit with code 1."""
    print_error(f"{phase}: {error}")
    raise typer.Exit(code=1)


def load_cli_config(ctx: typer.Context) -> JapmConfig:
    """Load the configuration selected by the global ``--config`` option.

    The default configuration is written on first use.
    """
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    try:
        return ensure_default_config(config_path)
    except ConfigError as e:
        fail("Config", e)


def open_store() -> PackageStore:
    """Open the installed package database."""
    return SqlitePackageStore(get_database_path())


def create_finder(config: JapmConfig, from_file: bool = False) -> PackageFinder:
    """Create the package finder for this invocation.

    Args:
        config: Loaded configuration.
        from_file: Treat package names as paths to local documents.
    """
    if from_file:
        return FilePackageFinder()
    return RemotePackageFinder(config.remote_urls, timeout=config.request_timeout)


@contextmanager
def progress_bar(tracker: ProgressTracker, description: str) -> Iterator[None]:
    """Render ``tracker``'s overall percentage while the block runs."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=err_console,
        transient=True,
    ) as bar:
        task = bar.add_task(description, total=100.0, completed=tracker.percentage)
        tracker.listener = lambda percentage: bar.update(task, completed=percentage)
        try:
            yield
        finally:
            tracker.listener = None


def confirm_actions(action_count: int) -> bool:
    """Prompt user to confirm action execution.

    Args:
        action_count: Number of actions to be executed.

    Returns:
        True if user confirms, False otherwise.
    """
    return typer.confirm(
        f"\nProceed with {action_count} action(s)?",
        default=False,
    )


class Transaction:
    """Configuration, store and finder shared by one CLI command.

    Attributes:
        config: Loaded configuration.
        store: Installed package database.
        finder: Package lookup.
        tracker: Progress across the whole command.
    """

    def __init__(self, config: JapmConfig, store: PackageStore, finder: PackageFinder) -> None:
        self.config = config
        self.store = store
        self.finder = finder
        self.tracker = ProgressTracker()

    def resolve(self, resolver: Resolver) -> list[Action]:
        """Run a resolver with progress, exiting on resolution errors."""
        try:
            with progress_bar(self.tracker, "Resolving packages"):
                return resolver(self.tracker)
        except (ResolveError, PackageLookupError, StoreError) as e:
            fail("Resolve", e)

    def execute(self, actions: list[Action], *, yes: bool, dry_run: bool) -> None:
        """Show the planned actions, confirm and execute them.

        Args:
            actions: Resolved actions.
            yes: Skip the confirmation prompt.
            dry_run: Only show the planned actions.
        """
        if not actions:
            print_success("Nothing to do.")
            return

        console.print(create_actions_table(actions, dry_run))
        print_actions_summary(actions)

        if dry_run:
            print_info("\nDry-run mode: No changes were made.")
            return

        if not yes and not confirm_actions(len(actions)):
            print_info("Aborted.")
            raise typer.Exit(code=0)

        try:
            with progress_bar(self.tracker, "Executing actions"):
                execute_actions(
                    actions,
                    self.store,
                    install_root=self.config.effective_install_root,
                    fs_root=self.config.fs_root,
                    workers=self.config.build_workers,
                    progress=self.tracker,
                )
        except ActionBuildError as e:
            fail("Build", e)
        except CommitError as e:
            fail("Commit", e)

        print_success(f"All {len(actions)} action(s) completed successfully.")


@contextmanager
def open_transaction(ctx: typer.Context, *, from_file: bool = False) -> Iterator[Transaction]:
    """Set up a transaction and release its resources afterwards."""
    config = load_cli_config(ctx)
    try:
        store = open_store()
    except StoreError as e:
        fail("Setup", e)

    finder = create_finder(config, from_file)
    transaction = Transaction(config, store, finder)
    transaction.tracker.set_completed(ProgressCategory.SETUP)
    try:
        yield transaction
    finally:
        finder.close()
        store.close()
