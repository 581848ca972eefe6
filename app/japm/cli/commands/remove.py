"""Remove command implementation.

Removes installed packages, optionally together with everything that
depends on them.
"""

from typing import Annotated

import typer

from japm.cli.types import open_transaction
from japm.core.resolver import remove_actions


def remove_packages(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Packages to remove."),
    ],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Also remove packages that depend on the given ones.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt and proceed.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be done without making changes.",
        ),
    ] = False,
) -> None:
    """Remove installed packages.

    Removing a package other packages depend on fails unless
    --recursive is given.

    Examples:
        japm remove neofetch
        japm remove --recursive libfoo
    """
    with open_transaction(ctx) as transaction:
        actions = transaction.resolve(
            lambda progress: remove_actions(names, recursive, transaction.store, progress)
        )
        transaction.execute(actions, yes=yes, dry_run=dry_run)
