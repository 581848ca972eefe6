"""Install command implementation.

Installs packages and every dependency they need.
"""

from typing import Annotated

import typer

from japm.cli.types import open_transaction
from japm.core.resolver import ReinstallPolicy, install_actions


def install_packages(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Packages to install."),
    ],
    from_file: Annotated[
        bool,
        typer.Option(
            "--from-file",
            "-f",
            help="Treat names as paths to local package documents.",
        ),
    ] = False,
    reinstall: Annotated[
        bool,
        typer.Option(
            "--reinstall",
            "-r",
            help="Reinstall packages that are already installed.",
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
    """Install packages and their dependencies.

    Already installed packages are left alone unless --reinstall is given.

    Examples:
        japm install neofetch
        japm install --reinstall neofetch
        japm install --from-file ./package.json
    """
    policy = ReinstallPolicy.FORCE_REINSTALL if reinstall else ReinstallPolicy.IGNORE

    with open_transaction(ctx, from_file=from_file) as transaction:
        actions = transaction.resolve(
            lambda progress: install_actions(
                names, transaction.finder, policy, transaction.store, progress
            )
        )
        transaction.execute(actions, yes=yes, dry_run=dry_run)
