"""Update command implementation.

Reinstalls packages whose remote version is newer than the installed one.
"""

from typing import Annotated

import typer

from japm.cli.types import fail, open_transaction
from japm.core.resolver import update_actions


def update_packages(
    ctx: typer.Context,
    names: Annotated[
        list[str] | None,
        typer.Argument(help="Packages to update."),
    ] = None,
    system: Annotated[
        bool,
        typer.Option(
            "--system",
            "-s",
            help="Update every installed package.",
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
    """Update packages to their latest remote version.

    Packages depending on an updated package are considered for update too.

    Examples:
        japm update neofetch
        japm update --system
    """
    if system and names:
        fail("Update", "Pass names or --system, not both")
    if not system and not names:
        fail("Update", "Pass names or --system")

    requested = None if system else names

    with open_transaction(ctx) as transaction:
        actions = transaction.resolve(
            lambda progress: update_actions(
                requested, transaction.finder, transaction.store, progress
            )
        )
        transaction.execute(actions, yes=yes, dry_run=dry_run)
