"""Shared Rich display functions for actions and packages.

Provides reusable table builders and summary printers used by the
install, remove, update and info commands.
"""

from rich.table import Table

from japm.models.action import Action
from japm.models.package import LocalPackage, RemotePackage
from japm.utils.formatting import console, create_package_table


def create_actions_table(actions: list[Action], dry_run: bool = False) -> Table:
    """Create a Rich table displaying planned actions in execution order.

    Args:
        actions: List of actions to display.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for action display.
    """
    title = "Planned Actions (Dry Run)" if dry_run else "Planned Actions"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Action", width=8, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("Version", style="muted")

    for index, action in enumerate(actions, start=1):
        if action.is_install:
            action_text = "[added]+install[/added]"
            pkg_style = "added"
        else:
            action_text = "[warning]-remove[/warning]"
            pkg_style = "warning"

        table.add_row(
            str(index),
            action_text,
            f"[{pkg_style}]{action.name}[/{pkg_style}]",
            action.package.version or "-",
        )

    return table


def print_actions_summary(actions: list[Action]) -> None:
    """Print a summary of planned actions.

    If no actions are provided, produces no output.

    Args:
        actions: List of planned actions.
    """
    install_count = sum(1 for a in actions if a.is_install)
    remove_count = sum(1 for a in actions if a.is_remove)

    parts: list[str] = []
    if install_count:
        parts.append(f"[added]{install_count} to install[/added]")
    if remove_count:
        parts.append(f"[warning]{remove_count} to remove[/warning]")

    if parts:
        summary = ", ".join(parts)
        console.print(f"\nSummary: {summary}")


def create_info_table(packages: list[LocalPackage | RemotePackage]) -> Table:
    """Create a Rich table describing packages.

    Installed packages are marked with a filled circle, packages only
    known remotely with an empty one.

    Args:
        packages: Installed records or remote descriptions.

    Returns:
        Rich Table with one row per package.
    """
    table = create_package_table("Package Info")

    for package in packages:
        if isinstance(package, LocalPackage):
            status = "[success]● installed[/]"
        else:
            status = "[muted]○ available[/]"

        table.add_row(
            f"[header]{package.name}[/]",
            package.version or "-",
            status,
            ", ".join(package.dependencies) or "-",
            package.identity.description or "-",
        )

    return table
