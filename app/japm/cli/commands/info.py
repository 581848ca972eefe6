"""Info command implementation.

Shows installed or remote package details.
"""

from typing import Annotated

import typer

from japm.cli.display import create_info_table
from japm.cli.types import create_finder, fail, load_cli_config, open_store
from japm.core.errors import PackageLookupError, StoreError
from japm.models.package import LocalPackage, RemotePackage
from japm.utils.formatting import console, print_error


def show_info(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Packages to describe."),
    ],
    from_file: Annotated[
        bool,
        typer.Option(
            "--from-file",
            "-f",
            help="Treat names as paths to local package documents.",
        ),
    ] = False,
) -> None:
    """Show package details.

    Installed packages are described from the local database, other
    packages from the remotes.

    Examples:
        japm info neofetch
    """
    config = load_cli_config(ctx)
    try:
        store = open_store()
    except StoreError as e:
        fail("Setup", e)
    finder = create_finder(config, from_file)

    found: list[LocalPackage | RemotePackage] = []
    missing: list[str] = []
    try:
        for name in names:
            package: LocalPackage | RemotePackage | None = store.get(name)
            if package is None:
                package = finder.find(name)
            if package is None:
                missing.append(name)
            else:
                found.append(package)
    except (PackageLookupError, StoreError) as e:
        fail("Lookup", e)
    finally:
        finder.close()
        store.close()

    if found:
        console.print(create_info_table(found))

    for name in missing:
        print_error(f"Package {name} not found")

    if missing:
        raise typer.Exit(code=1)
