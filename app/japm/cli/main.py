"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from japm import __version__
from japm.cli.commands import info, install, remove, update
from japm.utils.formatting import setup_logging

# Create main Typer app
app = typer.Typer(
    name="japm",
    help="Just another package manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"japm version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to the configuration file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """japm - just another package manager.

    Installs, removes and updates packages described by JSON documents
    on ranked remotes, resolving dependencies automatically.
    """
    setup_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config


# Register commands
app.command("install")(install.install_packages)
app.command("remove")(remove.remove_packages)
app.command("update")(update.update_packages)
app.command("info")(info.show_info)


if __name__ == "__main__":
    app()
