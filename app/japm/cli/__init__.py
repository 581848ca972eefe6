"""CLI package for japm.

This package contains the Typer application and all subcommands.
"""

from japm.cli.main import app

__all__ = ["app"]
