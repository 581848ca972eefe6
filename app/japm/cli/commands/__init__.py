"""CLI commands for japm.

This package contains all subcommand implementations.
"""

from japm.cli.commands import info, install, remove, update

__all__ = ["info", "install", "remove", "update"]
