"""Utility modules for japm.

This module exports commonly used utility functions.
"""

from japm.utils.formatting import (
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    setup_logging,
)
from japm.utils.shell import CommandResult, run_command, run_package_command, split_command

__all__ = [
    "CommandResult",
    "console",
    "create_package_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "run_command",
    "run_package_command",
    "setup_logging",
    "split_command",
]
