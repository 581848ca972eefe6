"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, and the
process-wide logging setup of the CLI.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme

# Color scheme shared by every console
THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "#69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "added": "#c1ff62",
        "removed": "#f53263",
        "bold_header": "bold #69B9A1",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())  # type: ignore[arg-type]
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())  # type: ignore[arg-type]


def create_package_table(title: str = "Packages") -> Table:
    """Create a pre-configured table for displaying packages.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for package display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("Status", justify="center")
    table.add_column("Dependencies", style="info")
    table.add_column("Description", style="text", overflow="ellipsis")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def setup_logging(verbose: bool = False) -> None:
    """Route log records to the error console.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    handler = RichHandler(console=err_console, show_path=False, show_time=verbose)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
