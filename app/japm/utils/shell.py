"""Shell execution utilities.

Package scripts are plain command strings. They are tokenized with shell
quoting rules and executed directly, without a shell.
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from japm.core.errors import CommandFailError, CommandParseError, InvalidCommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def split_command(command: str) -> list[str]:
    """Tokenize a command string using shell quoting rules.

    Args:
        command: Command string as written in a package document.

    Returns:
        Program and arguments.

    Raises:
        CommandParseError: If the string cannot be tokenized.
        InvalidCommandError: If the string contains no tokens.
    """
    try:
        args = shlex.split(command)
    except ValueError as e:
        raise CommandParseError(command, str(e)) from e

    if not args:
        raise InvalidCommandError(command)
    return args


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
    cwd: Path | str | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        OSError: If the executable cannot be started.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_package_command(command: str, cwd: Path) -> CommandResult:
    """Run one package script command in ``cwd``.

    Standard output is logged at DEBUG, standard error at WARNING.

    Args:
        command: Command string from a package document.
        cwd: Working directory for the command.

    Returns:
        CommandResult of the successful command.

    Raises:
        CommandParseError: If the string cannot be tokenized.
        InvalidCommandError: If the string contains no tokens.
        CommandFailError: If the command cannot be started or exits non-zero.
    """
    args = split_command(command)
    logger.debug("Running %r in %s", command, cwd)

    try:
        result = run_command(args, cwd=cwd)
    except OSError as e:
        raise CommandFailError(command, None, str(e)) from e

    if result.stdout.strip():
        logger.debug("%s: %s", args[0], result.stdout.rstrip())
    if result.stderr.strip():
        logger.warning("%s: %s", args[0], result.stderr.rstrip())

    # Negative return codes mean the process was killed by a signal.
    if result.returncode < 0:
        raise CommandFailError(command, None, result.stderr)
    if not result.success:
        raise CommandFailError(command, result.returncode, result.stderr)

    return result
