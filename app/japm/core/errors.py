"""Error taxonomy for japm.

Resolution errors abort a batch before anything executes, build errors
abort the build phase before any commit, and commit errors stop the
remaining commits. Nothing is rolled back.

Errors compare equal by type and attributes so they can be asserted on
directly in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from japm.models.action import Action


class JapmError(Exception):
    """Base exception for all japm errors."""

    def _fields(self) -> tuple[Any, ...]:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


# =============================================================================
# Collaborator errors
# =============================================================================


class PackageLookupError(JapmError):
    """Raised when a package lookup fails for a reason other than not-found."""


class StoreError(JapmError):
    """Raised when the package store cannot complete an operation."""


class ConfigError(JapmError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content does not match the schema."""


# =============================================================================
# Resolution errors
# =============================================================================


class ResolveError(JapmError):
    """Base exception for errors raised while computing actions."""


class PackageNotFoundError(ResolveError):
    """Raised when no lookup source knows the requested package."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Package {name} not found")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class PackageNotInstalledError(ResolveError):
    """Raised when removing a package that has no local record."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Package {name} not installed")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class VersionParseError(ResolveError):
    """Raised when a version string is not a valid version.

    Carries the parser's message as a plain string.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def _fields(self) -> tuple[Any, ...]:
        return (self.message,)


class DependencyBreakError(ResolveError):
    """Raised when a non-recursive removal would orphan dependents."""

    def __init__(self, name: str, dependents: list[str]) -> None:
        super().__init__(
            f"Removing package {name} breaks dependencies {dependents}. "
            "Pass --recursive to also remove them"
        )
        self.name = name
        self.dependents = list(dependents)

    def _fields(self) -> tuple[Any, ...]:
        return (self.name, tuple(self.dependents))


class DependencyCycleError(ResolveError):
    """Raised when a package transitively depends on itself."""

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(f"Dependency cycle detected: {' -> '.join(cycle)}")
        self.cycle = list(cycle)

    def _fields(self) -> tuple[Any, ...]:
        return (tuple(self.cycle),)


# =============================================================================
# Build errors
# =============================================================================


class BuildError(JapmError):
    """Base exception for failures while building an action."""


class InvalidCommandError(BuildError):
    """Raised when a command string contains no tokens."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Command {command!r} cannot contain 0 arguments")
        self.command = command

    def _fields(self) -> tuple[Any, ...]:
        return (self.command,)


class CommandParseError(BuildError):
    """Raised when a command string cannot be shell-tokenized."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Could not parse command {command!r}: {reason}")
        self.command = command
        self.reason = reason

    def _fields(self) -> tuple[Any, ...]:
        return (self.command, self.reason)


class CommandFailError(BuildError):
    """Raised when a command exits non-zero or without an exit status.

    Attributes:
        command: The command string as written in the package.
        exit_code: Exit code, or None if the process had none.
        stderr: Captured standard error.
    """

    def __init__(self, command: str, exit_code: int | None, stderr: str) -> None:
        if exit_code is None:
            message = f"Command {command!r} failed without exit code"
        else:
            message = f"Command {command!r} failed with exit code {exit_code}"
        if stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr

    def _fields(self) -> tuple[Any, ...]:
        return (self.command, self.exit_code, self.stderr)


class BuildIOError(BuildError):
    """Raised when staging, moving or deleting files fails."""


class ActionBuildError(BuildError):
    """Raised by the pipeline when building a specific action failed.

    Attributes:
        action: The action whose build failed.
        cause: The underlying build error.
    """

    def __init__(self, action: Action, cause: BuildError) -> None:
        super().__init__(f"Could not build action {action}: {cause}")
        self.action = action
        self.cause = cause

    def _fields(self) -> tuple[Any, ...]:
        return (self.action, self.cause)


# =============================================================================
# Commit errors
# =============================================================================


class CommitError(JapmError):
    """Raised when an action cannot be committed to the store.

    Attributes:
        action: The action whose commit failed.
        cause: The store error that caused the failure.
    """

    def __init__(self, action: Action, cause: StoreError) -> None:
        super().__init__(f"Could not commit action {action}: {cause}")
        self.action = action
        self.cause = cause

    def _fields(self) -> tuple[Any, ...]:
        return (self.action, self.cause)
