"""Action models for package transactions.

This module defines the unit of work produced by the resolver: either
installing a remote package or removing a locally installed one.
"""

from dataclasses import dataclass
from enum import Enum

from japm.models.package import LocalPackage, PackageIdentity, RemotePackage


class ActionType(Enum):
    """Type of package action.

    Attributes:
        INSTALL: Build and record a remote package.
        REMOVE: Delete a local package's files and record.
    """

    INSTALL = "install"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True, eq=False)
class Action:
    """A single install or remove operation on one package.

    The action itself is immutable. For installs, the build step may fill
    in ``package.package_files`` before the action reaches commit.

    Two actions are equal when they have the same type, the same package
    identity and the same dependency list. Scripts and package files do
    not take part in equality, so actions stay hashable while a build
    enriches them.

    Attributes:
        action_type: INSTALL or REMOVE.
        package: RemotePackage for installs, LocalPackage for removals.
    """

    action_type: ActionType
    package: RemotePackage | LocalPackage

    def __post_init__(self) -> None:
        """Validate that the package kind matches the action type."""
        if self.action_type == ActionType.INSTALL and not isinstance(self.package, RemotePackage):
            msg = "Install actions require a RemotePackage"
            raise TypeError(msg)
        if self.action_type == ActionType.REMOVE and not isinstance(self.package, LocalPackage):
            msg = "Remove actions require a LocalPackage"
            raise TypeError(msg)

    @property
    def key(self) -> tuple[ActionType, PackageIdentity, tuple[str, ...]]:
        """Identity used for equality and deduplication."""
        return (self.action_type, self.package.identity, tuple(self.package.dependencies))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.action_type.value.capitalize()} {self.package.identity}"

    @property
    def name(self) -> str:
        """Name of the package this action operates on."""
        return self.package.name

    @property
    def is_install(self) -> bool:
        """Check if this is an install action."""
        return self.action_type == ActionType.INSTALL

    @property
    def is_remove(self) -> bool:
        """Check if this is a remove action."""
        return self.action_type == ActionType.REMOVE


def create_install_action(package: RemotePackage) -> Action:
    """Create an install action for a remote package."""
    return Action(action_type=ActionType.INSTALL, package=package)


def create_remove_action(package: LocalPackage) -> Action:
    """Create a remove action for an installed package."""
    return Action(action_type=ActionType.REMOVE, package=package)
