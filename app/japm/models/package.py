"""Package record models.

This module defines the data structures describing a package as it is
known remotely (before installation) and as it is recorded locally
(after installation).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """Stable identity of a package.

    Attributes:
        name: Package name, the key used by the store and by lookups.
        version: Semantic version string.
        description: Human-readable description.
    """

    name: str
    version: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        """Validate identity data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.version:
            return f"{self.name}@{self.version}"
        return self.name


@dataclass(slots=True)
class RemotePackage:
    """A package description as returned by a package lookup.

    Instances are mutable only in ``package_files``, which starts empty and
    is filled in by a successful install build with every real path the
    install introduced.

    Attributes:
        identity: Name, version and description.
        dependencies: Names of packages this package depends on, in order.
        pre_install: Commands run in the staging directory before ``install``.
        install: Commands that populate the staging directory.
        post_install: Commands run after the staged files were moved.
        pre_remove: Commands run from ``/`` before the package files are deleted.
        post_remove: Commands run from ``/`` after the package files are deleted.
        package_files: Real paths introduced by the install build.
    """

    identity: PackageIdentity
    dependencies: list[str] = field(default_factory=list)
    pre_install: list[str] = field(default_factory=list)
    install: list[str] = field(default_factory=list)
    post_install: list[str] = field(default_factory=list)
    pre_remove: list[str] = field(default_factory=list)
    post_remove: list[str] = field(default_factory=list)
    package_files: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def version(self) -> str:
        return self.identity.version

    def to_local(self) -> "LocalPackage":
        """Project this package onto the record kept after installation.

        Install scripts are dropped; everything needed to remove the
        package later is kept.

        Returns:
            LocalPackage with the same identity, dependencies, remove
            scripts and package files.
        """
        return LocalPackage(
            identity=self.identity,
            dependencies=tuple(self.dependencies),
            pre_remove=tuple(self.pre_remove),
            post_remove=tuple(self.post_remove),
            package_files=tuple(self.package_files),
        )


@dataclass(frozen=True, slots=True)
class LocalPackage:
    """A package as persisted in the package store.

    Attributes:
        identity: Name, version and description.
        dependencies: Names of packages this package depends on.
        pre_remove: Commands run before the package files are deleted.
        post_remove: Commands run after the package files are deleted.
        package_files: Real paths owned by this package.
    """

    identity: PackageIdentity
    dependencies: tuple[str, ...] = ()
    pre_remove: tuple[str, ...] = ()
    post_remove: tuple[str, ...] = ()
    package_files: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def version(self) -> str:
        return self.identity.version

    def depends_on(self, name: str) -> bool:
        """Check if ``name`` is a direct dependency of this package."""
        return name in self.dependencies
