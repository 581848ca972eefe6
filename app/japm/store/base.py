"""Abstract base class for package stores.

This module defines the PackageStore interface used by the resolver to
read installed state and by the commit step to persist it.
"""

from abc import ABC, abstractmethod

from japm.models.package import LocalPackage, RemotePackage


class PackageStore(ABC):
    """Keyed record store of locally installed packages.

    A name identifies at most one installed package. Implementations
    raise :class:`~japm.core.errors.StoreError` on failure and are used
    from a single thread.

    Example:
        >>> store = InMemoryPackageStore()
        >>> store.add(remote_package)
        >>> store.get(remote_package.name).version
        '1.0.0'
    """

    @abstractmethod
    def add(self, package: RemotePackage) -> None:
        """Record a package as installed.

        Args:
            package: The (build-enriched) package to persist.

        Raises:
            StoreError: If a package with the same name is already recorded
                or the record cannot be written.
        """

    @abstractmethod
    def remove(self, name: str) -> None:
        """Delete the record of an installed package.

        Args:
            name: Name of the package to forget.

        Raises:
            StoreError: If the package is not recorded or cannot be deleted.
        """

    @abstractmethod
    def get(self, name: str) -> LocalPackage | None:
        """Return the installed record for ``name``, or None if absent.

        Raises:
            StoreError: If the store cannot be read.
        """

    @abstractmethod
    def get_all(self) -> list[LocalPackage]:
        """Return every installed package record.

        Raises:
            StoreError: If the store cannot be read.
        """

    def get_dependents(self, name: str) -> list[LocalPackage]:
        """Return installed packages that list ``name`` as a direct dependency.

        Raises:
            StoreError: If the store cannot be read.
        """
        return [package for package in self.get_all() if package.depends_on(name)]

    def close(self) -> None:
        """Release resources held by the store."""
