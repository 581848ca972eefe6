"""Abstract base class for package lookups.

This module defines the PackageFinder interface that resolves package
names into remote package descriptions.
"""

from abc import ABC, abstractmethod

from japm.models.package import RemotePackage


class PackageFinder(ABC):
    """Abstract base class for all package lookups.

    A finder turns a package name into a fresh RemotePackage. "Not found"
    is a normal result (``None``); any other failure raises
    :class:`~japm.core.errors.PackageLookupError`.

    Example:
        >>> finder = RemotePackageFinder(["https://example.org/repo/"])
        >>> package = finder.find("hello")
        >>> package.dependencies if package else None
        ['libhello']
    """

    @abstractmethod
    def find(self, name: str) -> RemotePackage | None:
        """Look up a package by name.

        Args:
            name: Package name (or path, for file lookups).

        Returns:
            A new RemotePackage, or None if no source knows the package.

        Raises:
            PackageLookupError: If a source could not be read or returned a
                malformed document.
        """

    def close(self) -> None:
        """Release resources held by the finder."""
