"""In-memory package store."""

from japm.core.errors import StoreError
from japm.models.package import LocalPackage, RemotePackage
from japm.store.base import PackageStore


class InMemoryPackageStore(PackageStore):
    """Package store kept in a dict, in insertion order.

    Used for dry runs and tests.
    """

    def __init__(self, packages: list[LocalPackage] | None = None) -> None:
        self._packages: dict[str, LocalPackage] = {}
        for package in packages or []:
            self._packages[package.name] = package

    def add(self, package: RemotePackage) -> None:
        if package.name in self._packages:
            msg = f"Package {package.name} is already recorded"
            raise StoreError(msg)
        self._packages[package.name] = package.to_local()

    def remove(self, name: str) -> None:
        if self._packages.pop(name, None) is None:
            msg = f"Package {name} is not recorded"
            raise StoreError(msg)

    def get(self, name: str) -> LocalPackage | None:
        return self._packages.get(name)

    def get_all(self) -> list[LocalPackage]:
        return list(self._packages.values())
