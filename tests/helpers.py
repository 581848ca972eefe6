"""Test doubles and builders shared by the unit tests."""

from dataclasses import dataclass
from pathlib import Path
from unittest.mock import MagicMock

from japm.core.config import JapmConfig
from japm.lookup.base import PackageFinder
from japm.models.package import LocalPackage, PackageIdentity, RemotePackage
from japm.store.memory import InMemoryPackageStore


def make_remote(
    name: str,
    version: str = "1.0.0",
    dependencies: list[str] | None = None,
    **scripts: list[str],
) -> RemotePackage:
    """Build a RemotePackage with optional dependencies and scripts."""
    return RemotePackage(
        identity=PackageIdentity(name=name, version=version, description=f"{name} package"),
        dependencies=list(dependencies or []),
        **scripts,
    )


def make_local(
    name: str,
    version: str = "1.0.0",
    dependencies: list[str] | None = None,
    package_files: list[str] | None = None,
) -> LocalPackage:
    """Build a LocalPackage as it would be read from a store."""
    return LocalPackage(
        identity=PackageIdentity(name=name, version=version, description=f"{name} package"),
        dependencies=tuple(dependencies or []),
        package_files=tuple(package_files or []),
    )


class DictPackageFinder(PackageFinder):
    """Finder serving packages from a dict and recording every lookup."""

    def __init__(self, packages: list[RemotePackage]) -> None:
        self.packages = {package.name: package for package in packages}
        self.calls: list[str] = []

    def find(self, name: str) -> RemotePackage | None:
        self.calls.append(name)
        package = self.packages.get(name)
        if package is None:
            return None
        return RemotePackage(
            identity=package.identity,
            dependencies=list(package.dependencies),
            pre_install=list(package.pre_install),
            install=list(package.install),
            post_install=list(package.post_install),
            pre_remove=list(package.pre_remove),
            post_remove=list(package.post_remove),
        )


@dataclass
class CliEnv:
    """Collaborators the CLI runs against in tests."""

    config: JapmConfig
    store: InMemoryPackageStore
    finder: DictPackageFinder
    create_finder: MagicMock
    fs_root: Path
