"""Dependency resolution.

Turns requested package names and a reinstall policy into an ordered,
deduplicated list of actions:

- installs list every dependency's Install before its dependent's;
- removals list every dependent's Remove before the package it depends on.

Resolution is synchronous and fails fast: the first error aborts the
whole batch and no action list is returned.
"""

import logging
from collections.abc import Sequence
from enum import Enum

import semver

from japm.core.errors import (
    DependencyBreakError,
    DependencyCycleError,
    PackageNotFoundError,
    PackageNotInstalledError,
    VersionParseError,
)
from japm.core.ordered_set import OrderedSet
from japm.core.progress import NullProgress, Progress, ProgressCategory
from japm.lookup.base import PackageFinder
from japm.models.action import Action, create_install_action, create_remove_action
from japm.models.package import RemotePackage
from japm.store.base import PackageStore

logger = logging.getLogger(__name__)


class ReinstallPolicy(Enum):
    """What to do with a requested package that is already installed.

    Attributes:
        IGNORE: Leave it alone; its dependencies are not visited.
        UPDATE: Reinstall it only if the remote version is newer.
        FORCE_REINSTALL: Always remove and install it again.
    """

    IGNORE = "ignore"
    UPDATE = "update"
    FORCE_REINSTALL = "force_reinstall"


# =============================================================================
# Public API
# =============================================================================


def install_actions(
    names: Sequence[str],
    finder: PackageFinder,
    policy: ReinstallPolicy,
    store: PackageStore,
    progress: Progress | None = None,
) -> list[Action]:
    """Compute the actions installing ``names`` and their dependencies.

    The policy applies to every package visited, dependencies included.

    Args:
        names: Requested package names, in order.
        finder: Lookup used to fetch remote descriptions.
        policy: Behavior for packages that are already installed.
        store: Installed package records.
        progress: Optional progress receiver.

    Returns:
        Ordered, deduplicated actions.

    Raises:
        PackageNotFoundError: If a package or dependency is unknown.
        VersionParseError: If an UPDATE comparison meets an invalid version.
        DependencyCycleError: If a package transitively depends on itself.
        PackageLookupError: If the lookup fails.
        StoreError: If the store cannot be read.
    """
    progress = progress or NullProgress()
    progress.increment_target(ProgressCategory.PACKAGES, len(names))

    actions: OrderedSet[Action] = OrderedSet()
    for name in names:
        actions.extend(_install_package(name, finder, policy, store, chain=()))
        progress.increment_completed(ProgressCategory.PACKAGES)

    return actions.to_list()


def remove_actions(
    names: Sequence[str],
    recursive: bool,
    store: PackageStore,
    progress: Progress | None = None,
) -> list[Action]:
    """Compute the actions removing ``names``.

    Args:
        names: Requested package names, in order.
        recursive: Also remove every package that depends on a requested one.
        store: Installed package records.
        progress: Optional progress receiver.

    Returns:
        Ordered, deduplicated actions, dependents before their dependencies.

    Raises:
        PackageNotInstalledError: If a requested package is not installed.
        DependencyBreakError: If ``recursive`` is False and a requested
            package has direct dependents.
        DependencyCycleError: If installed packages depend on each other
            in a cycle.
        StoreError: If the store cannot be read.
    """
    progress = progress or NullProgress()
    progress.increment_target(ProgressCategory.PACKAGES, len(names))

    actions: OrderedSet[Action] = OrderedSet()
    for name in names:
        actions.extend(_remove_package(name, recursive, store, chain=()))
        progress.increment_completed(ProgressCategory.PACKAGES)

    return actions.to_list()


def update_actions(
    names: Sequence[str] | None,
    finder: PackageFinder,
    store: PackageStore,
    progress: Progress | None = None,
) -> list[Action]:
    """Compute the actions updating ``names``, or every installed package.

    Every transitive dependent of a requested package is also considered
    for update, so nothing is left built against a replaced dependency.

    Args:
        names: Package names to update. None means all installed packages.
        finder: Lookup used to fetch remote descriptions.
        store: Installed package records.
        progress: Optional progress receiver.

    Returns:
        Ordered, deduplicated actions.

    Raises:
        Same as :func:`install_actions`.
    """
    if names is None:
        names = [package.name for package in store.get_all()]
        logger.info("Updating all %d installed package(s)", len(names))

    actions: OrderedSet[Action] = OrderedSet()
    for name in names:
        candidates = OrderedSet(get_dependents(name, store))
        candidates.add(name)
        logger.debug("Update candidates for %s: %s", name, candidates.to_list())
        actions.extend(
            install_actions(candidates.to_list(), finder, ReinstallPolicy.UPDATE, store, progress)
        )

    return actions.to_list()


def get_dependents(name: str, store: PackageStore, depth: int | None = None) -> list[str]:
    """Walk reverse-dependency edges depth-first from ``name``.

    Args:
        name: Package whose dependents are collected.
        store: Installed package records.
        depth: Maximum number of edges to follow. 1 yields direct
            dependents only; None follows edges without limit.

    Returns:
        Names of dependents in discovery order, without duplicates and
        without ``name`` itself.

    Raises:
        StoreError: If the store cannot be read.
    """
    found: OrderedSet[str] = OrderedSet()
    _collect_dependents(name, store, depth, found, visited={name})
    return found.to_list()


# =============================================================================
# Recursion
# =============================================================================


def _collect_dependents(
    name: str,
    store: PackageStore,
    depth: int | None,
    found: OrderedSet[str],
    visited: set[str],
) -> None:
    if depth is not None and depth <= 0:
        return

    next_depth = None if depth is None else depth - 1
    for dependent in store.get_dependents(name):
        if dependent.name in visited:
            continue
        visited.add(dependent.name)
        found.add(dependent.name)
        _collect_dependents(dependent.name, store, next_depth, found, visited)


def _install_package(
    name: str,
    finder: PackageFinder,
    policy: ReinstallPolicy,
    store: PackageStore,
    chain: tuple[str, ...],
) -> OrderedSet[Action]:
    _check_cycle(name, chain)
    logger.debug("Generating install actions for package %s", name)

    actions: OrderedSet[Action] = OrderedSet()
    remote: RemotePackage | None = None

    local = store.get(name)
    if local is not None:
        if policy == ReinstallPolicy.FORCE_REINSTALL:
            logger.info("Package %s already installed, reinstalling...", name)
        elif policy == ReinstallPolicy.UPDATE:
            remote = _find_package(name, finder)
            if not _is_newer(remote.version, local.version):
                logger.info("Package %s is up to date (%s). Ignoring...", name, local.version)
                return actions
            logger.info("Updating package %s from %s to %s", name, local.version, remote.version)
        else:
            logger.info("Package %s already installed. Ignoring...", name)
            return actions
        # Reinstalls skip the dependency-break check: the package comes right back.
        actions.add(create_remove_action(local))

    if remote is None:
        remote = _find_package(name, finder)

    for dependency in remote.dependencies:
        actions.extend(_install_package(dependency, finder, policy, store, (*chain, name)))

    actions.add(create_install_action(remote))
    return actions


def _remove_package(
    name: str,
    recursive: bool,
    store: PackageStore,
    chain: tuple[str, ...],
) -> OrderedSet[Action]:
    _check_cycle(name, chain)
    logger.debug("Generating remove actions for package %s", name)

    local = store.get(name)
    if local is None:
        raise PackageNotInstalledError(name)

    actions: OrderedSet[Action] = OrderedSet()

    dependents = get_dependents(name, store, depth=1)
    if dependents:
        if not recursive:
            raise DependencyBreakError(name, dependents)
        logger.info("Found packages depending on %s, removing: %s", name, ", ".join(dependents))
        for dependent in dependents:
            actions.extend(_remove_package(dependent, recursive, store, (*chain, name)))

    actions.add(create_remove_action(local))
    return actions


def _check_cycle(name: str, chain: tuple[str, ...]) -> None:
    if name in chain:
        start = chain.index(name)
        raise DependencyCycleError([*chain[start:], name])


def _find_package(name: str, finder: PackageFinder) -> RemotePackage:
    package = finder.find(name)
    if package is None:
        raise PackageNotFoundError(name)
    logger.debug("Found remote package %s", package.identity)
    return package


def _is_newer(remote_version: str, local_version: str) -> bool:
    """Check if ``remote_version`` has higher semver precedence than ``local_version``.

    Build metadata does not take part in precedence.

    Raises:
        VersionParseError: If either version is not a full semantic version.
    """
    try:
        remote = semver.Version.parse(remote_version)
        local = semver.Version.parse(local_version)
    except ValueError as e:
        raise VersionParseError(str(e)) from e
    return remote.compare(local) > 0
