"""Build and commit steps for a single action.

Building performs the filesystem and script work of an action. Committing
records its outcome in the package store. The pipeline builds every action
before it commits any.
"""

import logging
import shutil
import threading
from contextlib import nullcontext
from pathlib import Path

from japm.core.errors import BuildIOError, CommitError, StoreError
from japm.models.action import Action
from japm.models.package import LocalPackage, RemotePackage
from japm.store.base import PackageStore
from japm.utils.shell import run_package_command

logger = logging.getLogger(__name__)


# =============================================================================
# Build
# =============================================================================


def build_action(
    action: Action,
    install_root: Path,
    fs_root: Path = Path("/"),
    tree_lock: "threading.Lock | None" = None,
) -> None:
    """Build an action.

    Installs stage the package under ``install_root`` and move the new
    entries onto ``fs_root``. On success the package's ``package_files``
    lists every real path that was introduced.

    Removals delete the paths listed in ``package_files``. Their scripts
    run with ``fs_root`` as working directory.

    Nothing is rolled back on failure.

    Args:
        action: Action to build.
        install_root: Directory holding per-package staging directories.
        fs_root: Real filesystem root.
        tree_lock: Lock held while new paths are found and moved onto
            ``fs_root``. Builds running concurrently must share one.

    Raises:
        InvalidCommandError: If a script command has no tokens.
        CommandParseError: If a script command cannot be tokenized.
        CommandFailError: If a script command fails.
        BuildIOError: If staging, moving or deleting files fails.
    """
    logger.info("Building action %s", action)
    match action.package:
        case RemotePackage() as package:
            _build_install(package, install_root, fs_root, tree_lock)
        case LocalPackage() as package:
            _build_remove(package, fs_root)
    logger.debug("Built action %s", action)


def _build_install(
    package: RemotePackage,
    install_root: Path,
    fs_root: Path,
    tree_lock: "threading.Lock | None",
) -> None:
    staging = install_root / package.name
    _prepare_staging(staging)

    _run_commands(package.pre_install, staging)
    _run_commands(package.install, staging)

    with tree_lock or nullcontext():
        try:
            moves = collect_new_paths(staging, fs_root)
        except OSError as e:
            raise BuildIOError(f"Could not scan staging directory {staging}: {e}") from e

        for source, destination in moves:
            _move_new_path(source, destination)

    package.package_files = [str(destination) for _, destination in moves]

    _run_commands(package.post_install, staging)


def _move_new_path(source: Path, destination: Path) -> None:
    """Move ``source`` to ``destination``, which must not exist.

    ``shutil.move`` into an existing directory nests the source inside it,
    so an existing destination is an error rather than a merge.
    """
    if destination.exists() or destination.is_symlink():
        msg = f"Could not move {source} to {destination}: destination already exists"
        raise BuildIOError(msg)

    logger.debug("Moving %s to %s", source, destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(source, destination)
    except OSError as e:
        raise BuildIOError(f"Could not move {source} to {destination}: {e}") from e


def _build_remove(package: LocalPackage, fs_root: Path) -> None:
    _run_commands(package.pre_remove, fs_root)

    for file in package.package_files:
        path = Path(file)
        logger.debug("Deleting %s", path)
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            elif path.exists() or path.is_symlink():
                path.unlink()
            else:
                logger.warning("Package file %s of %s is already gone", path, package.name)
        except OSError as e:
            raise BuildIOError(f"Could not delete {path}: {e}") from e

    _run_commands(package.post_remove, fs_root)


def _prepare_staging(staging: Path) -> None:
    """Recreate an empty staging directory."""
    try:
        if staging.exists():
            shutil.rmtree(staging)
        staging.mkdir(parents=True)
    except OSError as e:
        raise BuildIOError(f"Could not prepare staging directory {staging}: {e}") from e


def _run_commands(commands: list[str] | tuple[str, ...], cwd: Path) -> None:
    for command in commands:
        run_package_command(command, cwd)


def collect_new_paths(staging: Path, fs_root: Path) -> list[tuple[Path, Path]]:
    """Find staged entries that do not exist yet on the real filesystem.

    Each staged entry is translated onto ``fs_root`` by its path relative
    to ``staging``. An entry whose translated path is missing is recorded
    and not descended into: its whole subtree moves as a unit. An existing
    directory is descended into to find deeper new entries.

    Args:
        staging: Staging directory of the package.
        fs_root: Real filesystem root.

    Returns:
        (staged path, real path) pairs in sorted traversal order.

    Raises:
        OSError: If a directory cannot be listed.
    """
    pairs: list[tuple[Path, Path]] = []
    _collect(staging, staging, fs_root, pairs)
    return pairs


def _collect(directory: Path, staging: Path, fs_root: Path, pairs: list[tuple[Path, Path]]) -> None:
    for entry in sorted(directory.iterdir()):
        real = fs_root / entry.relative_to(staging)
        if not real.exists() and not real.is_symlink():
            pairs.append((entry, real))
        elif entry.is_dir() and not entry.is_symlink() and real.is_dir():
            _collect(entry, staging, fs_root, pairs)
        else:
            logger.debug("Skipping %s, %s already exists", entry, real)


# =============================================================================
# Commit
# =============================================================================


def commit_action(action: Action, store: PackageStore) -> None:
    """Record a built action in the package store.

    Args:
        action: Successfully built action.
        store: Store to update.

    Raises:
        CommitError: If the store rejects the change.
    """
    logger.info("Committing action %s", action)
    try:
        match action.package:
            case RemotePackage() as package:
                store.add(package)
            case LocalPackage():
                store.remove(action.name)
    except StoreError as e:
        raise CommitError(action, e) from e
