"""Two-phase execution of resolved actions.

Every action is built first, in parallel on a bounded worker pool. Only
when all builds succeeded are the actions committed to the store, one by
one in list order.
"""

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from japm.core.actions import build_action, commit_action
from japm.core.errors import ActionBuildError, BuildError
from japm.core.progress import NullProgress, Progress, ProgressCategory
from japm.models.action import Action
from japm.store.base import PackageStore

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 3


class _LockedProgress(Progress):
    """Serializes calls into a progress receiver shared by build workers."""

    def __init__(self, inner: Progress) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    def increment_target(self, category: ProgressCategory, amount: int = 1) -> None:
        with self._lock:
            self._inner.increment_target(category, amount)

    def increment_completed(self, category: ProgressCategory, amount: int = 1) -> None:
        with self._lock:
            self._inner.increment_completed(category, amount)

    def set_completed(self, category: ProgressCategory) -> None:
        with self._lock:
            self._inner.set_completed(category)


class _BuildRun:
    """State shared by the build workers of one build phase.

    Holds the first build error. Once it is set, builds that have not
    started yet are skipped. Owns the lock that serializes moving new
    paths onto the real root. Also tracks, per package name, the pending
    Remove that an Install of the same name has to wait for.
    """

    def __init__(
        self,
        actions: Sequence[Action],
        install_root: Path,
        fs_root: Path,
        progress: Progress,
    ) -> None:
        self.actions = actions
        self.install_root = install_root
        self.fs_root = fs_root
        self.progress = progress

        self._lock = threading.Lock()
        self._error: ActionBuildError | None = None
        self.tree_lock = threading.Lock()

        self._done: dict[int, threading.Event] = {}
        self._waits_for: dict[int, threading.Event] = {}
        pending_removes: dict[str, threading.Event] = {}
        for index, action in enumerate(actions):
            if action.is_remove:
                event = threading.Event()
                self._done[index] = event
                pending_removes[action.name] = event
            elif action.name in pending_removes:
                self._waits_for[index] = pending_removes[action.name]

    @property
    def error(self) -> ActionBuildError | None:
        with self._lock:
            return self._error

    def build(self, index: int) -> None:
        action = self.actions[index]
        try:
            waits_for = self._waits_for.get(index)
            if waits_for is not None:
                waits_for.wait()

            if self.error is not None:
                logger.debug("Skipping build of %s after an earlier failure", action)
                return

            try:
                build_action(action, self.install_root, self.fs_root, self.tree_lock)
            except BuildError as e:
                logger.error("Could not build action %s: %s", action, e)
                with self._lock:
                    if self._error is None:
                        self._error = ActionBuildError(action, e)
                return

            self.progress.increment_completed(ProgressCategory.ACTIONS_BUILD)
        finally:
            done = self._done.get(index)
            if done is not None:
                done.set()


def build_actions(
    actions: Sequence[Action],
    *,
    install_root: Path,
    fs_root: Path = Path("/"),
    workers: int = DEFAULT_WORKERS,
    progress: Progress | None = None,
) -> None:
    """Build every action on a bounded worker pool.

    The first build failure wins: builds already running finish, builds
    not yet started are skipped, and the failure is raised once the pool
    has drained. An Install waits for any earlier Remove of the same
    package to finish building.

    Args:
        actions: Resolved actions, in order.
        install_root: Directory holding per-package staging directories.
        fs_root: Real filesystem root.
        workers: Maximum number of concurrent builds.
        progress: Optional progress receiver.

    Raises:
        ActionBuildError: Wrapping the first build failure.
    """
    progress = _LockedProgress(progress or NullProgress())
    progress.increment_target(ProgressCategory.ACTIONS_BUILD, len(actions))

    run = _BuildRun(actions, install_root, fs_root, progress)
    logger.info("Building %d action(s) with %d worker(s)", len(actions), workers)

    with ThreadPoolExecutor(max_workers=max(1, workers), thread_name_prefix="japm-build") as executor:
        futures = [executor.submit(run.build, index) for index in range(len(actions))]
        for future in futures:
            future.result()

    if run.error is not None:
        raise run.error


def commit_actions(
    actions: Sequence[Action],
    store: PackageStore,
    progress: Progress | None = None,
) -> None:
    """Commit built actions to the store in list order.

    Stops at the first failure. Commits before it are kept.

    Args:
        actions: Built actions, in order.
        store: Store to update.
        progress: Optional progress receiver.

    Raises:
        CommitError: If an action cannot be committed.
    """
    progress = progress or NullProgress()
    progress.increment_target(ProgressCategory.ACTIONS_COMMIT, len(actions))

    for action in actions:
        commit_action(action, store)
        progress.increment_completed(ProgressCategory.ACTIONS_COMMIT)


def execute_actions(
    actions: Sequence[Action],
    store: PackageStore,
    *,
    install_root: Path,
    fs_root: Path = Path("/"),
    workers: int = DEFAULT_WORKERS,
    progress: Progress | None = None,
) -> None:
    """Build all actions, then commit them.

    Nothing is committed unless every build succeeded. Neither phase
    rolls back on failure.

    Args:
        actions: Resolved actions, in order.
        store: Store to update.
        install_root: Directory holding per-package staging directories.
        fs_root: Real filesystem root.
        workers: Maximum number of concurrent builds.
        progress: Optional progress receiver.

    Raises:
        ActionBuildError: If any build failed. No commit happened.
        CommitError: If a commit failed. Earlier commits are kept.
    """
    progress = progress or NullProgress()

    if not actions:
        logger.info("No actions to execute")
        progress.set_completed(ProgressCategory.ACTIONS_BUILD)
        progress.set_completed(ProgressCategory.ACTIONS_COMMIT)
        return

    build_actions(
        actions,
        install_root=install_root,
        fs_root=fs_root,
        workers=workers,
        progress=progress,
    )
    logger.info("Built all actions, committing")
    commit_actions(actions, store, progress)
