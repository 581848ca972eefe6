"""Progress reporting for transactions.

The resolver and the pipeline report monotonic counters through the
Progress interface. Reporting is purely advisory and never influences
control flow.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum


class ProgressCategory(Enum):
    """Phase a progress counter belongs to."""

    SETUP = "setup"
    PACKAGES = "packages"
    ACTIONS_BUILD = "actions_build"
    ACTIONS_COMMIT = "actions_commit"


class Progress(ABC):
    """Receiver of progress counters."""

    @abstractmethod
    def increment_target(self, category: ProgressCategory, amount: int = 1) -> None:
        """Raise the amount of work expected in ``category``."""

    @abstractmethod
    def increment_completed(self, category: ProgressCategory, amount: int = 1) -> None:
        """Raise the amount of work finished in ``category``."""

    @abstractmethod
    def set_completed(self, category: ProgressCategory) -> None:
        """Mark ``category`` as fully complete."""


class NullProgress(Progress):
    """Progress receiver that ignores everything."""

    def increment_target(self, category: ProgressCategory, amount: int = 1) -> None:
        pass

    def increment_completed(self, category: ProgressCategory, amount: int = 1) -> None:
        pass

    def set_completed(self, category: ProgressCategory) -> None:
        pass


class ProgressTracker(Progress):
    """Thread-safe counter state for every progress category.

    The overall percentage is the mean of the four category fractions.
    A category with no target counts as 0 until it is marked complete.

    Attributes:
        listener: Optional callback invoked with the overall percentage
            after every change.
    """

    def __init__(self, listener: Callable[[float], None] | None = None) -> None:
        self.listener = listener
        self._lock = threading.Lock()
        self._completed: dict[ProgressCategory, int] = {c: 0 for c in ProgressCategory}
        self._target: dict[ProgressCategory, int] = {c: 0 for c in ProgressCategory}

    def increment_target(self, category: ProgressCategory, amount: int = 1) -> None:
        with self._lock:
            self._target[category] += amount
        self._notify()

    def increment_completed(self, category: ProgressCategory, amount: int = 1) -> None:
        with self._lock:
            self._completed[category] += amount
        self._notify()

    def set_completed(self, category: ProgressCategory) -> None:
        with self._lock:
            self._completed[category] = 1
            self._target[category] = 1
        self._notify()

    def counts(self, category: ProgressCategory) -> tuple[int, int]:
        """Return ``(completed, target)`` for ``category``."""
        with self._lock:
            return self._completed[category], self._target[category]

    def fraction(self, category: ProgressCategory) -> float:
        """Return the completed fraction of ``category`` in ``[0, 1]``."""
        completed, target = self.counts(category)
        if target == 0:
            return 0.0
        return min(completed / target, 1.0)

    @property
    def percentage(self) -> float:
        """Overall progress across all categories, in percent."""
        fractions = [self.fraction(category) for category in ProgressCategory]
        return 100.0 * sum(fractions) / len(fractions)

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self.percentage)
