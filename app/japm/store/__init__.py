"""Package stores for japm.

This module exports the store interface and its implementations.
"""

from japm.store.base import PackageStore
from japm.store.memory import InMemoryPackageStore
from japm.store.sqlite import SqlitePackageStore

__all__ = ["InMemoryPackageStore", "PackageStore", "SqlitePackageStore"]
