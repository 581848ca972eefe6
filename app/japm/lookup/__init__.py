"""Package lookups for japm.

This module exports the finder interface and its implementations.
"""

from japm.lookup.base import PackageFinder
from japm.lookup.file import FilePackageFinder
from japm.lookup.remote import RemotePackageFinder

__all__ = ["FilePackageFinder", "PackageFinder", "RemotePackageFinder"]
