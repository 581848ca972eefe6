"""Data models for japm.

This module exports the core data structures used throughout the application.
"""

from japm.models.action import (
    Action,
    ActionType,
    create_install_action,
    create_remove_action,
)
from japm.models.document import PackageDocument, PackageDocumentError, parse_package_document
from japm.models.package import LocalPackage, PackageIdentity, RemotePackage

__all__ = [
    "Action",
    "ActionType",
    "LocalPackage",
    "PackageDocument",
    "PackageDocumentError",
    "PackageIdentity",
    "RemotePackage",
    "create_install_action",
    "create_remove_action",
    "parse_package_document",
]
