"""Package lookup from local JSON files."""

import logging
from pathlib import Path

from japm.core.errors import PackageLookupError
from japm.lookup.base import PackageFinder
from japm.models.document import PackageDocumentError, parse_package_document
from japm.models.package import RemotePackage

logger = logging.getLogger(__name__)


class FilePackageFinder(PackageFinder):
    """Finder that treats the requested name as a path to a package document.

    Relative paths resolve against ``base_dir`` (the current directory by
    default). A name without a ``.json`` suffix gets one appended, so
    ``tools/neofetch`` reads ``tools/neofetch.json``. Dependencies named
    inside a document are looked up the same way, so they must also be
    paths.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    def find(self, name: str) -> RemotePackage | None:
        if not name.endswith(".json"):
            name = f"{name}.json"
        path = Path(name)
        if self._base_dir is not None and not path.is_absolute():
            path = self._base_dir / path

        if not path.is_file():
            logger.debug("Package file %s does not exist", path)
            return None

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PackageLookupError(f"Error reading package file {path}: {e}") from e

        try:
            package = parse_package_document(content)
        except PackageDocumentError as e:
            raise PackageLookupError(f"Error parsing package file {path}: {e}") from e

        logger.debug("Loaded package %s from %s", package.identity, path)
        return package
