"""Package lookup over HTTP remotes.

Remotes are tried in ranked order. A remote that answers with a non-200
status or cannot be reached is skipped, and the next one is tried.
"""

import copy
import logging
from collections.abc import Iterable

import httpx

from japm.core.errors import PackageLookupError
from japm.lookup.base import PackageFinder
from japm.models.document import PackageDocumentError, parse_package_document
from japm.models.package import RemotePackage

logger = logging.getLogger(__name__)


def package_url(remote: str, name: str) -> str:
    """Build the document URL of ``name`` on ``remote``.

    Args:
        remote: Base URL of the remote, with or without a trailing slash.
        name: Package name.

    Returns:
        ``<remote>/packages/<name>/package.json``.
    """
    return f"{remote.rstrip('/')}/packages/{name}/package.json"


class RemotePackageFinder(PackageFinder):
    """Finder that downloads package documents from ranked remotes.

    Found packages are cached by name for the lifetime of the finder;
    every call returns an independent copy so builds can enrich it.

    Attributes:
        remotes: Remote base URLs, highest priority first.
    """

    def __init__(
        self,
        remotes: Iterable[str],
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            remotes: Remote base URLs in the order they should be tried.
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured HTTP client.
        """
        self.remotes = list(remotes)
        self._client = client or httpx.Client(follow_redirects=True, timeout=timeout)
        self._cache: dict[str, RemotePackage] = {}

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def find(self, name: str) -> RemotePackage | None:
        logger.info("Searching for package %s", name)

        cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Package search cache hit for %s", name)
            return copy.deepcopy(cached)

        content = self._download(name)
        if content is None:
            return None

        try:
            package = parse_package_document(content)
        except PackageDocumentError as e:
            raise PackageLookupError(f"Error parsing package {name}: {e}") from e

        self._cache[name] = package
        return copy.deepcopy(package)

    def _download(self, name: str) -> bytes | None:
        """Fetch the raw document from the first remote that has it.

        Returns:
            Response body, or None if no remote serves the package.
        """
        for remote in self.remotes:
            url = package_url(remote, name)
            try:
                response = self._client.get(url)
            except httpx.HTTPError as e:
                logger.warning("Error while attempting to download package %s: %s", name, e)
                continue

            if response.status_code != httpx.codes.OK:
                logger.debug(
                    "Package %s not found in remote %s (status %d)",
                    name,
                    remote,
                    response.status_code,
                )
                continue

            logger.debug("Found package %s at %s", name, url)
            return response.content

        return None
