"""Package document schema.

This module defines the Pydantic models for the JSON document that
package lookups return, and the conversion into a RemotePackage.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from japm.models.package import PackageIdentity, RemotePackage


class PackageDataDocument(BaseModel):
    """The ``package_data`` section of a package document."""

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(min_length=1, description="Package name")]
    version: Annotated[str, Field(description="Semantic version")] = ""
    description: Annotated[str, Field(description="Package description")] = ""


class PackageDocument(BaseModel):
    """A package description as published by a remote or a local file.

    Every script list defaults to empty. ``package_files`` is deliberately
    absent: it only exists after a package has been built.
    """

    model_config = ConfigDict(extra="ignore")

    package_data: Annotated[PackageDataDocument, Field(description="Package identity")]
    dependencies: Annotated[list[str], Field(default_factory=list)]
    pre_install: Annotated[list[str], Field(default_factory=list)]
    install: Annotated[list[str], Field(default_factory=list)]
    post_install: Annotated[list[str], Field(default_factory=list)]
    pre_remove: Annotated[list[str], Field(default_factory=list)]
    post_remove: Annotated[list[str], Field(default_factory=list)]

    def to_remote_package(self) -> RemotePackage:
        """Convert the document into a fresh RemotePackage."""
        return RemotePackage(
            identity=PackageIdentity(
                name=self.package_data.name,
                version=self.package_data.version,
                description=self.package_data.description,
            ),
            dependencies=list(self.dependencies),
            pre_install=list(self.pre_install),
            install=list(self.install),
            post_install=list(self.post_install),
            pre_remove=list(self.pre_remove),
            post_remove=list(self.post_remove),
        )


class PackageDocumentError(ValueError):
    """Raised when a package document cannot be parsed."""


def parse_package_document(text: str | bytes) -> RemotePackage:
    """Parse and validate a JSON package document.

    Args:
        text: Raw JSON content.

    Returns:
        RemotePackage built from the document.

    Raises:
        PackageDocumentError: If the JSON is malformed or does not match
            the schema.
    """
    try:
        document = PackageDocument.model_validate_json(text)
    except ValidationError as e:
        raise PackageDocumentError(f"Invalid package document: {e}") from e
    return document.to_remote_package()
