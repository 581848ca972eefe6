"""Unit tests for file package lookup."""

from pathlib import Path

import pytest
from japm.core.errors import PackageLookupError
from japm.lookup.file import FilePackageFinder


class TestFilePackageFinder:
    """Tests for FilePackageFinder."""

    def test_reads_document(self, tmp_path: Path, sample_document: str) -> None:
        """An existing file is parsed into a RemotePackage."""
        path = tmp_path / "package.json"
        path.write_text(sample_document)

        package = FilePackageFinder().find(str(path))

        assert package is not None
        assert package.name == "neofetch"
        assert package.install == ["mkdir -p usr/bin", "touch usr/bin/neofetch"]

    def test_relative_to_base_dir(self, tmp_path: Path, sample_document: str) -> None:
        """Relative names resolve against base_dir."""
        (tmp_path / "neofetch.json").write_text(sample_document)

        package = FilePackageFinder(base_dir=tmp_path).find("neofetch.json")

        assert package is not None
        assert package.version == "7.1.0"

    def test_appends_json_suffix(self, tmp_path: Path, sample_document: str) -> None:
        """A name without the .json suffix reads the .json file."""
        (tmp_path / "neofetch.json").write_text(sample_document)

        package = FilePackageFinder(base_dir=tmp_path).find("neofetch")

        assert package is not None
        assert package.name == "neofetch"

    def test_other_suffix_is_kept(self, tmp_path: Path, sample_document: str) -> None:
        """Only a missing .json suffix is added; other suffixes are not replaced."""
        (tmp_path / "neofetch.txt").write_text(sample_document)

        assert FilePackageFinder(base_dir=tmp_path).find("neofetch.txt") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is a normal not-found result."""
        assert FilePackageFinder().find(str(tmp_path / "nope.json")) is None

    def test_malformed_file(self, tmp_path: Path) -> None:
        """A document without package_data raises PackageLookupError."""
        path = tmp_path / "package.json"
        path.write_text('{"dependencies": []}')

        with pytest.raises(PackageLookupError):
            FilePackageFinder().find(str(path))
