"""SQLite-backed package store.

Each installed package is one row in the ``packages`` table. List-valued
fields (remove scripts, package files, dependencies) are stored as JSON
arrays in text columns.
"""

import json
import logging
from pathlib import Path
from typing import Any

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from japm.core.errors import StoreError
from japm.models.package import LocalPackage, PackageIdentity, RemotePackage
from japm.store.base import PackageStore

logger = logging.getLogger(__name__)

metadata = sa.MetaData()

packages_table = sa.Table(
    "packages",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("name", sa.Text, nullable=False, unique=True),
    sa.Column("version", sa.Text, nullable=False),
    sa.Column("description", sa.Text, nullable=False, default=""),
    sa.Column("pre_remove", sa.Text, nullable=False, default="[]"),
    sa.Column("package_files", sa.Text, nullable=False, default="[]"),
    sa.Column("post_remove", sa.Text, nullable=False, default="[]"),
    sa.Column("dependencies", sa.Text, nullable=False, default="[]"),
)


class SqlitePackageStore(PackageStore):
    """Package store persisted in a SQLite database file.

    The database file, its parent directories and the ``packages`` table
    are created on first use.

    Attributes:
        path: Location of the database file.
    """

    def __init__(self, path: Path) -> None:
        """Open (and create if needed) the database at ``path``.

        Args:
            path: Database file location.

        Raises:
            StoreError: If the directory or schema cannot be created.
        """
        self.path = path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create database directory {path.parent}: {e}") from e

        logger.debug("Opening package database %s", path)
        self._engine = sa.create_engine(f"sqlite:///{path}")
        try:
            metadata.create_all(self._engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Cannot initialize package database {path}: {e}") from e

    def close(self) -> None:
        """Release the database connections."""
        self._engine.dispose()

    def add(self, package: RemotePackage) -> None:
        values = {
            "name": package.name,
            "version": package.identity.version,
            "description": package.identity.description,
            "pre_remove": json.dumps(package.pre_remove),
            "package_files": json.dumps(package.package_files),
            "post_remove": json.dumps(package.post_remove),
            "dependencies": json.dumps(package.dependencies),
        }
        logger.debug("Inserting package %s into the database", package.identity)
        try:
            with self._engine.begin() as conn:
                conn.execute(packages_table.insert().values(**values))
        except IntegrityError as e:
            raise StoreError(f"Package {package.name} is already recorded") from e
        except SQLAlchemyError as e:
            raise StoreError(f"Could not insert package {package.name}: {e}") from e

    def remove(self, name: str) -> None:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(packages_table.delete().where(packages_table.c.name == name))
        except SQLAlchemyError as e:
            raise StoreError(f"Could not remove package {name}: {e}") from e
        if result.rowcount == 0:
            raise StoreError(f"Package {name} is not recorded")

    def get(self, name: str) -> LocalPackage | None:
        query = sa.select(packages_table).where(packages_table.c.name == name)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).mappings().first()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not query package {name}: {e}") from e
        if row is None:
            return None
        return _row_to_package(row)

    def get_all(self) -> list[LocalPackage]:
        query = sa.select(packages_table).order_by(packages_table.c.id)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not query installed packages: {e}") from e
        return [_row_to_package(row) for row in rows]


def _row_to_package(row: Any) -> LocalPackage:
    """Convert a ``packages`` row into a LocalPackage.

    Raises:
        StoreError: If one of the JSON columns is corrupt.
    """
    try:
        return LocalPackage(
            identity=PackageIdentity(
                name=row["name"],
                version=row["version"],
                description=row["description"] or "",
            ),
            dependencies=tuple(json.loads(row["dependencies"])),
            pre_remove=tuple(json.loads(row["pre_remove"])),
            post_remove=tuple(json.loads(row["post_remove"])),
            package_files=tuple(json.loads(row["package_files"])),
        )
    except (json.JSONDecodeError, TypeError) as e:
        raise StoreError(f"Corrupt record for package {row['name']}: {e}") from e
