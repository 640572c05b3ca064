"""Database connection management for the task planner SQLite store.

A ``Database`` owns exactly one connection to the backing file. It is
created explicitly, opened once, and handed to the repositories that need
it, so tests can build isolated instances on temporary files.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from task_planner.adapters.sqlite import schema
from task_planner.adapters.sqlite.migrations import MIGRATIONS, Migration, MigrationRunner

logger = logging.getLogger(__name__)


class Database:
    """Connection manager for the SQLite task store.

    Provides:
    - Single connection per instance (connection reuse)
    - WAL mode so readers do not block the writer
    - Foreign key constraint enforcement
    - Automatic directory creation
    - Owner-only file permissions for new database files
    - Migrations on open, and a destructive reset for tests
    """

    def __init__(
        self,
        db_path: str | Path,
        migrations: Sequence[Migration] | None = None,
    ):
        """Initialize the database handle without connecting.

        Args:
            db_path: Path to the database file
            migrations: Migrations to apply on open (defaults to MIGRATIONS)
        """
        self.db_path = Path(db_path)
        self.migrations = list(MIGRATIONS if migrations is None else migrations)
        self._connection: sqlite3.Connection | None = None
        self.applied_on_open: list[str] = []

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the open connection, opening the database on first use."""
        if self._connection is None:
            self.open()
        if self._connection is None:
            raise RuntimeError(f"Database {self.db_path} could not be opened")
        return self._connection

    def open(self) -> Database:
        """Connect, configure and migrate.

        Returns:
            self, for chaining

        Raises:
            MigrationError: If a migration fails; the connection is closed
        """
        if self._connection is not None:
            return self

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not self.db_path.exists()

        connection = sqlite3.connect(
            str(self.db_path),
            check_same_thread=False,  # Allow multi-threaded access
            timeout=30.0,  # Wait up to 30s for locks
        )
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(self.db_path, 0o600)

        try:
            applied = MigrationRunner(connection, self.migrations).run()
        except Exception:
            connection.close()
            raise

        self._connection = connection
        self.applied_on_open = applied
        logger.info(
            "database opened path=%s new=%s migrations_applied=%s",
            self.db_path,
            is_new_database,
            applied,
        )
        return self

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._connection is None:
            return
        try:
            self._connection.commit()
            self._connection.close()
        finally:
            self._connection = None
        logger.debug("database closed path=%s", self.db_path)

    def migrate(self) -> list[str]:
        """Apply any pending migrations on the open connection."""
        return self.runner().run()

    def runner(self) -> MigrationRunner:
        return MigrationRunner(self.connection, self.migrations)

    def reset(self) -> list[str]:
        """Drop all managed tables and migrate again.

        Destructive: leaves an empty, freshly migrated store. Meant for test
        isolation and the ``db reset`` command only.

        Returns:
            Ids of the migrations re-applied
        """
        connection = self.connection
        with self.transaction():
            for table in schema.MANAGED_TABLES:
                connection.execute(f"DROP TABLE IF EXISTS {table}")
        logger.warning("database reset path=%s", self.db_path)
        return self.migrate()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Commit on success, roll back on any exception."""
        connection = self.connection
        try:
            yield connection
            connection.commit()
        except Exception:
            connection.rollback()
            raise

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_database(db_path: str | Path) -> Database:
    """Helper function to open a migrated database.

    Args:
        db_path: Path to database file

    Returns:
        Opened Database
    """
    return Database(db_path).open()
