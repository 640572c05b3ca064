"""Migration framework for SQLite database schema evolution.

This module provides a simple migration system with:
- Named migrations applied in declaration order
- Forward-only migration support
- A ledger table recording which migrations have run
- Automatic execution whenever a database is opened
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass

from task_planner.adapters.sqlite import schema
from task_planner.errors import MigrationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Migration:
    """A named schema change that runs exactly once per database file.

    Attributes:
        id: Stable identifier used as the ledger key
        statement: Single SQL statement to execute
        description: Human-readable summary
    """

    id: str
    statement: str
    description: str = ""

    def up(self, connection: sqlite3.Connection) -> None:
        """Execute forward migration."""
        connection.execute(self.statement)


class MigrationRunner:
    """Manages and executes database migrations."""

    def __init__(self, connection: sqlite3.Connection, migrations: Sequence[Migration]):
        """Initialize migration runner.

        Args:
            connection: Database connection
            migrations: Migrations in the order they must be applied

        Raises:
            MigrationError: If two migrations share an id
        """
        seen: set[str] = set()
        for migration in migrations:
            if migration.id in seen:
                raise MigrationError(migration.id, "duplicate migration id")
            seen.add(migration.id)

        self.connection = connection
        self.migrations = list(migrations)

    def ensure_ledger(self) -> None:
        """Create the migrations ledger table if it doesn't exist."""
        self.connection.execute(schema.CREATE_MIGRATIONS_TABLE)
        self.connection.commit()

    def is_applied(self, migration_id: str) -> bool:
        cursor = self.connection.execute(
            "SELECT COUNT(1) FROM migrations WHERE id = ?", (migration_id,)
        )
        return cursor.fetchone()[0] > 0

    def applied_ids(self) -> set[str]:
        cursor = self.connection.execute("SELECT id FROM migrations")
        return {row[0] for row in cursor.fetchall()}

    def pending(self) -> list[Migration]:
        """Declared migrations not yet recorded in the ledger."""
        self.ensure_ledger()
        applied = self.applied_ids()
        return [m for m in self.migrations if m.id not in applied]

    def run_migration(self, migration: Migration) -> None:
        """Apply one migration and record it, atomically.

        Raises:
            MigrationError: If the statement fails; the ledger is left untouched
        """
        try:
            self.connection.execute("BEGIN")
            migration.up(self.connection)
            self.connection.execute(
                "INSERT INTO migrations (id) VALUES (?)", (migration.id,)
            )
            self.connection.commit()
        except Exception as e:
            self.connection.rollback()
            logger.error("migration %s failed: %s", migration.id, e)
            raise MigrationError(migration.id, str(e)) from e

        logger.info("migration applied: %s", migration.id)

    def run(self) -> list[str]:
        """Run all pending migrations.

        Safe to call on every start; a no-op once everything is applied.

        Returns:
            Ids of the migrations applied by this call
        """
        applied: list[str] = []
        for migration in self.pending():
            self.run_migration(migration)
            applied.append(migration.id)
        return applied

    def get_migration_history(self) -> list[dict]:
        """Get history of applied migrations.

        Returns:
            List of ledger records with id and applied_at
        """
        self.ensure_ledger()
        cursor = self.connection.execute(
            "SELECT id, applied_at FROM migrations ORDER BY applied_at, rowid"
        )
        return [{"id": row[0], "applied_at": row[1]} for row in cursor.fetchall()]


def run_migrations(
    connection: sqlite3.Connection, migrations: Sequence[Migration]
) -> list[str]:
    """Helper function to run migrations.

    Args:
        connection: Database connection
        migrations: Declared migrations

    Returns:
        Ids of the migrations applied
    """
    return MigrationRunner(connection, migrations).run()
