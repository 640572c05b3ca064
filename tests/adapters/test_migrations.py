"""Unit tests for the MigrationRunner and helper functions in migrations/runner.py."""

from __future__ import annotations

import sqlite3

import pytest

from task_planner.adapters.sqlite.migrations import MIGRATIONS
from task_planner.adapters.sqlite.migrations.runner import (
    Migration,
    MigrationRunner,
    run_migrations,
)
from task_planner.errors import MigrationError


# ---------------------------------------------------------------------------
# Test migrations
# ---------------------------------------------------------------------------


_MIGRATION_ONE = Migration(
    id="001_test_table_one",
    statement="CREATE TABLE test_table_one (id INTEGER PRIMARY KEY, name TEXT)",
)
_MIGRATION_TWO = Migration(
    id="002_test_table_two",
    statement="CREATE TABLE test_table_two (id INTEGER PRIMARY KEY, value TEXT)",
)
_FAILING_MIGRATION = Migration(
    id="003_broken",
    statement="CREATE TABLE broken (",
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mem_conn():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


def _table_exists(conn: sqlite3.Connection, name: str) -> bool:
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?", (name,)
    )
    return cursor.fetchone() is not None


def _ledger(conn: sqlite3.Connection) -> list[str]:
    return [row[0] for row in conn.execute("SELECT id FROM migrations ORDER BY rowid")]


# ---------------------------------------------------------------------------
# Ledger table
# ---------------------------------------------------------------------------


class TestEnsureLedger:
    def test_ledger_table_created(self, mem_conn):
        MigrationRunner(mem_conn, []).ensure_ledger()
        assert _table_exists(mem_conn, "migrations")

    def test_idempotent(self, mem_conn):
        runner = MigrationRunner(mem_conn, [])
        runner.ensure_ledger()
        runner.ensure_ledger()  # should not raise

    def test_run_creates_ledger_even_without_migrations(self, mem_conn):
        assert MigrationRunner(mem_conn, []).run() == []
        assert _table_exists(mem_conn, "migrations")


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    def test_applies_in_declaration_order(self, mem_conn):
        applied = MigrationRunner(mem_conn, [_MIGRATION_ONE, _MIGRATION_TWO]).run()
        assert applied == ["001_test_table_one", "002_test_table_two"]
        assert _ledger(mem_conn) == applied
        assert _table_exists(mem_conn, "test_table_one")
        assert _table_exists(mem_conn, "test_table_two")

    def test_second_run_is_noop(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE, _MIGRATION_TWO])
        runner.run()
        assert runner.run() == []
        assert _ledger(mem_conn) == ["001_test_table_one", "002_test_table_two"]

    def test_new_runner_on_same_db_is_noop(self, mem_conn):
        MigrationRunner(mem_conn, [_MIGRATION_ONE]).run()
        assert MigrationRunner(mem_conn, [_MIGRATION_ONE]).run() == []

    def test_only_pending_migrations_run(self, mem_conn):
        MigrationRunner(mem_conn, [_MIGRATION_ONE]).run()
        applied = MigrationRunner(mem_conn, [_MIGRATION_ONE, _MIGRATION_TWO]).run()
        assert applied == ["002_test_table_two"]

    def test_pending_lists_unapplied(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE, _MIGRATION_TWO])
        runner.ensure_ledger()
        runner.run_migration(_MIGRATION_ONE)
        assert [m.id for m in runner.pending()] == ["002_test_table_two"]

    def test_is_applied(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE])
        runner.ensure_ledger()
        assert runner.is_applied("001_test_table_one") is False
        runner.run()
        assert runner.is_applied("001_test_table_one") is True


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailure:
    def test_failing_statement_raises_migration_error(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE, _FAILING_MIGRATION])
        with pytest.raises(MigrationError, match="003_broken"):
            runner.run()

    def test_failing_migration_not_recorded(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE, _FAILING_MIGRATION])
        with pytest.raises(MigrationError):
            runner.run()
        assert _ledger(mem_conn) == ["001_test_table_one"]

    def test_migrations_after_failure_do_not_run(self, mem_conn):
        runner = MigrationRunner(
            mem_conn, [_FAILING_MIGRATION, _MIGRATION_TWO]
        )
        with pytest.raises(MigrationError):
            runner.run()
        assert not _table_exists(mem_conn, "test_table_two")
        assert _ledger(mem_conn) == []

    def test_migration_error_is_runtime_error(self, mem_conn):
        with pytest.raises(RuntimeError):
            MigrationRunner(mem_conn, [_FAILING_MIGRATION]).run()

    def test_duplicate_ids_rejected(self, mem_conn):
        duplicate = Migration(id=_MIGRATION_ONE.id, statement="SELECT 1")
        with pytest.raises(MigrationError, match="duplicate"):
            MigrationRunner(mem_conn, [_MIGRATION_ONE, duplicate])


# ---------------------------------------------------------------------------
# History and helpers
# ---------------------------------------------------------------------------


class TestHistory:
    def test_history_lists_applied_in_order(self, mem_conn):
        runner = MigrationRunner(mem_conn, [_MIGRATION_ONE, _MIGRATION_TWO])
        runner.run()
        history = runner.get_migration_history()
        assert [h["id"] for h in history] == ["001_test_table_one", "002_test_table_two"]
        assert all(h["applied_at"] for h in history)

    def test_history_empty_on_fresh_db(self, mem_conn):
        assert MigrationRunner(mem_conn, []).get_migration_history() == []

    def test_run_migrations_helper(self, mem_conn):
        assert run_migrations(mem_conn, [_MIGRATION_ONE]) == ["001_test_table_one"]
        assert run_migrations(mem_conn, [_MIGRATION_ONE]) == []


class TestDeclaredMigrations:
    def test_ids_are_unique(self):
        ids = [m.id for m in MIGRATIONS]
        assert len(ids) == len(set(ids))

    def test_first_migration_creates_tasks(self, mem_conn):
        run_migrations(mem_conn, MIGRATIONS)
        assert _table_exists(mem_conn, "tasks")
        columns = [row[1] for row in mem_conn.execute("PRAGMA table_info(tasks)")]
        assert columns == [
            "id",
            "title",
            "description",
            "priority",
            "status",
            "category",
            "due_date",
            "created_at",
            "updated_at",
        ]

    def test_tasks_column_defaults(self, mem_conn):
        run_migrations(mem_conn, MIGRATIONS)
        mem_conn.execute("INSERT INTO tasks (title) VALUES ('bare')")
        row = mem_conn.execute("SELECT * FROM tasks").fetchone()
        assert row["description"] == ""
        assert row["priority"] == "medium"
        assert row["status"] == "pending"
        assert row["category"] == "general"
        assert row["due_date"] is None
        assert row["created_at"] is not None
