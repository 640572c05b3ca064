"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: config,
data and log directories all land in a per-test temporary directory, and every
database is a fresh file there.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from task_planner.adapters.sqlite import Database, SqliteTaskRepository
from task_planner.services.task_service import TaskService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _reset_app_logger(logger_mod) -> None:
    app_logger = logging.getLogger("task_planner")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point platformdirs, the logger and TASK_PLANNER_DB at *tmp_path*.

    Also clears the lru_cache so each test gets a fresh config service.
    """
    import task_planner.utils.logger as logger_mod
    from task_planner.services.config_service import get_config_service

    tmpdir = str(tmp_path / "appdirs")
    monkeypatch.delenv("TASK_PLANNER_DB", raising=False)
    get_config_service.cache_clear()
    _reset_app_logger(logger_mod)

    with patch("task_planner.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("task_planner.services.config_service.user_data_dir", return_value=tmpdir):
            with patch("task_planner.utils.logger.user_log_dir", return_value=tmpdir):
                yield tmp_path

    get_config_service.cache_clear()
    _reset_app_logger(logger_mod)


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "tasks.db"


@pytest.fixture
def database(db_path):
    """Provide an opened, freshly migrated database."""
    db = Database(db_path).open()
    yield db
    db.close()


@pytest.fixture
def repo(database):
    """Provide a SqliteTaskRepository backed by the temp database."""
    return SqliteTaskRepository(database)


@pytest.fixture
def service(repo):
    return TaskService(repo)


@pytest.fixture
def cli_db(tmp_path, monkeypatch):
    """Route CLI commands to a temp database through TASK_PLANNER_DB."""
    path = tmp_path / "cli.db"
    monkeypatch.setenv("TASK_PLANNER_DB", str(path))
    return path
