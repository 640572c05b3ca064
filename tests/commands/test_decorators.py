"""Unit tests for command decorators."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import typer

from task_planner.commands.decorators import (
    command_wrapper,
    open_database,
    task_service_session,
)
from task_planner.errors import TaskNotFoundError, ValidationError
from task_planner.services.task_service import TaskService


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def ok():
            return 42

        assert ok() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            return None

        assert my_command.__name__ == "my_command"

    def test_task_planner_error_maps_exit_code(self):
        @command_wrapper
        def missing():
            raise TaskNotFoundError(3)

        with patch("task_planner.commands.decorators.format_error") as mock_err:
            with pytest.raises(typer.Exit) as exc_info:
                missing()
        assert exc_info.value.exit_code == 5
        mock_err.assert_called_once_with("Task not found.")

    def test_validation_error_reports_list(self):
        @command_wrapper
        def invalid():
            raise ValidationError(["a", "b"])

        with patch("task_planner.commands.decorators.format_error") as mock_err:
            with pytest.raises(typer.Exit) as exc_info:
                invalid()
        assert exc_info.value.exit_code == 2
        mock_err.assert_called_once_with(["a", "b"])

    def test_json_output_prints_failure_envelope(self):
        @command_wrapper
        def missing(output=None):
            raise TaskNotFoundError(3)

        with patch("task_planner.commands.decorators.format_output") as mock_out:
            with patch("task_planner.commands.decorators.format_error") as mock_err:
                with pytest.raises(typer.Exit):
                    missing(output="json")
        mock_out.assert_called_once_with(
            {"success": False, "error": "Task not found."}, "json"
        )
        mock_err.assert_not_called()

    def test_table_output_prints_error(self):
        @command_wrapper
        def missing(output=None):
            raise TaskNotFoundError(3)

        with patch("task_planner.commands.decorators.format_error") as mock_err:
            with pytest.raises(typer.Exit):
                missing(output="table")
        mock_err.assert_called_once_with("Task not found.")

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def leave():
            raise typer.Exit(code=0)

        with pytest.raises(typer.Exit) as exc_info:
            leave()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error_exits_1(self):
        @command_wrapper
        def broken():
            raise KeyError("boom")

        with patch("task_planner.commands.decorators.format_error") as mock_err:
            with pytest.raises(typer.Exit) as exc_info:
                broken()
        assert exc_info.value.exit_code == 1
        assert "unexpected error" in mock_err.call_args[0][0]


class TestSessions:
    def test_open_database_uses_env_path(self, cli_db):
        with open_database() as database:
            assert database.db_path == cli_db
            assert database.is_open
        assert database.is_open is False

    def test_database_closed_on_error(self, cli_db):
        with pytest.raises(RuntimeError):
            with open_database() as database:
                raise RuntimeError("boom")
        assert database.is_open is False

    def test_task_service_session(self, cli_db):
        with task_service_session() as service:
            assert isinstance(service, TaskService)
            assert service.list_tasks() == []

    def test_config_service_consulted(self, tmp_path):
        config_svc = MagicMock()
        config_svc.get_database_path.return_value = tmp_path / "mocked.db"
        with patch(
            "task_planner.commands.decorators.get_config_service",
            return_value=config_svc,
        ):
            with open_database() as database:
                assert database.db_path == tmp_path / "mocked.db"
