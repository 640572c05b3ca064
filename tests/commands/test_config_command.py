"""CLI tests for the ``config`` command group."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from task_planner.main import app
from task_planner.services.config_service import get_config_service

runner = CliRunner()


def _invoke(*args, **kwargs):
    return runner.invoke(app, ["config", *args], **kwargs)


class TestHelpFlags:
    def test_app_help(self):
        assert _invoke("--help").exit_code == 0

    def test_set_help(self):
        assert _invoke("set", "--help").exit_code == 0


class TestShow:
    def test_show(self):
        result = _invoke("show")
        assert result.exit_code == 0
        assert '"log_level": "INFO"' in result.output


class TestGet:
    def test_get_scalar(self):
        result = _invoke("get", "output.format")
        assert result.exit_code == 0
        assert result.output.strip() == "table"

    def test_get_section(self):
        result = _invoke("get", "output")
        assert json.loads(result.output) == {"format": "table"}

    def test_get_unknown(self):
        result = _invoke("get", "nope")
        assert result.exit_code == 2
        assert "Unknown config key: nope" in result.output


class TestSet:
    def test_set(self):
        result = _invoke("set", "output.format", "yaml")
        assert result.exit_code == 0
        get_config_service.cache_clear()
        assert get_config_service().config.output.format == "yaml"

    def test_set_invalid(self):
        result = _invoke("set", "output.format", "xml")
        assert result.exit_code == 2

    def test_set_unknown(self):
        result = _invoke("set", "colour", "1")
        assert result.exit_code == 2


class TestReset:
    def test_reset_yes(self):
        _invoke("set", "log_level", "DEBUG")
        result = _invoke("reset", "-y")
        assert result.exit_code == 0
        assert get_config_service().config.log_level == "INFO"

    def test_reset_declined_keeps_config(self):
        _invoke("set", "log_level", "DEBUG")
        _invoke("reset", input="n\n")
        assert get_config_service().config.log_level == "DEBUG"
