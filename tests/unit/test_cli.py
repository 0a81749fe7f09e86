"""Tests for the Typer command-line entry point."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from todo_tui import __version__
from todo_tui.cli.app import create_app
from todo_tui.tui.exceptions import TerminalSessionError

runner = CliRunner()


class TestCli:
    """Tests for the todo-tui command."""

    def test_version(self) -> None:
        result = runner.invoke(create_app(), ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_bare_invocation_runs_tui(self, tmp_path: Path) -> None:
        with patch("todo_tui.cli.app.run_tui", return_value=0) as run_tui:
            result = runner.invoke(create_app(), ["--log-file", str(tmp_path / "todo.log")])
        assert result.exit_code == 0
        run_tui.assert_called_once_with()

    def test_nonzero_return_code_propagates(self, tmp_path: Path) -> None:
        with patch("todo_tui.cli.app.run_tui", return_value=1):
            result = runner.invoke(create_app(), ["--log-file", str(tmp_path / "todo.log")])
        assert result.exit_code == 1

    def test_terminal_failure_exits_with_error(self, tmp_path: Path) -> None:
        error = TerminalSessionError("run terminal session", "not a tty")
        with patch("todo_tui.cli.app.run_tui", side_effect=error):
            result = runner.invoke(create_app(), ["--log-file", str(tmp_path / "todo.log")])
        assert result.exit_code == 1
        assert "not a tty" in result.output

    def test_debug_flag_sets_level(self, tmp_path: Path) -> None:
        log_file = tmp_path / "todo.log"
        with patch("todo_tui.cli.app.run_tui", return_value=0):
            runner.invoke(create_app(), ["--debug", "--log-file", str(log_file)])
        assert "Logging configured at level DEBUG" in log_file.read_text(encoding="utf-8")
