"""CLI application using Typer.

A bare ``todo-tui`` starts the interactive session. The options only affect
logging.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from todo_tui import __version__
from todo_tui.config import Settings
from todo_tui.tui import run_tui
from todo_tui.tui.exceptions import TerminalSessionError
from todo_tui.utils.logger import configure_logging

logger = logging.getLogger(__name__)

console = Console()
app = typer.Typer(
    name="todo-tui",
    help="Interactive terminal TODO list",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"todo-tui {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def run(
    debug: Optional[bool] = typer.Option(
        None, "--debug/--no-debug", help="Log at DEBUG level (env: TODO_TUI_DEBUG)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file (env: TODO_TUI_LOG_FILE)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Start the interactive TODO list."""
    settings = Settings.from_env().with_overrides(debug=debug, log_file=log_file)
    configure_logging(settings)
    logger.info("Starting todo-tui %s", __version__)

    try:
        return_code = run_tui()
    except TerminalSessionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if return_code:
        raise typer.Exit(return_code)


def create_app() -> typer.Typer:
    """Create and return the Typer app."""
    return app
