"""Terminal user interface for todo-tui.

The TUI is split into a pure state machine and the Textual application that
hosts it:
    - state: screen, task list, selection and input buffer
    - controller: key dispatch by screen
    - views: Rich renderables for each screen
    - app: Textual application owning the terminal session

Example usage:
    from todo_tui.tui import run_tui
    run_tui()
"""

import logging

from todo_tui.tui.exceptions import TerminalSessionError

logger = logging.getLogger(__name__)


def run_tui() -> int:
    """Run the interactive session until the user quits.

    Returns:
        The process exit status reported by the application.

    Raises:
        TerminalSessionError: If the terminal cannot be driven.
    """
    from todo_tui.tui.app import TodoTUI

    app = TodoTUI()
    try:
        app.run()
    except OSError as e:
        logger.error("Terminal session failed: %s", e)
        raise TerminalSessionError("run terminal session", str(e)) from e

    return_code = app.return_code or 0
    logger.info(
        "Session ended with %d tasks (%d done), exit status %d",
        app.state.item_count,
        app.state.completed_count,
        return_code,
    )
    return return_code


__all__ = ["run_tui"]
