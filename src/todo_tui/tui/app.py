"""TODO TUI Application.

This module provides the Textual application that owns the terminal session.
Textual enters the alternate screen and raw input mode on ``run()`` and
restores the terminal on every exit path, including crashes.

Each key press is handed to the screen controller, and the active screen is
repainted in full afterwards.

Example usage:
    from todo_tui.tui.app import TodoTUI

    app = TodoTUI()
    app.run()
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.geometry import Offset, Size
from textual.widgets import Static

from todo_tui.tui.controller import handle_event
from todo_tui.tui.events import KeyEvent
from todo_tui.tui.state import AppState
from todo_tui.tui.views import render_screen

logger = logging.getLogger(__name__)


class FrameView(Static):
    """Full-size surface the active screen is painted onto."""

    DEFAULT_CSS = """
    FrameView {
        width: 100%;
        height: 100%;
    }
    """


class TodoTUI(App):
    """Interactive TODO list.

    Keyboard Navigation:
        a: Add a task
        Enter: Edit the selected task
        Space: Toggle done
        d: Delete the selected task
        Up/Down: Move the selection
        Esc: Cancel adding or editing
        q: Quit application
    """

    TITLE = "TODO"

    # Disable the default command palette (not implemented)
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, state: Optional[AppState] = None) -> None:
        """Initialize the application.

        Args:
            state: Initial application state. A fresh, empty state is
                created when omitted.
        """
        super().__init__()
        self._todo_state = state if state is not None else AppState()
        self.caret_position: Optional[Offset] = None

    @property
    def state(self) -> AppState:
        """Get the application state."""
        return self._todo_state

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        self.redraw()

    def on_resize(self, event: events.Resize) -> None:
        self.redraw(event.size)

    def on_key(self, event: events.Key) -> None:
        """Dispatch every key press to the controller, then repaint."""
        event.stop()
        event.prevent_default()
        if not handle_event(self._todo_state, KeyEvent.from_textual(event)):
            logger.debug("Exit screen reached, leaving session")
            self.exit()
            return
        self.redraw()

    def redraw(self, size: Optional[Size] = None) -> None:
        """Repaint the active screen from the current state."""
        surface = size if size is not None else self.size
        try:
            frame = self.query_one(FrameView)
        except NoMatches:
            # Resize can arrive before the frame is composed
            return
        renderable, self.caret_position = render_screen(self._todo_state, surface)
        frame.update(renderable)
        if self.caret_position is not None:
            self.cursor_position = frame.region.offset + self.caret_position
