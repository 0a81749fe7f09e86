"""TUI-specific test fixtures.

- press: build a key press event from a Textual key name
- release: build the matching key release event
- type_text: feed a string into the controller one key at a time
"""

from typing import Callable

import pytest

from todo_tui.tui.controller import handle_event
from todo_tui.tui.events import KeyEvent
from todo_tui.tui.state import AppState


@pytest.fixture
def press() -> Callable[..., KeyEvent]:
    """Factory for key press events."""
    return KeyEvent.press


@pytest.fixture
def release() -> Callable[..., KeyEvent]:
    """Factory for key release events."""
    return KeyEvent.release


@pytest.fixture
def type_text() -> Callable[[AppState, str], None]:
    """Type a string through the controller as individual key presses."""

    def _type(state: AppState, text: str) -> None:
        for char in text:
            key = "space" if char == " " else char
            handle_event(state, KeyEvent.press(key, char))

    return _type
