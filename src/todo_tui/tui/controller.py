"""Screen controller: the key-driven state machine of the TODO TUI.

Each call to ``handle_event`` consumes one key event, dispatches it by the
active screen, and mutates the ``AppState`` in place. Rendering is done by
the caller after every call, whatever the outcome.

Keyboard Navigation (Main screen):
    a: Add a new task
    Enter: Edit the selected task
    Space: Toggle the selected task's done flag
    d: Delete the selected task
    Up/Down: Move the selection (clamped at both ends)
    q: Quit

Add/Edit screens:
    Enter: Commit
    Esc: Cancel
    any other key: Edit the text
"""

import logging
from typing import Callable, Dict

from todo_tui.domain.entities import TaskItem
from todo_tui.tui.constants import (
    KEY_ADD,
    KEY_DELETE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_QUIT,
    KEY_TOGGLE,
    KEY_UP,
)
from todo_tui.tui.events import KeyEvent
from todo_tui.tui.state import AppState, Screen

logger = logging.getLogger(__name__)


def handle_event(state: AppState, event: KeyEvent) -> bool:
    """Apply one key event to the state.

    Release events are read and discarded so that terminals reporting both
    press and release never trigger an action twice.

    Returns:
        True while the session should keep running, False once the Exit
        screen has been reached.
    """
    if not event.is_press:
        logger.debug("Discarding %s event for %r", event.kind.value, event.key)
        return is_running(state)

    handler = _SCREEN_HANDLERS.get(state.current_screen)
    if handler is not None:
        previous = state.current_screen
        handler(state, event)
        if state.current_screen is not previous:
            logger.debug(
                "Screen %s -> %s on %r",
                previous.value,
                state.current_screen.value,
                event.key,
            )

    resolve_screen(state)
    return is_running(state)


def is_running(state: AppState) -> bool:
    return state.current_screen is not Screen.EXIT


def resolve_screen(state: AppState) -> Screen:
    """Return the screen to draw, falling back to Main when Edit has nothing to edit."""
    if state.current_screen is Screen.EDIT and state.currently_editing is None:
        state.current_screen = Screen.MAIN
    return state.current_screen


# -------------------- Main screen --------------------


def _handle_main(state: AppState, event: KeyEvent) -> None:
    key = event.key
    if key == KEY_ADD:
        state.input.reset()
        state.current_screen = Screen.ADD
    elif key == KEY_ENTER:
        _begin_edit(state)
    elif key == KEY_QUIT:
        state.current_screen = Screen.EXIT
    elif key == KEY_TOGGLE:
        item = state.selected_item()
        if item is not None:
            item.toggle()
    elif key == KEY_UP:
        if state.items:
            state.selection.select_previous(state.item_count)
    elif key == KEY_DOWN:
        if state.items:
            state.selection.select_next(state.item_count)
    elif key == KEY_DELETE:
        index = state.selection.selected
        if state.selected_item() is not None and index is not None:
            state.remove_at(index)


def _begin_edit(state: AppState) -> None:
    index = state.selection.selected
    item = state.selected_item()
    if not state.items or index is None or item is None:
        return
    state.currently_editing = item.copy()
    state.edit_index = index
    state.input.set_value(item.description)
    state.current_screen = Screen.EDIT


# -------------------- Add screen --------------------


def _handle_add(state: AppState, event: KeyEvent) -> None:
    if event.key == KEY_ESCAPE:
        state.input.reset()
        state.current_screen = Screen.MAIN
    elif event.key == KEY_ENTER:
        state.add_item(TaskItem(done=False, description=state.input.value_and_reset()))
        state.current_screen = Screen.MAIN
    else:
        state.input.handle_key(event)


# -------------------- Edit screen --------------------


def _handle_edit(state: AppState, event: KeyEvent) -> None:
    if event.key == KEY_ESCAPE:
        _finish_edit(state)
    elif event.key == KEY_ENTER:
        index = state.selection.selected
        editing = state.currently_editing
        if index is not None and editing is not None:
            description = state.input.value_and_reset()
            state.replace(TaskItem(done=editing.done, description=description), index)
        _finish_edit(state)
    else:
        state.input.handle_key(event)


def _finish_edit(state: AppState) -> None:
    state.input.reset()
    state.currently_editing = None
    state.current_screen = Screen.MAIN


_SCREEN_HANDLERS: Dict[Screen, Callable[[AppState, KeyEvent], None]] = {
    Screen.MAIN: _handle_main,
    Screen.ADD: _handle_add,
    Screen.EDIT: _handle_edit,
}
