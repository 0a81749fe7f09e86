"""Application state for the TODO TUI.

A single ``AppState`` is created at startup and handed to the controller for
every key event. It holds the active screen, the task list, the selection
cursor and the text being composed or edited.

Example usage:
    state = AppState()
    state.add_item(TaskItem(description="buy milk"))
    state.selection.select_next(state.item_count)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from todo_tui.domain.entities import TaskItem
from todo_tui.tui.exceptions import ItemIndexError
from todo_tui.tui.input_buffer import InputBuffer

logger = logging.getLogger(__name__)


class Screen(Enum):
    """The modal state of the application. Exactly one is active."""

    MAIN = "main"
    ADD = "add"
    EDIT = "edit"
    EXIT = "exit"


@dataclass
class ListSelection:
    """Selected row and viewport offset of the task list.

    ``selected`` is None whenever the list is empty. Navigation clamps at the
    first and last rows instead of wrapping.

    Attributes:
        selected: Index of the highlighted task, or None.
        offset: Index of the first row visible in the list viewport.
    """

    selected: Optional[int] = None
    offset: int = 0

    def select(self, index: Optional[int]) -> None:
        self.selected = index

    def select_next(self, count: int) -> None:
        """Move down one row; from no selection, select the first row."""
        if count == 0:
            self.selected = None
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = min(self.selected + 1, count - 1)

    def select_previous(self, count: int) -> None:
        """Move up one row; from no selection, select the last row."""
        if count == 0:
            self.selected = None
            return
        if self.selected is None:
            self.selected = count - 1
        else:
            self.selected = max(self.selected - 1, 0)

    def clamp(self, count: int) -> None:
        """Pull the selection back inside ``[0, count)`` after the list shrinks."""
        if count == 0:
            self.selected = None
            self.offset = 0
        elif self.selected is not None and self.selected >= count:
            self.selected = count - 1
        self.offset = min(self.offset, max(count - 1, 0))

    def scroll_into_view(self, count: int, height: int) -> int:
        """Adjust and return the viewport offset so the selection is visible.

        Args:
            count: Number of rows in the list.
            height: Number of rows the viewport can show.
        """
        if height <= 0 or count == 0:
            self.offset = 0
            return self.offset
        self.offset = min(self.offset, max(count - height, 0))
        if self.selected is not None:
            if self.selected < self.offset:
                self.offset = self.selected
            elif self.selected >= self.offset + height:
                self.offset = self.selected - height + 1
        return self.offset


class AppState:
    """Mutable state driving the whole session.

    The state object enforces the list contract only. Screen transitions and
    their preconditions are the controller's responsibility.

    Attributes:
        current_screen: The active screen.
        items: Tasks in display order.
        selection: Selection cursor over ``items``.
        input: Text being composed on the Add/Edit screens.
        currently_editing: Copy of the task being edited, if any.
        edit_index: Index the edited task was taken from.
    """

    def __init__(self, items: Optional[List[TaskItem]] = None) -> None:
        self.current_screen: Screen = Screen.MAIN
        self.items: List[TaskItem] = list(items) if items else []
        self.selection = ListSelection()
        self.input = InputBuffer()
        self.currently_editing: Optional[TaskItem] = None
        self.edit_index: int = 0

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self.items if item.done)

    def selected_item(self) -> Optional[TaskItem]:
        """Return the selected task, or None when nothing valid is selected."""
        index = self.selection.selected
        if index is None or not 0 <= index < len(self.items):
            return None
        return self.items[index]

    def add_item(self, item: TaskItem) -> None:
        """Append a task to the end of the list."""
        self.items.append(item)
        logger.debug("Added item %d: %r", len(self.items) - 1, item.description)

    def remove_at(self, index: int) -> TaskItem:
        """Remove and return the task at ``index``.

        Raises:
            ItemIndexError: If ``index`` is outside ``[0, len)``.
        """
        self._check_index("remove", index)
        item = self.items.pop(index)
        self.selection.clamp(len(self.items))
        logger.debug("Removed item %d: %r", index, item.description)
        return item

    def replace(self, item: TaskItem, index: int) -> None:
        """Put ``item`` at ``index`` in place of the current task.

        Raises:
            ItemIndexError: If ``index`` is outside ``[0, len)``.
        """
        self._check_index("replace", index)
        self.items[index] = item
        logger.debug("Replaced item %d with %r", index, item.description)

    def _check_index(self, operation: str, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise ItemIndexError(operation, index, len(self.items))
