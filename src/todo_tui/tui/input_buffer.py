"""Single-line text input buffer used by the Add and Edit screens.

The buffer tracks its value and a character cursor. Widths are measured in
terminal cells with Rich, so wide glyphs (CJK, emoji) occupy two columns when
computing the caret position and horizontal scroll.

Example usage:
    buffer = InputBuffer("buy milk")
    buffer.handle_key(KeyEvent.press("home"))
    scroll = buffer.visual_scroll(20)
"""

import logging
from typing import Callable, Dict

from rich.cells import cell_len

from todo_tui.tui.events import KeyEvent

logger = logging.getLogger(__name__)


class InputBuffer:
    """Editable text value with a cursor.

    Attributes:
        value: Current text.
        cursor: Cursor position as a character index in ``[0, len(value)]``.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._cursor = len(value)

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_value(self, value: str) -> None:
        """Replace the text and move the cursor to its end."""
        self._value = value
        self._cursor = len(value)

    def reset(self) -> None:
        """Clear the text and cursor."""
        self._value = ""
        self._cursor = 0

    def value_and_reset(self) -> str:
        """Return the current text and clear the buffer."""
        value = self._value
        self.reset()
        return value

    def visual_cursor(self) -> int:
        """Cell width of the text before the cursor."""
        return cell_len(self._value[: self._cursor])

    def visual_scroll(self, width: int) -> int:
        """Return the horizontal scroll, in cells, that keeps the cursor visible.

        The scroll always lands on a character boundary, so a wide glyph is
        either fully shown or fully scrolled out.

        Args:
            width: Number of cells available to the left of the caret.
        """
        width = max(width, 0)
        target = max(self.visual_cursor(), width) - width
        scroll = 0
        for char in self._value:
            if scroll >= target:
                break
            scroll += cell_len(char)
        return scroll

    def char_index_at_cell(self, cells: int) -> int:
        """Return the index of the first character starting at or after ``cells``."""
        offset = 0
        for index, char in enumerate(self._value):
            if offset >= cells:
                return index
            offset += cell_len(char)
        return len(self._value)

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply an editing key to the buffer.

        Returns:
            True if the key was recognised, False if it was ignored.
        """
        action = self._actions().get(event.key)
        if action is not None:
            action()
            return True
        if event.is_printable:
            self.insert(event.character)  # type: ignore[arg-type]
            return True
        logger.debug("Input buffer ignored key %r", event.key)
        return False

    def _actions(self) -> Dict[str, Callable[[], None]]:
        return {
            "backspace": self.delete_previous_char,
            "delete": self.delete_next_char,
            "left": self.move_left,
            "right": self.move_right,
            "home": self.move_home,
            "ctrl+a": self.move_home,
            "end": self.move_end,
            "ctrl+e": self.move_end,
            "ctrl+left": self.move_word_left,
            "alt+b": self.move_word_left,
            "ctrl+right": self.move_word_right,
            "alt+f": self.move_word_right,
            "ctrl+w": self.delete_previous_word,
            "ctrl+backspace": self.delete_previous_word,
            "ctrl+u": self.delete_to_start,
            "ctrl+k": self.delete_to_end,
        }

    # -------------------- editing --------------------

    def insert(self, text: str) -> None:
        self._value = self._value[: self._cursor] + text + self._value[self._cursor :]
        self._cursor += len(text)

    def delete_previous_char(self) -> None:
        if self._cursor == 0:
            return
        self._value = self._value[: self._cursor - 1] + self._value[self._cursor :]
        self._cursor -= 1

    def delete_next_char(self) -> None:
        self._value = self._value[: self._cursor] + self._value[self._cursor + 1 :]

    def delete_previous_word(self) -> None:
        start = self._previous_word_start()
        self._value = self._value[:start] + self._value[self._cursor :]
        self._cursor = start

    def delete_to_start(self) -> None:
        self._value = self._value[self._cursor :]
        self._cursor = 0

    def delete_to_end(self) -> None:
        self._value = self._value[: self._cursor]

    # -------------------- motion --------------------

    def move_left(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def move_right(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._value))

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._value)

    def move_word_left(self) -> None:
        self._cursor = self._previous_word_start()

    def move_word_right(self) -> None:
        index = self._cursor
        length = len(self._value)
        while index < length and not self._value[index].isspace():
            index += 1
        while index < length and self._value[index].isspace():
            index += 1
        self._cursor = index

    def _previous_word_start(self) -> int:
        index = self._cursor
        while index > 0 and self._value[index - 1].isspace():
            index -= 1
        while index > 0 and not self._value[index - 1].isspace():
            index -= 1
        return index

    def __repr__(self) -> str:
        return f"InputBuffer(value={self._value!r}, cursor={self._cursor})"
