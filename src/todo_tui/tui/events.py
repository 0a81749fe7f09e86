"""Keyboard events consumed by the screen controller.

Textual key events are adapted into ``KeyEvent`` so the controller never
depends on the terminal backend and can be driven directly from tests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from textual import events


class KeyEventKind(Enum):
    """Whether a key went down or came back up."""

    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A single logical key event.

    Attributes:
        key: Textual key name ("a", "enter", "escape", "up", "ctrl+w", ...).
        character: The printable character for the key, if any.
        kind: Press or release. Only presses are acted upon.
    """

    key: str
    character: Optional[str] = None
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()

    @classmethod
    def from_textual(cls, event: events.Key) -> "KeyEvent":
        """Adapt a Textual key event. Textual only reports key presses."""
        return cls(key=event.key, character=event.character)

    @classmethod
    def press(cls, key: str, character: Optional[str] = None) -> "KeyEvent":
        """Build a press event, inferring the character for single-glyph keys."""
        if character is None:
            if key == "space":
                character = " "
            elif len(key) == 1:
                character = key
        return cls(key=key, character=character)

    @classmethod
    def release(cls, key: str, character: Optional[str] = None) -> "KeyEvent":
        """Build the release counterpart of :meth:`press`."""
        pressed = cls.press(key, character)
        return cls(key=pressed.key, character=pressed.character, kind=KeyEventKind.RELEASE)
