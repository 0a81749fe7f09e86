"""TUI constants for keybindings and the visual representation of tasks."""

# Main screen keybindings (Textual key names)
KEY_ADD: str = "a"
KEY_QUIT: str = "q"
KEY_TOGGLE: str = "space"
KEY_DELETE: str = "d"
KEY_UP: str = "up"
KEY_DOWN: str = "down"

# Keys shared by every screen
KEY_ENTER: str = "enter"
KEY_ESCAPE: str = "escape"

# Row prefixes for the task list
PENDING_ICON: str = "☐"
DONE_ICON: str = "✓"

# Rich styles for list rendering
# Done rows are greyed out and struck through; the selected row is highlighted
PENDING_STYLE: str = "white"
DONE_STYLE: str = "#9e9e9e strike"
HIGHLIGHT_STYLE: str = "bold on #1e293b"
BORDER_STYLE: str = "#64748b"
TITLE_STYLE: str = "white"
CARET_STYLE: str = "reverse"

# Panel titles per screen
MAIN_TITLE: str = "TODO"
ADD_TITLE: str = "New item"
EDIT_TITLE: str = "Edit item"

# Input box geometry
# The box is inset by MIN_AREA_WIDTH columns and never narrower than zero
INPUT_BOX_HEIGHT: int = 3
MIN_AREA_WIDTH: int = 3
BORDER_WIDTH: int = 1

# Key help shown in the application footer
SHORTCUTS: list[tuple[str, str]] = [
    ("a", "Add"),
    ("enter", "Edit"),
    ("space", "Toggle"),
    ("d", "Delete"),
    ("q", "Quit"),
]
