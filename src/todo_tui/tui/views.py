"""Rendering for the TODO TUI screens.

Every redraw rebuilds the renderable for the active screen from scratch. The
views never look at what changed; they only read the current ``AppState``.

Main screen:
    ╭────────────── TODO ──────────────╮
    │  ☐ buy milk                      │
    │  ✓ water plants                  │
    ╰──────────────────────────────────╯

Add/Edit screens:
    ┌ New item ──────────────────────┐
    │buy oat milk█                   │
    └────────────────────────────────┘
"""

from typing import List, Optional, Tuple

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.geometry import Offset, Region, Size

from todo_tui.domain.entities import TaskItem
from todo_tui.tui.constants import (
    ADD_TITLE,
    BORDER_STYLE,
    BORDER_WIDTH,
    CARET_STYLE,
    DONE_ICON,
    DONE_STYLE,
    EDIT_TITLE,
    HIGHLIGHT_STYLE,
    INPUT_BOX_HEIGHT,
    MAIN_TITLE,
    MIN_AREA_WIDTH,
    PENDING_ICON,
    PENDING_STYLE,
    SHORTCUTS,
    TITLE_STYLE,
)
from todo_tui.tui.controller import resolve_screen
from todo_tui.tui.input_buffer import InputBuffer
from todo_tui.tui.state import AppState, Screen


def render_screen(state: AppState, size: Size) -> Tuple[RenderableType, Optional[Offset]]:
    """Build the frame for the active screen.

    Args:
        state: Application state to draw.
        size: Size of the terminal surface in cells.

    Returns:
        The renderable and, on the input screens, the caret position relative
        to the top-left corner of the surface.
    """
    screen = resolve_screen(state)
    if screen is Screen.MAIN:
        return render_main(state, size), None
    if screen in (Screen.ADD, Screen.EDIT):
        title = ADD_TITLE if screen is Screen.ADD else EDIT_TITLE
        region = input_region(size.width)
        return render_input(state.input, title, region), caret_offset(state.input, region)
    return Text(""), None


# -------------------- Main screen --------------------


def task_row(item: TaskItem, width: int, selected: bool = False) -> Text:
    """Render one task as a single padded row."""
    icon = DONE_ICON if item.done else PENDING_ICON
    style = DONE_STYLE if item.done else PENDING_STYLE
    if selected:
        style = f"{style} {HIGHLIGHT_STYLE}"
    row = Text(f" {icon} {item.description}", style=style, no_wrap=True, end="")
    row.truncate(max(width, 0), pad=True)
    return row


def render_main(state: AppState, size: Size) -> Panel:
    """Render the bordered task list, scrolled so the selection is visible."""
    inner_width = max(size.width - 2 * BORDER_WIDTH, 0)
    inner_height = max(size.height - 2 * BORDER_WIDTH, 0)
    offset = state.selection.scroll_into_view(state.item_count, inner_height)

    rows: List[Text] = []
    for index, item in enumerate(state.items[offset : offset + inner_height], start=offset):
        rows.append(task_row(item, inner_width, selected=index == state.selection.selected))

    body = Text("\n").join(rows) if rows else Text("")
    return Panel(
        body,
        title=Text(MAIN_TITLE, style=TITLE_STYLE),
        title_align="center",
        subtitle=shortcut_hint(),
        subtitle_align="right",
        box=box.ROUNDED,
        border_style=BORDER_STYLE,
        padding=0,
        width=size.width,
        height=size.height,
    )


def shortcut_hint() -> Text:
    hint = Text()
    for key, label in SHORTCUTS:
        hint.append(f" {key} ", style="bold")
        hint.append(f"{label} ", style="dim")
    return hint


# -------------------- Add/Edit screens --------------------


def input_region(screen_width: int) -> Region:
    """Return the area of the input box for a surface ``screen_width`` cells wide."""
    width = max(screen_width, MIN_AREA_WIDTH) - MIN_AREA_WIDTH
    return Region(0, 0, width, INPUT_BOX_HEIGHT)


def _scroll_width(region: Region) -> int:
    # Cells between the left border and the last column the caret may occupy
    return max(region.width - 2 * BORDER_WIDTH - 1, 0)


def caret_offset(buffer: InputBuffer, region: Region) -> Offset:
    """Position of the caret: one cell right of the scrolled cursor, one row below the top border."""
    scroll = buffer.visual_scroll(_scroll_width(region))
    x = max(buffer.visual_cursor(), scroll) - scroll + BORDER_WIDTH
    return Offset(region.x + x, region.y + BORDER_WIDTH)


def visible_text(buffer: InputBuffer, region: Region) -> Text:
    """Return the scrolled slice of the buffer with the caret cell styled."""
    scroll = buffer.visual_scroll(_scroll_width(region))
    start = buffer.char_index_at_cell(scroll)
    value = buffer.value[start:]
    cursor = buffer.cursor - start

    text = Text(no_wrap=True, overflow="crop", end="")
    text.append(value[:cursor])
    text.append(value[cursor : cursor + 1] or " ", style=CARET_STYLE)
    text.append(value[cursor + 1 :])
    return text


def render_input(buffer: InputBuffer, title: str, region: Region) -> RenderableType:
    """Render the single-line bordered input box."""
    if region.width < 2 * BORDER_WIDTH:
        return Text("")
    return Panel(
        visible_text(buffer, region),
        title=title,
        title_align="left",
        box=box.SQUARE,
        padding=0,
        width=region.width,
        height=region.height,
    )
