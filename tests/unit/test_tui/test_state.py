"""Tests for AppState and ListSelection.

This module tests the list contract (add/remove/replace), index errors and
the clamped selection cursor.
"""

import pytest

from todo_tui.domain.entities import TaskItem
from todo_tui.tui.exceptions import ItemIndexError
from todo_tui.tui.state import AppState, ListSelection, Screen


class TestAppStateInit:
    """Tests for the initial state."""

    def test_defaults(self, empty_state: AppState) -> None:
        """A new state starts on Main with nothing selected or being edited."""
        assert empty_state.current_screen is Screen.MAIN
        assert empty_state.items == []
        assert empty_state.selection.selected is None
        assert empty_state.input.value == ""
        assert empty_state.currently_editing is None
        assert empty_state.edit_index == 0

    def test_items_are_copied_into_new_list(self, sample_items: list[TaskItem]) -> None:
        """The state does not share the caller's list object."""
        state = AppState(items=sample_items)
        state.add_item(TaskItem(description="extra"))
        assert len(sample_items) == 3

    def test_counts(self, populated_state: AppState) -> None:
        """item_count and completed_count summarise the list."""
        assert populated_state.item_count == 3
        assert populated_state.completed_count == 1


class TestAppStateMutation:
    """Tests for add_item, remove_at and replace."""

    def test_add_item_appends(self, populated_state: AppState) -> None:
        """add_item appends to the end."""
        populated_state.add_item(TaskItem(description="new"))
        assert populated_state.items[-1].description == "new"
        assert populated_state.item_count == 4

    def test_add_item_does_not_move_selection(self, populated_state: AppState) -> None:
        """Appending keeps the current selection."""
        populated_state.selection.select(1)
        populated_state.add_item(TaskItem(description="new"))
        assert populated_state.selection.selected == 1

    def test_remove_at_returns_removed_item(self, populated_state: AppState) -> None:
        """remove_at removes and returns the item."""
        removed = populated_state.remove_at(1)
        assert removed.description == "water plants"
        assert [i.description for i in populated_state.items] == ["buy milk", "call mom"]

    def test_remove_last_selected_item_clamps_selection(self, populated_state: AppState) -> None:
        """Removing the selected last row moves the selection up."""
        populated_state.selection.select(2)
        populated_state.remove_at(2)
        assert populated_state.selection.selected == 1

    def test_remove_only_item_clears_selection(self) -> None:
        """The selection becomes None once the list is empty."""
        state = AppState(items=[TaskItem(description="only")])
        state.selection.select(0)
        state.remove_at(0)
        assert state.selection.selected is None

    def test_replace_keeps_order_and_length(self, populated_state: AppState) -> None:
        """replace swaps in the new item at the same position."""
        populated_state.replace(TaskItem(done=True, description="buy oat milk"), 0)
        assert populated_state.item_count == 3
        assert populated_state.items[0] == TaskItem(done=True, description="buy oat milk")
        assert populated_state.items[1].description == "water plants"

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_remove_out_of_range_raises(self, populated_state: AppState, index: int) -> None:
        """Out-of-range indices, negative ones included, raise ItemIndexError."""
        with pytest.raises(ItemIndexError) as exc_info:
            populated_state.remove_at(index)
        assert exc_info.value.index == index
        assert exc_info.value.length == 3
        assert populated_state.item_count == 3

    def test_replace_out_of_range_raises(self, empty_state: AppState) -> None:
        """replace on an empty list raises an IndexError subclass."""
        with pytest.raises(IndexError, match="Cannot replace item at index 0: list has 0 items"):
            empty_state.replace(TaskItem(description="x"), 0)

    def test_selected_item(self, populated_state: AppState) -> None:
        """selected_item returns the highlighted task or None."""
        assert populated_state.selected_item() is None
        populated_state.selection.select(2)
        assert populated_state.selected_item() is populated_state.items[2]


class TestListSelection:
    """Tests for clamped navigation."""

    def test_next_from_none_selects_first(self) -> None:
        selection = ListSelection()
        selection.select_next(3)
        assert selection.selected == 0

    def test_previous_from_none_selects_last(self) -> None:
        selection = ListSelection()
        selection.select_previous(3)
        assert selection.selected == 2

    def test_next_clamps_at_last(self) -> None:
        """Down on the last row stays on the last row (no wrap)."""
        selection = ListSelection(selected=2)
        selection.select_next(3)
        assert selection.selected == 2

    def test_previous_clamps_at_first(self) -> None:
        """Up on the first row stays on the first row (no wrap)."""
        selection = ListSelection(selected=0)
        selection.select_previous(3)
        assert selection.selected == 0

    def test_empty_list_clears_selection(self) -> None:
        selection = ListSelection(selected=1)
        selection.select_next(0)
        assert selection.selected is None

    def test_clamp(self) -> None:
        selection = ListSelection(selected=5, offset=4)
        selection.clamp(3)
        assert selection.selected == 2
        assert selection.offset == 2

    @pytest.mark.parametrize(
        "selected,offset,expected",
        [
            (0, 0, 0),
            (4, 0, 2),
            (9, 0, 7),
            (1, 5, 1),
            (None, 3, 3),
        ],
    )
    def test_scroll_into_view(self, selected, offset: int, expected: int) -> None:
        """The viewport follows the selection with a height of 3 rows."""
        selection = ListSelection(selected=selected, offset=offset)
        assert selection.scroll_into_view(10, 3) == expected

    def test_scroll_into_view_zero_height(self) -> None:
        selection = ListSelection(selected=4, offset=2)
        assert selection.scroll_into_view(10, 0) == 0
