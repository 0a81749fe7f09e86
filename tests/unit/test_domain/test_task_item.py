"""Tests for the TaskItem entity."""

from todo_tui.domain.entities import TaskItem


class TestTaskItem:
    """Tests for TaskItem."""

    def test_defaults(self) -> None:
        """New items are not done and have an empty description."""
        item = TaskItem()
        assert item.done is False
        assert item.description == ""

    def test_toggle_flips_done(self) -> None:
        """toggle flips the done flag in place."""
        item = TaskItem(description="buy milk")
        item.toggle()
        assert item.done is True
        item.toggle()
        assert item.done is False

    def test_copy_is_independent(self) -> None:
        """Changes to a copy do not affect the original."""
        original = TaskItem(done=True, description="buy milk")
        copy = original.copy()

        copy.description = "buy oat milk"
        copy.toggle()

        assert original == TaskItem(done=True, description="buy milk")
        assert copy is not original

