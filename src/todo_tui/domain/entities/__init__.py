"""Domain entities."""

from todo_tui.domain.entities.task_item import TaskItem

__all__ = ["TaskItem"]
