"""
Task Item Domain Entity.

A single to-do entry: a completion flag and a free-text description.
"""

from dataclasses import dataclass, replace


@dataclass
class TaskItem:
    """
    A to-do entry owned by the task list that contains it.

    Items are value objects: the edit flow works on a copy so the list is
    left untouched until the edit is committed.

    Attributes:
        done: Whether the task has been completed
        description: Free-text description shown in the list
    """

    done: bool = False
    description: str = ""

    def toggle(self) -> None:
        """Flip the completion flag in place."""
        self.done = not self.done

    def copy(self) -> "TaskItem":
        """Return an independent copy of this item."""
        return replace(self)
