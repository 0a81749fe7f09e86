"""Domain layer for todo-tui."""
