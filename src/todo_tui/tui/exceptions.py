"""TUI exception classes.

Application-level conditions such as pressing Enter with nothing selected are
not errors; the controller treats them as no-ops. The exceptions here cover
programming errors against the state contract and terminal failures that end
the session.

Example usage:
    try:
        run_tui()
    except TerminalSessionError as e:
        console.print(f"[red]Error:[/red] {e}")
"""


class TodoTUIError(Exception):
    """Base exception for TUI errors."""


class ItemIndexError(TodoTUIError, IndexError):
    """Raised when a list operation receives an index outside ``[0, len)``.

    Attributes:
        operation: The list operation that was attempted (e.g., "remove", "replace")
        index: The offending index
        length: Length of the task list at the time of the call

    Example:
        >>> raise ItemIndexError("remove", 4, 2)
        >>> # str(error) -> "Cannot remove item at index 4: list has 2 items"
    """

    def __init__(self, operation: str, index: int, length: int):
        """Initialize ItemIndexError.

        Args:
            operation: The list operation that was attempted
            index: The offending index
            length: Length of the task list
        """
        self.operation = operation
        self.index = index
        self.length = length
        super().__init__(f"Cannot {operation} item at index {index}: list has {length} items")


class TerminalSessionError(TodoTUIError):
    """Raised when the terminal session fails during setup, input or drawing.

    Attributes:
        operation: The operation that failed (e.g., "run terminal session")
        message: Detailed error message describing the failure
    """

    def __init__(self, operation: str, message: str):
        """Initialize TerminalSessionError.

        Args:
            operation: The operation that failed
            message: Detailed error message
        """
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")
