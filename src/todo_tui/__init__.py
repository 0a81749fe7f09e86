"""todo-tui - an interactive terminal TODO-list manager.

Tasks live in memory for the lifetime of the process.
"""

try:
    from todo_tui._version import __version__
except ImportError:
    __version__ = "0.1.0"

__all__ = ["__version__"]
