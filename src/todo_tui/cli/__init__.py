"""Command-line entry point for todo-tui."""

import sys


def main() -> None:
    """Entry point for the todo-tui command."""
    try:
        from todo_tui.cli.app import create_app
    except ImportError as e:
        if "typer" in str(e).lower() or "textual" in str(e).lower():
            print("todo-tui requires typer and textual. Install with: pip install todo-tui")
            sys.exit(1)
        raise

    app = create_app()
    app()


if __name__ == "__main__":
    main()
