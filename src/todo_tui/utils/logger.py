"""Logging setup for the TUI process.

The terminal belongs to the interface while the session runs, so records are
never written to stdout or stderr. They go to a log file when one is
configured, otherwise to the Textual devtools console.
"""

import logging
from pathlib import Path

from textual.logging import TextualHandler

from todo_tui.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_CONFIGURED_ATTR = "_todo_tui_logging_configured"


def configure_logging(settings: Settings) -> logging.Handler:
    """Attach a single handler for the ``todo_tui`` logger tree.

    Calling this again replaces the handler installed by a previous call.

    Returns:
        The handler that was installed.
    """
    package_logger = logging.getLogger("todo_tui")
    for handler in list(package_logger.handlers):
        if getattr(handler, _CONFIGURED_ATTR, False):
            package_logger.removeHandler(handler)
            handler.close()

    handler: logging.Handler
    if settings.log_file is not None:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = TextualHandler(stderr=False, stdout=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _CONFIGURED_ATTR, True)

    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False
    package_logger.debug("Logging configured at level %s", logging.getLevelName(settings.log_level))
    return handler
