"""Runtime settings for todo-tui.

There are no configuration files. Settings come from environment variables,
and command-line options override them.

Environment:
    TODO_TUI_DEBUG: Enable debug logging ("1", "true" or "yes").
    TODO_TUI_LOG_FILE: Write log records to this file.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

ENV_DEBUG = "TODO_TUI_DEBUG"
ENV_LOG_FILE = "TODO_TUI_LOG_FILE"

TRUTHY_VALUES = ("1", "true", "yes")


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings.

    Attributes:
        debug: Log at DEBUG level instead of INFO.
        log_file: Destination for log records. When None, records go to the
            Textual devtools console.
    """

    debug: bool = False
    log_file: Optional[Path] = None

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        log_file = env.get(ENV_LOG_FILE, "").strip()
        return cls(
            debug=_is_truthy(env.get(ENV_DEBUG)),
            log_file=Path(log_file).expanduser() if log_file else None,
        )

    def with_overrides(
        self, debug: Optional[bool] = None, log_file: Optional[Path] = None
    ) -> "Settings":
        """Return a copy with any given command-line values applied."""
        settings = self
        if debug is not None:
            settings = replace(settings, debug=debug)
        if log_file is not None:
            settings = replace(settings, log_file=log_file)
        return settings
