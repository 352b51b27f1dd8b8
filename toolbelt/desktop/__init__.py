"""Desktop helpers for toolbelt.

This package wraps desktop command-line tools:
- exceptions: CommandError, BrightnessError, WorkspaceError
- runner: run_command
- notify: log, notify
- brightness: ddcutil brightness control
- workspace: wmctrl/qdbus workspace navigation
- window: wmctrl window activation
"""

from toolbelt.desktop.exceptions import (
    BrightnessError,
    CommandError,
    WorkspaceError,
)
from toolbelt.desktop.runner import run_command
from toolbelt.desktop.notify import log, notify


__all__ = [
    # Exceptions
    "CommandError",
    "BrightnessError",
    "WorkspaceError",
    # Runner
    "run_command",
    # Output
    "log",
    "notify",
]
