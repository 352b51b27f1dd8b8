"""Desktop tool exception classes.

Contains:
- CommandError: Base exception for failed external desktop commands
- BrightnessError: Raised when the display brightness cannot be read or set
- WorkspaceError: Raised when the workspace cannot be determined or switched
"""


class CommandError(Exception):
    """Raised when an external command fails or is missing."""

    pass


class BrightnessError(CommandError):
    """Raised for invalid brightness requests or ddcutil failures."""

    pass


class WorkspaceError(CommandError):
    """Raised when wmctrl output cannot be interpreted."""

    pass
