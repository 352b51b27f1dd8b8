"""Workspace grid navigation for KDE Plasma through wmctrl and qdbus.

Workspaces are numbered row by row in a rows x cols grid. Left and right
wrap within the current row; up and down wrap within the current column.
"""

from enum import Enum

from toolbelt.desktop.exceptions import WorkspaceError
from toolbelt.desktop.runner import run_command

DEFAULT_ROWS = 3
DEFAULT_COLS = 3


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# KWin global shortcut names
EFFECTS = {
    "expose": "Expose",
    "exposeall": "ExposeAll",
    "desktopgrid": "ShowDesktopGrid",
}

OPTIONS = [direction.value for direction in Direction] + list(EFFECTS)


def parse_current_workspace(wmctrl_output: str) -> int:
    """Find the active workspace index in `wmctrl -d` output.

    Raises:
        WorkspaceError: If no line is marked active.
    """
    for line in wmctrl_output.splitlines():
        fields = line.split()
        if len(fields) > 1 and fields[1] == "*":
            return int(fields[0])
    raise WorkspaceError("Could not determine the current workspace.")


def next_workspace(current: int, direction: Direction, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> int:
    """Compute the neighbouring workspace index in the grid."""
    row, col = divmod(current, cols)

    if direction == Direction.LEFT:
        col = (col + cols - 1) % cols
    elif direction == Direction.RIGHT:
        col = (col + 1) % cols
    elif direction == Direction.UP:
        row = (row + rows - 1) % rows
    elif direction == Direction.DOWN:
        row = (row + 1) % rows

    return row * cols + col


def get_current_workspace() -> int:
    return parse_current_workspace(run_command(["wmctrl", "-d"]))


def switch_workspace(workspace: int) -> None:
    run_command(["wmctrl", "-s", str(workspace)])


def invoke_effect(option: str) -> None:
    """Trigger a KWin effect such as Expose."""
    run_command(
        ["qdbus", "org.kde.kglobalaccel", "/component/kwin", "invokeShortcut", EFFECTS[option]]
    )
