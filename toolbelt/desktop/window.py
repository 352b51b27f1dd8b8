"""Window activation by WM_CLASS through wmctrl.

Contains:
- find_window_id: Find a window id in `wmctrl -lxG` output
- find_window: Query wmctrl for a window of a class
- activate_window: Raise and focus a window
"""

from typing import Optional

from toolbelt.desktop.runner import run_command


def find_window_id(wmctrl_output: str, window_class: str) -> Optional[str]:
    """Return the id of the first listed window matching the class."""
    for line in wmctrl_output.splitlines():
        if window_class in line:
            return line.split()[0]
    return None


def find_window(window_class: str) -> Optional[str]:
    return find_window_id(run_command(["wmctrl", "-lxG"]), window_class)


def activate_window(window_id: str) -> None:
    run_command(["wmctrl", "-ia", window_id])
