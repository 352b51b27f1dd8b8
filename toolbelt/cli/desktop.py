"""CLI commands for the desktop helpers."""

from typing import Optional

import typer

from toolbelt.desktop import BrightnessError, CommandError, log, notify
from toolbelt.desktop.brightness import (
    USAGE,
    compute_brightness,
    get_brightness,
    set_brightness,
)
from toolbelt.desktop.window import activate_window, find_window
from toolbelt.desktop.workspace import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    EFFECTS,
    OPTIONS,
    Direction,
    get_current_workspace,
    invoke_effect,
    next_workspace,
    switch_workspace,
)

BRIGHTNESS_TITLE = "Brightness Control"
WINDOW_NOTIFY_TIMEOUT_MS = 2000


def log_and_notify(message: str, status: str = "info") -> None:
    """Log a brightness message and show it as a notification."""
    title = BRIGHTNESS_TITLE
    if status == "error":
        title += " - Error"
    elif status == "warning":
        title += " - Warning"
    log(message, err=status == "error")
    notify(title, message)


def brightness_command(
    param: Optional[str] = typer.Argument(
        None,
        help='"increase", "decrease", or a number from 30 to 100',
    ),
) -> None:
    """Adjust the brightness of an external display through ddcutil."""
    log(f"Running brightness control with parameter: {param or ''}")
    if not param:
        log_and_notify(USAGE, "error")
        raise typer.Exit(1)

    try:
        current = get_brightness()
        new = compute_brightness(current, param)
        log(f"current_brightness: {current}")
        log(f"new_brightness: {new}")

        if current == new:
            log_and_notify(
                f"Left brightness as is since it was at {current}% and new brightness was {new}%"
            )
            return

        set_brightness(new)
    except BrightnessError as e:
        log_and_notify(str(e), "error")
        raise typer.Exit(1)

    log_and_notify(f"Adjusted external display brightness from {current}% to {new}%")


def workspace_command(
    option: str = typer.Argument(
        ...,
        help=f"One of: {', '.join(OPTIONS)}",
    ),
    rows: int = typer.Option(DEFAULT_ROWS, "--rows", min=1, help="Rows in the workspace grid"),
    cols: int = typer.Option(DEFAULT_COLS, "--cols", min=1, help="Columns in the workspace grid"),
) -> None:
    """Move around a grid of workspaces or invoke a KWin overview effect."""
    option = option.lower()
    if option not in OPTIONS:
        typer.echo(f"Usage: toolbelt workspace ({'|'.join(OPTIONS)})", err=True)
        raise typer.Exit(1)

    try:
        if option in EFFECTS:
            typer.echo(f"Invoking [{option}] effect")
            invoke_effect(option)
            return

        workspace = next_workspace(get_current_workspace(), Direction(option), rows, cols)
        typer.echo(f"Switching [{option}] to workspace [{workspace}]")
        switch_workspace(workspace)
    except CommandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def announce(message: str) -> None:
    """Echo a window switcher message and show it as a notification."""
    notify(message, timeout_ms=WINDOW_NOTIFY_TIMEOUT_MS)
    typer.echo(message)


def switch_window_command(
    window_class: Optional[str] = typer.Argument(
        None,
        help="WM_CLASS (or part of it) of the window to activate",
    ),
) -> None:
    """Activate the first window whose class matches."""
    if not window_class:
        announce("You must specify a window class")
        raise typer.Exit(1)

    announce(f"Looking for window with class: {window_class}")
    try:
        window_id = find_window(window_class)
        if not window_id:
            announce(f"Could not find [{window_class}] window to switch to.")
            raise typer.Exit(1)

        announce(f"Switching to [{window_class}] window with ID [{window_id}]")
        activate_window(window_id)
    except CommandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
