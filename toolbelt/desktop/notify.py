"""Console and desktop notification output.

Contains:
- log: Print a timestamped line
- notify: Show a desktop notification via notify-send
"""

import subprocess
from datetime import datetime
from typing import Optional

import typer

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def log(message: str, err: bool = False) -> None:
    """Print a message prefixed with the current time."""
    typer.echo(f"{datetime.now().strftime(TIMESTAMP_FORMAT)} | {message}", err=err)


def notify(title: str, message: str = "", timeout_ms: Optional[int] = None) -> bool:
    """Show a desktop notification.

    A missing or failing notify-send only prints a warning.

    Args:
        title: Notification summary line.
        message: Notification body.
        timeout_ms: Expiry in milliseconds (server default when omitted).

    Returns:
        True if the notification was sent.
    """
    args = ["notify-send"]
    if timeout_ms is not None:
        args += ["-t", str(timeout_ms)]
    args.append(title)
    if message:
        args.append(message)

    try:
        result = subprocess.run(args, capture_output=True, text=True, check=False)
    except OSError as e:
        log(f"Warning: could not send notification: {e}", err=True)
        return False

    if result.returncode != 0:
        log(f"Warning: notify-send exited with status {result.returncode}", err=True)
        return False
    return True
