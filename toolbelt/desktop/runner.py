"""External command runner for the desktop tools.

Contains:
- run_command: Run a command and return its output
"""

import subprocess

from toolbelt.desktop.exceptions import CommandError


def run_command(args: list[str], strip: bool = True) -> str:
    """Run an external command and return its output.

    Args:
        args: The command and its arguments.
        strip: Strip surrounding whitespace from the output.

    Returns:
        The stdout of the command.

    Raises:
        CommandError: If the command fails or is not installed.
    """
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise CommandError(f"Command failed: {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise CommandError(f"{args[0]} is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout
