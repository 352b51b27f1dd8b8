"""Shared utility functions for CLI commands."""

import shutil
import subprocess
from typing import Optional

import typer

from toolbelt.config import HelperConfig
from toolbelt.pipeline import GenerationResult

DIVIDER = "-" * 80

# Checked in order; the first one on PATH wins
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def select_option(title: str, options: list[str], default: int = 1) -> int:
    """Show a numbered menu and return the index of the chosen option.

    Re-prompts until a number in range is entered.

    Args:
        title: Question shown above the options.
        options: Option labels.
        default: 1-based default choice.

    Returns:
        0-based index into options.
    """
    if not options:
        raise ValueError("No options to choose from.")

    typer.echo(title)
    for i, option in enumerate(options, 1):
        typer.echo(f"  {i}. {option}")

    while True:
        choice = typer.prompt(f"Select an option (1-{len(options)})", type=int, default=default)
        if 1 <= choice <= len(options):
            return choice - 1
        typer.echo("Invalid choice.", err=True)


def find_clipboard_command() -> Optional[list[str]]:
    """Find an available clipboard writer.

    Returns:
        Command parts, or None if no clipboard utility is installed.
    """
    for command in CLIPBOARD_COMMANDS:
        # noinspection PyArgumentList
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Returns:
        True if the text was copied, False otherwise.
    """
    command = find_clipboard_command()
    if command is None:
        return False

    try:
        result = subprocess.run(command, input=text, text=True, capture_output=True, check=False)
    except OSError:
        return False
    return result.returncode == 0


def report_error(error: Exception) -> None:
    """Print an error as its kind and message."""
    typer.echo("\nEncountered an error:", err=True)
    typer.echo(f"{type(error).__name__}: {error}", err=True)


def display_result(result: GenerationResult, copied: bool) -> None:
    """Print the timing line and the rendered message."""
    typer.echo(f"\nTime to get message: {result.elapsed:.2f} seconds", err=True)
    if copied:
        typer.echo(
            f"\nThe {result.spec.noun} has been copied to your clipboard and is displayed below:\n",
            err=True,
        )
    else:
        typer.echo(
            f"\nWarning: could not copy the {result.spec.noun} to the clipboard. It is displayed below:\n",
            err=True,
        )
    typer.echo(result.message)
    typer.echo(DIVIDER)


def display_debug_info(config: HelperConfig, result: GenerationResult) -> None:
    """Display details of the last request and reply."""
    typer.echo("=" * 60)
    typer.echo("                  GIT HELPER DEBUG INFO")
    typer.echo("=" * 60)
    typer.echo()

    typer.echo(f"Mode: {result.spec.mode.value}")
    typer.echo(f"Endpoint: {config.base_url}")
    typer.echo(f"Model: {config.model}")
    typer.echo(f"Temperature: {config.temperature}")
    typer.echo(f"Attempts: {result.attempts} of {config.max_attempts}")
    typer.echo(f"Elapsed: {result.elapsed:.2f} seconds")
    typer.echo(f"Prompt: {len(result.prompt):,} chars")
    typer.echo()

    typer.echo("Raw Arguments:")
    typer.echo(f"  {result.arguments}")
    typer.echo()

    typer.echo("Fields:")
    for name, value in result.fields.model_dump().items():
        first_line = value.splitlines()[0] if value else ""
        suffix = " ..." if len(value.splitlines()) > 1 else ""
        typer.echo(f"  {name}: {first_line}{suffix}")

    typer.echo()
    typer.echo("=" * 60)
