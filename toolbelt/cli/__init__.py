"""CLI entry points for toolbelt.

This module assembles the `toolbelt` umbrella application and the
standalone `git-helper` application.
"""

import typer

from toolbelt import __version__
from toolbelt.cli.ask import ask_command
from toolbelt.cli.config import config_app
from toolbelt.cli.desktop import (
    brightness_command,
    switch_window_command,
    workspace_command,
)
from toolbelt.cli.git_helper import git_helper_command
from toolbelt.cli.images import resize_images_command
from toolbelt.cli.vault import vault_cleanup_command


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"toolbelt {__version__}")
        raise typer.Exit()


def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Personal command-line helpers."""


# Main application
app = typer.Typer(
    name="toolbelt",
    help="toolbelt: personal command-line helpers",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("git")(git_helper_command)
app.command("ask")(ask_command)
app.command("resize-images")(resize_images_command)
app.command("brightness")(brightness_command)
app.command("workspace")(workspace_command)
app.command("switch-window")(switch_window_command)
app.command("vault-cleanup")(vault_cleanup_command)

app.callback()(main_callback)

# Standalone git helper: git-helper [MODE] [TARGET_BRANCH]
git_helper_app = typer.Typer(
    name="git-helper",
    add_completion=False,
)
git_helper_app.command()(git_helper_command)


__all__ = [
    "app",
    "git_helper_app",
    "config_app",
    "ask_command",
    "brightness_command",
    "git_helper_command",
    "resize_images_command",
    "switch_window_command",
    "vault_cleanup_command",
    "workspace_command",
]
