"""CLI command for Obsidian vault cleanup."""

from pathlib import Path
from typing import Callable, Optional

import typer

from toolbelt.vault import (
    ATTACHMENTS_DIR,
    DAILIES_DIR,
    VaultError,
    delete_files,
    find_attachments,
    find_daily_notes,
    find_empty_files,
    find_untitled_files,
    move_files,
    resolve_vault_dir,
)

SPACER = "\n" + "=" * 80 + "\n"


def _list_files(vault: Path, files: list[Path]) -> None:
    for path in files:
        typer.echo(f"  {path.relative_to(vault)}")


def _run_step(
    vault: Path,
    files: list[Path],
    none_message: str,
    found_message: str,
    question: str,
    declined_message: str,
    apply: Callable[[list[Path]], object],
    yes: bool,
) -> None:
    typer.echo(SPACER)
    if not files:
        typer.echo(none_message)
        return

    _list_files(vault, files)
    typer.echo(f"\nFound {len(files)} {found_message}.\n")
    if yes or typer.confirm(question, default=False):
        apply(files)
        typer.echo("Done.")
    else:
        typer.echo(declined_message)


def vault_cleanup_command(
    vault_dir: Optional[str] = typer.Option(
        None,
        "--vault-dir",
        help="Vault directory (defaults to $VAULT_DIR)",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Apply every step without asking"),
) -> None:
    """Tidy an Obsidian vault: untitled notes, dailies, attachments and empty files."""
    try:
        vault = resolve_vault_dir(vault_dir)
        typer.echo(f"{SPACER}Running cleanup in Obsidian vault: {vault}")

        _run_step(
            vault, find_untitled_files(vault),
            "No empty files found.",
            "empty files titled 'Untitled*'",
            "Delete these files?",
            "Files were not deleted.",
            delete_files, yes,
        )
        _run_step(
            vault, find_daily_notes(vault),
            "No Daily notes need to be moved.",
            "Daily notes",
            f"Move these files to the {DAILIES_DIR} folder?",
            "Daily notes were not moved.",
            lambda files: move_files(files, vault / DAILIES_DIR), yes,
        )
        _run_step(
            vault, find_attachments(vault),
            "No attachments need to be moved.",
            "attachments",
            f"Move these files to the {ATTACHMENTS_DIR} folder?",
            "Attachments were not moved.",
            lambda files: move_files(files, vault / ATTACHMENTS_DIR), yes,
        )
        _run_step(
            vault, find_empty_files(vault),
            "No empty files found.",
            "empty files",
            "Delete these files?",
            "Files were not deleted.",
            delete_files, yes,
        )
    except VaultError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Exiting.", err=True)
        raise typer.Exit(1)

    typer.echo(f"{SPACER}Cleanup complete.")
