"""Obsidian vault housekeeping.

Contains:
- VaultError: Raised when the vault directory is unusable
- resolve_vault_dir: Validate the vault directory
- find_untitled_files: Empty top-level "Untitled*" notes
- find_daily_notes: Top-level daily notes ("2024-07-01, Monday.md")
- find_attachments: Top-level non-markdown files
- find_empty_files: Empty files up to two levels deep
- move_files / delete_files: Apply a cleanup step
"""

import os
import re
import shutil
from pathlib import Path
from typing import Optional

VAULT_DIR_ENV_VAR = "VAULT_DIR"
DAILIES_DIR = "Dailies"
ATTACHMENTS_DIR = "Attachments"

DAILY_NOTE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}, .*\.md$")


class VaultError(Exception):
    """Raised when the vault directory is missing or inaccessible."""

    pass


def resolve_vault_dir(vault_dir: Optional[str] = None) -> Path:
    """Resolve the vault directory from the argument or VAULT_DIR.

    Raises:
        VaultError: If no directory is given, or it is not a readable and
            writable directory.
    """
    value = vault_dir or os.getenv(VAULT_DIR_ENV_VAR)
    if not value:
        raise VaultError(f"The {VAULT_DIR_ENV_VAR} environment variable is not set.")

    path = Path(value).expanduser()
    if not path.is_dir() or not os.access(path, os.R_OK | os.W_OK):
        raise VaultError(f"The vault directory {path} does not exist or is not accessible.")
    return path


def _top_level_files(vault: Path) -> list[Path]:
    return sorted(path for path in vault.iterdir() if path.is_file())


def _is_empty(path: Path) -> bool:
    return path.stat().st_size == 0


def find_untitled_files(vault: Path) -> list[Path]:
    return [
        path for path in _top_level_files(vault)
        if path.name.startswith("Untitled") and _is_empty(path)
    ]


def find_daily_notes(vault: Path) -> list[Path]:
    return [path for path in _top_level_files(vault) if DAILY_NOTE_PATTERN.match(path.name)]


def find_attachments(vault: Path) -> list[Path]:
    return [path for path in _top_level_files(vault) if path.suffix != ".md"]


def find_empty_files(vault: Path) -> list[Path]:
    """Empty files in the vault root and its immediate subdirectories."""
    files = [path for path in vault.glob("*") if path.is_file()]
    files += [path for path in vault.glob("*/*") if path.is_file()]
    return sorted(path for path in files if _is_empty(path))


def move_files(files: list[Path], destination: Path) -> list[Path]:
    """Move files into destination, creating it if needed.

    Returns:
        The new paths.

    Raises:
        VaultError: If a file cannot be moved.
    """
    destination.mkdir(parents=True, exist_ok=True)
    moved = []
    for path in files:
        target = destination / path.name
        try:
            shutil.move(str(path), str(target))
        except OSError as e:
            raise VaultError(f"Error moving file {path}: {e}")
        moved.append(target)
    return moved


def delete_files(files: list[Path]) -> None:
    """Delete files.

    Raises:
        VaultError: If a file cannot be deleted.
    """
    for path in files:
        try:
            path.unlink()
        except OSError as e:
            raise VaultError(f"Error deleting file {path}: {e}")
