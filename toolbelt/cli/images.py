"""CLI command for batch image resizing."""

from pathlib import Path

import typer

from toolbelt.desktop import CommandError
from toolbelt.images import DEFAULT_SIZE, ResizeResult, parse_size, resize_images


def _report(result: ResizeResult) -> None:
    typer.echo(f"\n{result.source.name}")
    if result.skipped:
        typer.echo(f"Skipping image because it already has the correct dimensions of {result.dimensions}")
        return

    typer.echo(f"  Converting image from original dimensions {result.dimensions}")
    typer.echo(f"  New filename: {result.target.name}")
    if not result.converted:
        typer.echo("Skipping file conversion in test mode")


def resize_images_command(
    directory: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Directory holding the images",
    ),
    size: str = typer.Option(DEFAULT_SIZE, "--size", "-s", help="Target size as WIDTHxHEIGHT"),
    test: bool = typer.Option(False, "--test", help="Report what would change without converting"),
) -> None:
    """Letterbox every jpg/jpeg/png in a directory to a fixed size."""
    try:
        size = parse_size(size)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo(f"Resizing images in {directory.resolve()} to {size}")
    try:
        results = resize_images(directory, size, dry_run=test, on_result=_report)
    except CommandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    converted = sum(1 for result in results if result.converted)
    skipped = sum(1 for result in results if result.skipped)
    typer.echo(f"\nDone: {converted} converted, {skipped} skipped, {len(results)} total.")
