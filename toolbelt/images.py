"""Batch image resizing with ImageMagick.

Contains:
- parse_size: Validate a WIDTHxHEIGHT size string
- resized_name: Build the output filename for a resized image
- find_images: List the images in a directory
- ResizeResult: Outcome for one image
- resize_images: Letterbox every image to the target size
"""

import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from toolbelt.desktop.exceptions import CommandError
from toolbelt.desktop.runner import run_command

DEFAULT_SIZE = "2560x1080"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")
ORIGINALS_DIR = "originals"

SIZE_PATTERN = re.compile(r"^(\d+)x(\d+)$")


@dataclass
class ResizeResult:
    """Outcome of processing one image.

    Attributes:
        source: The original image.
        dimensions: Its dimensions as reported by identify.
        target: The resized file (None when skipped).
        converted: Whether convert was actually run.
    """

    source: Path
    dimensions: str
    target: Optional[Path] = None
    converted: bool = False

    @property
    def skipped(self) -> bool:
        return self.target is None


def parse_size(size: str) -> str:
    """Validate a size such as 2560x1080.

    Raises:
        ValueError: If the size is not WIDTHxHEIGHT with positive integers.
    """
    match = SIZE_PATTERN.match(size.strip())
    if not match or not int(match.group(1)) or not int(match.group(2)):
        raise ValueError(f"Invalid size: {size}. Expected WIDTHxHEIGHT, e.g. {DEFAULT_SIZE}")
    return f"{int(match.group(1))}x{int(match.group(2))}"


def resized_name(image: Path, size: str) -> str:
    """Name for the resized copy, e.g. photo___resized_to_2560x1080.jpg."""
    return f"{image.stem}___resized_to_{size}{image.suffix}"


def find_images(directory: Path) -> list[Path]:
    """List jpg, jpeg and png files directly inside directory, sorted by name."""
    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
    )


def get_dimensions(image: Path) -> str:
    return run_command(["identify", "-format", "%wx%h", str(image)])


def convert_image(image: Path, target: Path, size: str) -> None:
    """Resize to fit size, then pad to exactly size on a black background."""
    run_command([
        "convert", str(image),
        "-resize", size,
        "-background", "black",
        "-gravity", "center",
        "-extent", size,
        str(target),
    ])


def resize_images(
    directory: Path,
    size: str = DEFAULT_SIZE,
    dry_run: bool = False,
    on_result: Optional[Callable[[ResizeResult], None]] = None,
) -> list[ResizeResult]:
    """Resize every image in directory that is not already at size.

    Originals are moved into an originals/ subdirectory after conversion.

    Args:
        directory: Directory holding the images.
        size: Target WIDTHxHEIGHT.
        dry_run: Report what would happen without converting or moving.
        on_result: Called with each result as soon as it is known.

    Returns:
        One ResizeResult per image.

    Raises:
        CommandError: If identify or convert fails.
    """
    size = parse_size(size)
    originals_dir = directory / ORIGINALS_DIR
    if not dry_run:
        originals_dir.mkdir(exist_ok=True)

    results = []
    for image in find_images(directory):
        result = ResizeResult(source=image, dimensions=get_dimensions(image))

        if result.dimensions != size:
            result.target = directory / resized_name(image, size)
            if not dry_run:
                convert_image(image, result.target, size)
                try:
                    shutil.move(str(image), str(originals_dir / image.name))
                except OSError as e:
                    raise CommandError(f"Failed to move {image.name} to {ORIGINALS_DIR}/: {e}")
                result.converted = True

        results.append(result)
        if on_result:
            on_result(result)

    return results
