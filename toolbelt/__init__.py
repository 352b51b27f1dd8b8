"""Personal helper CLIs: AI git helper, desktop and vault utilities."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("toolbelt")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
