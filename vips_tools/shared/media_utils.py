"""
Media file utilities for vips_tools.

File format detection by extension and logging setup for the CLI.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from ..core.types import ImageFormat, ImagePath

# Output extensions understood by convert_format
FORMAT_EXTENSIONS: Dict[str, ImageFormat] = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".jpe": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
    ".webp": ImageFormat.WEBP,
}


def format_for_path(file_path: ImagePath) -> Optional[ImageFormat]:
    """
    Determine the output format from a file extension.

    Args:
        file_path: Path to check

    Returns:
        ImageFormat for the extension, or None if it is not supported
    """
    return FORMAT_EXTENSIONS.get(Path(file_path).suffix.lower())


def log_level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level; --quiet wins."""
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> int:
    """
    Send log records to stderr at the level chosen by the CLI flags.

    Args:
        verbose: Also show debug output such as the vips command lines
        quiet: Only show warnings and errors

    Returns:
        The logging level that was configured
    """
    level = log_level_for(verbose=verbose, quiet=quiet)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return level
