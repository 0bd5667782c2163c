"""
Shared utilities for vips_tools.
"""

from .media_utils import FORMAT_EXTENSIONS, format_for_path, log_level_for, setup_logging

__all__ = [
    "FORMAT_EXTENSIONS",
    "format_for_path",
    "log_level_for",
    "setup_logging",
]
