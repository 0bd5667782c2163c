"""
Executable resolution for vips and vipsheader.

resolve_executables() is the initialization step: it must run before any
operation, and its result is the context every operation takes.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from ..config import Settings, get_settings
from ..errors import ExecutableNotFoundError
from .types import VipsContext

logger = logging.getLogger(__name__)


def find_executable(name: str, configured: str) -> Path:
    """
    Resolve one executable to an absolute path.

    Args:
        name: Logical executable name, used in the error ("vips", "vipsheader")
        configured: Configured bare name or path to look up

    Returns:
        Absolute path to the executable

    Raises:
        ExecutableNotFoundError: If the executable is not on the search path
    """
    found = shutil.which(configured)
    if found is None:
        logger.error(f"{name} executable not found (looked for {configured!r})")
        raise ExecutableNotFoundError(name, configured)

    path = Path(os.path.abspath(found))
    logger.info(f"Resolved {name} executable: {path}")
    return path


def resolve_executables(settings: Optional[Settings] = None) -> VipsContext:
    """
    Resolve both executables and build the context for all operations.

    Args:
        settings: Configuration to use (loaded from the environment if None)

    Returns:
        Immutable VipsContext holding the resolved paths

    Raises:
        ExecutableNotFoundError: Naming the first executable that is missing
    """
    if settings is None:
        settings = get_settings()

    vips = find_executable("vips", settings.vips_executable)
    vipsheader = find_executable("vipsheader", settings.vipsheader_executable)

    return VipsContext(vips=vips, vipsheader=vipsheader, work_dir=settings.work_dir)


# Alias
find_executables = resolve_executables
