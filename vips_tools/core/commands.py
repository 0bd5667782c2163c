"""
Process invocation for vips and vipsheader.

run_vips() is the single point every image operation goes through;
get_size() is the only caller of vipsheader. Both block until the child
process exits.
"""

import logging
import os
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..errors import InputNotFoundError, SizeParseError, VipsCommandError
from .types import ImagePath, Size, VipsContext

logger = logging.getLogger(__name__)

# Refuse to scan vipsheader output larger than this
MAX_HEADER_OUTPUT = 64 * 1024

# vipsheader prints e.g. "photo.jpg: 640x480 uchar, 3 bands, srgb, jpegload"
SIZE_PATTERN = re.compile(r": (\d{1,9})x(\d{1,9}) uchar")

# Shell convention for "command could not be executed"
LAUNCH_FAILURE_CODE = 127


def _run(args: List[str], cwd: Optional[Path] = None) -> Tuple[int, str]:
    """
    Run a command and capture its combined stdout/stderr.

    Returns:
        Tuple of (exit code, captured output)
    """
    logger.debug(f"Running: {' '.join(args)}")
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",  # tool output may echo non-UTF-8 file names
            check=False,
        )
    except OSError as e:
        logger.warning(f"Could not launch {args[0]}: {e}")
        return LAUNCH_FAILURE_CODE, str(e)

    return result.returncode, result.stdout or ""


def run_vips(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    command: str,
    extra_args: Sequence[str] = (),
) -> ImagePath:
    """
    Run a vips sub-command on an input image.

    The argument vector is [command, input, output, *extra_args] and the
    process runs in the context's work directory.

    Args:
        context: Resolved executables
        input_path: Image to read
        output_path: Image to write
        command: vips operation name (e.g. "jpegsave")
        extra_args: Additional arguments appended after the paths

    Returns:
        output_path, unchanged. The file itself is not checked.

    Raises:
        VipsCommandError: If vips exits with a non-zero status
    """
    args = [
        str(context.vips),
        command,
        os.fspath(input_path),
        os.fspath(output_path),
        *extra_args,
    ]
    returncode, output = _run(args, cwd=context.work_dir)

    if returncode != 0:
        logger.warning(f"vips {command} failed for {input_path} (code {returncode})")
        raise VipsCommandError(returncode, output, args)

    return output_path


def parse_size(output: str) -> Size:
    """
    Extract image dimensions from vipsheader output.

    Args:
        output: Text printed by vipsheader

    Returns:
        Size from the first "<width>x<height> uchar" field

    Raises:
        SizeParseError: If the output is oversized or has no size field
    """
    if len(output) > MAX_HEADER_OUTPUT:
        raise SizeParseError(output)

    match = SIZE_PATTERN.search(output)
    if match is None:
        raise SizeParseError(output)

    return Size(int(match.group(1)), int(match.group(2)))


def get_size(context: VipsContext, input_path: ImagePath) -> Size:
    """
    Read the dimensions of an image with vipsheader.

    Args:
        context: Resolved executables
        input_path: Image to inspect

    Returns:
        Size of the image

    Raises:
        InputNotFoundError: If input_path does not exist (vipsheader is not run)
        VipsCommandError: If vipsheader exits with a non-zero status
        SizeParseError: If the output does not contain a size
    """
    if not os.path.exists(input_path):
        raise InputNotFoundError(input_path)

    args = [str(context.vipsheader), os.fspath(input_path)]
    returncode, output = _run(args)

    if returncode != 0:
        logger.warning(f"vipsheader failed for {input_path} (code {returncode})")
        raise VipsCommandError(returncode, output, args)

    return parse_size(output)
