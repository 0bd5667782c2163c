"""
vips_tools - a thin wrapper around the vips and vipsheader command line tools.

Usage:
    from vips_tools import resolve_executables, get_size, resize_to

    context = resolve_executables()
    size = get_size(context, "photo.jpg")
    resize_to(context, "photo.jpg", "small.jpg", size, (320, 240))
"""

from .config import Settings, get_settings
from .core import (
    Factors,
    ImageFormat,
    JpegOptions,
    Size,
    Vips,
    VipsContext,
    convert_format,
    find_executables,
    get_size,
    resize_to,
    resolve_executables,
    run_vips,
    subsample,
    to_jpeg,
    to_png,
    to_webp,
    xyz_to_scrgb,
    zoom,
)
from .errors import (
    ExecutableNotFoundError,
    InputNotFoundError,
    InvalidDimensionsError,
    SizeParseError,
    VipsCommandError,
    VipsError,
)
from .version import __version__

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "Factors",
    "ImageFormat",
    "JpegOptions",
    "Size",
    "Vips",
    "VipsContext",
    "convert_format",
    "find_executables",
    "get_size",
    "resize_to",
    "resolve_executables",
    "run_vips",
    "subsample",
    "to_jpeg",
    "to_png",
    "to_webp",
    "xyz_to_scrgb",
    "zoom",
    "ExecutableNotFoundError",
    "InputNotFoundError",
    "InvalidDimensionsError",
    "SizeParseError",
    "VipsCommandError",
    "VipsError",
]
