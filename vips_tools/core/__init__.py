"""Core wrapper: executable resolution, process invocation and operations."""

from .commands import get_size, parse_size, run_vips
from .executables import find_executable, find_executables, resolve_executables
from .operations import (
    affine_matrix,
    convert_format,
    resize_to,
    subsample,
    to_jpeg,
    to_png,
    to_webp,
    xyz_to_scrgb,
    zoom,
)
from .types import Factors, ImageFormat, ImagePath, JpegOptions, Size, VipsContext
from .vips import Vips

__all__ = [
    # Types
    "Factors",
    "ImageFormat",
    "ImagePath",
    "JpegOptions",
    "Size",
    "VipsContext",
    "Vips",
    # Initialization
    "find_executable",
    "find_executables",
    "resolve_executables",
    # Invocation
    "run_vips",
    "get_size",
    "parse_size",
    # Operations
    "affine_matrix",
    "convert_format",
    "resize_to",
    "subsample",
    "to_jpeg",
    "to_png",
    "to_webp",
    "xyz_to_scrgb",
    "zoom",
]
