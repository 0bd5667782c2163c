"""
Type definitions for the vips command wrapper.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field

# An image is referenced by its filesystem path; nothing is held in memory
ImagePath = Union[str, "os.PathLike[str]"]


class Size(NamedTuple):
    """Image dimensions in pixels."""

    width: int
    height: int


class Factors(NamedTuple):
    """Integer multipliers for subsample and zoom."""

    x: int
    y: int


class ImageFormat(str, Enum):
    """Output formats supported by convert_format."""

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"

    @classmethod
    def parse(cls, value: Union[str, "ImageFormat"]) -> "ImageFormat":
        """
        Parse a format name.

        Args:
            value: Format name such as "jpeg", "JPG" or "webp"

        Returns:
            Matching ImageFormat

        Raises:
            ValueError: If the name is not a supported format
        """
        if isinstance(value, ImageFormat):
            return value
        name = value.strip().lower().lstrip(".")
        if name == "jpg":
            name = "jpeg"
        try:
            return cls(name)
        except ValueError:
            supported = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unsupported image format {value!r} (expected one of: {supported})"
            ) from None


class JpegOptions(BaseModel):
    """Options for jpegsave."""

    progressive: bool = Field(default=True, description="Write an interlaced JPEG")
    strip: bool = Field(default=True, description="Strip metadata from the output")

    model_config = ConfigDict(frozen=True)

    def to_args(self) -> List[str]:
        """Build the extra jpegsave arguments for these options."""
        args: List[str] = []
        if self.progressive:
            args.append("--interlace")
        if self.strip:
            args.append("--strip")
        return args


class VipsContext(BaseModel):
    """
    Resolved executables and working directory shared by every operation.

    Built once by resolve_executables() and passed to each call. The model is
    frozen, so the resolved paths cannot change after initialization.
    """

    vips: Path = Field(description="Absolute path to the vips executable")
    vipsheader: Path = Field(description="Absolute path to the vipsheader executable")
    work_dir: Path = Field(description="Working directory for vips invocations")

    model_config = ConfigDict(frozen=True)
