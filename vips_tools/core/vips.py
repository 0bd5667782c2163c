"""
Object facade binding a VipsContext to the image operations.
"""

from typing import Optional, Tuple, Union

from ..config import Settings
from . import commands, operations
from .executables import resolve_executables
from .types import Factors, ImageFormat, ImagePath, JpegOptions, Size, VipsContext


class Vips:
    """Image operations bound to one set of resolved executables."""

    def __init__(self, context: VipsContext) -> None:
        self.context = context

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Vips":
        """Resolve executables from settings and return a bound instance."""
        return cls(resolve_executables(settings))

    def io_command(
        self,
        input_path: ImagePath,
        output_path: ImagePath,
        command: str,
        extra_args: Tuple[str, ...] = (),
    ) -> ImagePath:
        return commands.run_vips(
            self.context, input_path, output_path, command, extra_args
        )

    def get_size(self, input_path: ImagePath) -> Size:
        return commands.get_size(self.context, input_path)

    def subsample(
        self, input_path: ImagePath, output_path: ImagePath, factors: Factors
    ) -> ImagePath:
        return operations.subsample(self.context, input_path, output_path, factors)

    def zoom(
        self, input_path: ImagePath, output_path: ImagePath, factors: Factors
    ) -> ImagePath:
        return operations.zoom(self.context, input_path, output_path, factors)

    def to_webp(
        self, input_path: ImagePath, output_path: ImagePath, strip: bool = True
    ) -> ImagePath:
        return operations.to_webp(self.context, input_path, output_path, strip)

    def to_png(
        self, input_path: ImagePath, output_path: ImagePath, strip: bool = True
    ) -> ImagePath:
        return operations.to_png(self.context, input_path, output_path, strip)

    def to_jpeg(
        self,
        input_path: ImagePath,
        output_path: ImagePath,
        options: Optional[JpegOptions] = None,
    ) -> ImagePath:
        return operations.to_jpeg(self.context, input_path, output_path, options)

    def convert_format(
        self,
        input_path: ImagePath,
        image_format: Union[ImageFormat, str],
        output_path: ImagePath,
    ) -> ImagePath:
        return operations.convert_format(
            self.context, input_path, image_format, output_path
        )

    def xyz_to_scrgb(self, input_path: ImagePath, output_path: ImagePath) -> ImagePath:
        return operations.xyz_to_scrgb(self.context, input_path, output_path)

    def resize_to(
        self,
        input_path: ImagePath,
        output_path: ImagePath,
        current: Tuple[int, int],
        desired: Tuple[int, int],
    ) -> ImagePath:
        return operations.resize_to(
            self.context, input_path, output_path, current, desired
        )
