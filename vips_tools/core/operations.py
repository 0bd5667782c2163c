"""
Image operations built on run_vips().

Each function only decides the vips sub-command and its extra arguments;
all processing happens inside the vips executable.
"""

import logging
from typing import List, Optional, Tuple, Union

from ..errors import InvalidDimensionsError
from .commands import run_vips
from .types import Factors, ImageFormat, ImagePath, JpegOptions, VipsContext

logger = logging.getLogger(__name__)


def _factor_args(factors: Factors) -> List[str]:
    """Validate integer factors and render them as arguments."""
    xfactor, yfactor = factors
    for value in (xfactor, yfactor):
        # bool is an int subclass but never a meaningful factor
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Factors must be integers, got {value!r}")
    return [str(xfactor), str(yfactor)]


def _strip_args(strip: bool) -> List[str]:
    return ["--strip"] if strip else []


def subsample(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    factors: Factors,
) -> ImagePath:
    """Shrink an image by integer (x, y) factors."""
    return run_vips(context, input_path, output_path, "subsample", _factor_args(factors))


def zoom(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    factors: Factors,
) -> ImagePath:
    """Enlarge an image by integer (x, y) factors."""
    return run_vips(context, input_path, output_path, "zoom", _factor_args(factors))


def to_webp(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    strip: bool = True,
) -> ImagePath:
    """Convert to WebP, stripping metadata by default."""
    return run_vips(context, input_path, output_path, "webpsave", _strip_args(strip))


def to_png(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    strip: bool = True,
) -> ImagePath:
    """Convert to PNG, stripping metadata by default."""
    return run_vips(context, input_path, output_path, "pngsave", _strip_args(strip))


def to_jpeg(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    options: Optional[JpegOptions] = None,
) -> ImagePath:
    """
    Convert to JPEG.

    Without options the output is progressive (interlaced) with metadata
    stripped.

    Args:
        context: Resolved executables
        input_path: Image to read
        output_path: JPEG file to write
        options: Progressive and strip flags (both default to True)

    Returns:
        output_path
    """
    if options is None:
        options = JpegOptions()
    return run_vips(context, input_path, output_path, "jpegsave", options.to_args())


def convert_format(
    context: VipsContext,
    input_path: ImagePath,
    image_format: Union[ImageFormat, str],
    output_path: ImagePath,
) -> ImagePath:
    """
    Convert to the given format with that format's default settings.

    Args:
        context: Resolved executables
        input_path: Image to read
        image_format: "jpeg", "png" or "webp" (or an ImageFormat)
        output_path: File to write

    Returns:
        output_path

    Raises:
        ValueError: If the format is not supported
    """
    image_format = ImageFormat.parse(image_format)

    if image_format is ImageFormat.JPEG:
        return to_jpeg(context, input_path, output_path)
    elif image_format is ImageFormat.PNG:
        return to_png(context, input_path, output_path)
    else:
        return to_webp(context, input_path, output_path)


def xyz_to_scrgb(
    context: VipsContext, input_path: ImagePath, output_path: ImagePath
) -> ImagePath:
    """Convert from CIE XYZ to scRGB colour space."""
    return run_vips(context, input_path, output_path, "XYZ2scRGB")


def affine_matrix(current: Tuple[int, int], desired: Tuple[int, int]) -> str:
    """
    Build the affine scaling matrix that maps current to desired size.

    Args:
        current: Current (width, height)
        desired: Target (width, height)

    Returns:
        Matrix string "<sx> 0 0 <sy>"

    Raises:
        InvalidDimensionsError: If a current dimension is zero or negative
    """
    current_x, current_y = current
    desired_x, desired_y = desired
    if current_x <= 0 or current_y <= 0:
        raise InvalidDimensionsError((current_x, current_y), (desired_x, desired_y))

    x = float(desired_x) / current_x
    y = float(desired_y) / current_y
    return f"{x!r} 0 0 {y!r}"


def resize_to(
    context: VipsContext,
    input_path: ImagePath,
    output_path: ImagePath,
    current: Tuple[int, int],
    desired: Tuple[int, int],
) -> ImagePath:
    """
    Scale an image to the desired size with an affine transform.

    Args:
        context: Resolved executables
        input_path: Image to read
        output_path: File to write
        current: Current (width, height), e.g. from get_size()
        desired: Target (width, height)

    Returns:
        output_path
    """
    matrix = affine_matrix(current, desired)
    logger.debug(f"Resizing {input_path} from {current} to {desired} ({matrix})")
    return run_vips(context, input_path, output_path, "affine", [matrix])
