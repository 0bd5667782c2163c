"""
Command line interface for vips_tools.

Each command resolves the vips executables first, then runs a single
operation and prints the result.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import get_settings
from ..core.commands import get_size
from ..core.executables import resolve_executables
from ..core.operations import (
    convert_format,
    resize_to,
    subsample,
    to_jpeg,
    to_png,
    to_webp,
    xyz_to_scrgb,
    zoom,
)
from ..core.types import ImageFormat, JpegOptions, VipsContext
from ..errors import VipsError
from ..shared.media_utils import format_for_path, setup_logging
from ..version import get_version_string

console = Console()
logger = logging.getLogger(__name__)

FORMAT_CHOICES = [f.value for f in ImageFormat] + ["jpg"]


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def _load_context() -> VipsContext:
    """Resolve executables from settings, exiting on failure."""
    try:
        return resolve_executables(get_settings())
    except VipsError as e:
        _fail(e)


def _done(output: object) -> None:
    console.print(f"[green]✓ Wrote {escape(str(output))}[/green]")


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, version: bool) -> None:
    """
    vips-tools - resize and convert images with the vips command line tools.

    Executables are looked up on PATH; set VIPS_TOOLS_VIPS_EXECUTABLE or
    VIPS_TOOLS_VIPSHEADER_EXECUTABLE to use other names or paths.
    """
    if version:
        console.print(f"vips-tools version {get_version_string()}")
        sys.exit(0)

    setup_logging(verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
def check() -> None:
    """Resolve the vips executables and show where they were found."""
    context = _load_context()

    table = Table(title="vips executables")
    table.add_column("Tool", style="bold cyan")
    table.add_column("Path")
    table.add_row("vips", str(context.vips))
    table.add_row("vipsheader", str(context.vipsheader))
    table.add_row("work dir", str(context.work_dir))
    console.print(table)


@cli.command()
@click.argument("input_path", type=click.Path(path_type=Path))
def size(input_path: Path) -> None:
    """Print the dimensions of INPUT_PATH as WIDTHxHEIGHT."""
    context = _load_context()
    try:
        width, height = get_size(context, input_path)
    except VipsError as e:
        _fail(e)
    click.echo(f"{width}x{height}")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "image_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Output format (default: from the output file extension)",
)
@click.option("--no-strip", is_flag=True, help="Keep metadata in the output")
@click.option(
    "--no-progressive",
    is_flag=True,
    help="Write a baseline JPEG instead of an interlaced one",
)
def convert(
    input_path: Path,
    output_path: Path,
    image_format: Optional[str],
    no_strip: bool,
    no_progressive: bool,
) -> None:
    """
    Convert INPUT_PATH to JPEG, PNG or WebP.

    Metadata is stripped and JPEGs are written interlaced unless told otherwise.

    Examples:
        vips-tools convert photo.tif photo.jpg

        vips-tools convert photo.tif out.img --format webp --no-strip
    """
    if image_format is not None:
        fmt = ImageFormat.parse(image_format)
    else:
        fmt = format_for_path(output_path)
        if fmt is None:
            raise click.BadParameter(
                f"cannot infer format from '{output_path.suffix}', use --format",
                param_hint="OUTPUT_PATH",
            )

    context = _load_context()
    try:
        if not no_strip and not no_progressive:
            result = convert_format(context, input_path, fmt, output_path)
        elif fmt is ImageFormat.JPEG:
            options = JpegOptions(progressive=not no_progressive, strip=not no_strip)
            result = to_jpeg(context, input_path, output_path, options)
        elif fmt is ImageFormat.PNG:
            result = to_png(context, input_path, output_path, strip=not no_strip)
        else:
            result = to_webp(context, input_path, output_path, strip=not no_strip)
    except VipsError as e:
        _fail(e)
    _done(result)


@cli.command("subsample")
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.argument("xfactor", type=click.IntRange(min=1))
@click.argument("yfactor", type=click.IntRange(min=1))
def subsample_cmd(
    input_path: Path, output_path: Path, xfactor: int, yfactor: int
) -> None:
    """Shrink INPUT_PATH by integer XFACTOR and YFACTOR."""
    context = _load_context()
    try:
        result = subsample(context, input_path, output_path, (xfactor, yfactor))
    except VipsError as e:
        _fail(e)
    _done(result)


@cli.command("zoom")
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.argument("xfactor", type=click.IntRange(min=1))
@click.argument("yfactor", type=click.IntRange(min=1))
def zoom_cmd(input_path: Path, output_path: Path, xfactor: int, yfactor: int) -> None:
    """Enlarge INPUT_PATH by integer XFACTOR and YFACTOR."""
    context = _load_context()
    try:
        result = zoom(context, input_path, output_path, (xfactor, yfactor))
    except VipsError as e:
        _fail(e)
    _done(result)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.argument("width", type=click.IntRange(min=1))
@click.argument("height", type=click.IntRange(min=1))
def resize(input_path: Path, output_path: Path, width: int, height: int) -> None:
    """Scale INPUT_PATH to WIDTH x HEIGHT pixels."""
    context = _load_context()
    try:
        current = get_size(context, input_path)
        logger.info(f"{input_path}: {current.width}x{current.height} -> {width}x{height}")
        result = resize_to(context, input_path, output_path, current, (width, height))
    except VipsError as e:
        _fail(e)
    _done(result)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
def xyz2scrgb(input_path: Path, output_path: Path) -> None:
    """Convert INPUT_PATH from CIE XYZ to scRGB."""
    context = _load_context()
    try:
        result = xyz_to_scrgb(context, input_path, output_path)
    except VipsError as e:
        _fail(e)
    _done(result)


if __name__ == "__main__":
    cli()
