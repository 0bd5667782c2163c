"""
Exceptions raised by the vips command wrapper.

Every failure surfaced by an operation derives from VipsError so callers can
catch the whole family with a single except clause.
"""

import os
from typing import Sequence, Tuple, Union

# Keep error messages readable when a tool dumps a lot of text
_MAX_MESSAGE_OUTPUT = 200


class VipsError(Exception):
    """Base class for all vips_tools errors."""


class ExecutableNotFoundError(VipsError):
    """A logical executable could not be resolved on the search path."""

    def __init__(self, name: str, configured: str) -> None:
        self.name = name
        self.configured = configured
        super().__init__(f"{name} executable not found (looked for {configured!r})")


class InputNotFoundError(VipsError, FileNotFoundError):
    """The input image does not exist on the filesystem."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = path
        super().__init__(f"Input image not found: {path}")


class VipsCommandError(VipsError):
    """An external tool exited with a non-zero status."""

    def __init__(
        self, returncode: int, output: str, command: Sequence[str] = ()
    ) -> None:
        self.returncode = returncode
        self.output = output
        self.command = list(command)
        super().__init__(f"code: {returncode} output: {output}")


class SizeParseError(VipsError):
    """vipsheader output did not contain a recognisable size."""

    def __init__(self, output: str) -> None:
        self.output = output
        excerpt = output[:_MAX_MESSAGE_OUTPUT]
        if len(output) > _MAX_MESSAGE_OUTPUT:
            excerpt += "..."
        super().__init__(f"Could not parse image size from vipsheader output: {excerpt!r}")


class InvalidDimensionsError(VipsError, ValueError):
    """Current dimensions cannot be used to compute a scale factor."""

    def __init__(self, current: Tuple[int, int], desired: Tuple[int, int]) -> None:
        self.current = current
        self.desired = desired
        super().__init__(
            f"Cannot scale from {current[0]}x{current[1]} to {desired[0]}x{desired[1]}: "
            "current dimensions must be positive"
        )
