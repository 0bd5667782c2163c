"""
Pytest configuration and fixtures for vips_tools tests.

The vips executables are never run: tests patch subprocess.run in
vips_tools.core.commands and inspect the argument vectors it receives.
"""

import subprocess
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import MagicMock, patch

import pytest

from vips_tools.core.types import VipsContext

CompletedFactory = Callable[..., subprocess.CompletedProcess]


@pytest.fixture
def vips_context(tmp_path: Path) -> VipsContext:
    """Context pointing at fake executables and a temporary work dir."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    return VipsContext(
        vips=Path("/opt/vips/bin/vips"),
        vipsheader=Path("/opt/vips/bin/vipsheader"),
        work_dir=work_dir,
    )


@pytest.fixture
def completed() -> CompletedFactory:
    """Build CompletedProcess results for the mocked subprocess.run."""

    def _completed(returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout)

    return _completed


@pytest.fixture
def mock_run(completed: CompletedFactory) -> Generator[MagicMock, None, None]:
    """Patch subprocess.run for the command runner; succeeds by default."""
    with patch("vips_tools.core.commands.subprocess.run") as mock:
        mock.return_value = completed()
        yield mock


@pytest.fixture
def input_image(tmp_path: Path) -> Path:
    """An existing (fake) input image."""
    path = tmp_path / "input.png"
    path.write_bytes(b"\x89PNG fake image data")
    return path
