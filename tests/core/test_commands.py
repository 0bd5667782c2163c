"""Tests for process invocation and size parsing."""

import stat
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vips_tools.core.commands import (
    LAUNCH_FAILURE_CODE,
    MAX_HEADER_OUTPUT,
    get_size,
    parse_size,
    run_vips,
)
from vips_tools.core.types import Size, VipsContext
from vips_tools.errors import (
    InputNotFoundError,
    SizeParseError,
    VipsCommandError,
    VipsError,
)


class TestRunVips:
    """Tests for run_vips function."""

    def test_argument_order(self, vips_context, mock_run: MagicMock) -> None:
        """Test argv is [command, input, output, *extra] after the executable."""
        run_vips(vips_context, "in.png", "out.jpg", "jpegsave", ["--interlace", "--strip"])

        assert mock_run.call_args[0][0] == [
            "/opt/vips/bin/vips",
            "jpegsave",
            "in.png",
            "out.jpg",
            "--interlace",
            "--strip",
        ]

    def test_runs_in_work_dir(self, vips_context, mock_run: MagicMock) -> None:
        """Test vips runs in the context's work directory."""
        run_vips(vips_context, "in.png", "out.png", "pngsave")

        assert mock_run.call_args.kwargs["cwd"] == vips_context.work_dir

    def test_captures_combined_output(self, vips_context, mock_run: MagicMock) -> None:
        """Test stdout and stderr are captured together as text."""
        run_vips(vips_context, "in.png", "out.png", "pngsave")

        kwargs = mock_run.call_args.kwargs
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.STDOUT
        assert kwargs["text"] is True
        assert kwargs["check"] is False

    def test_no_extra_args(self, vips_context, mock_run: MagicMock) -> None:
        """Test a command with no extra arguments."""
        run_vips(vips_context, "in.v", "out.v", "XYZ2scRGB")

        assert mock_run.call_args[0][0][1:] == ["XYZ2scRGB", "in.v", "out.v"]

    def test_returns_output_path_unchanged(
        self, vips_context, mock_run: MagicMock
    ) -> None:
        """Test success returns the same output path object."""
        output = Path("/images/out.webp")

        result = run_vips(vips_context, Path("/images/in.png"), output, "webpsave")

        assert result is output
        assert mock_run.call_args[0][0][2:4] == ["/images/in.png", "/images/out.webp"]

    def test_nonzero_exit(
        self, vips_context, mock_run: MagicMock, completed
    ) -> None:
        """Test a non-zero exit raises with code and output embedded."""
        mock_run.return_value = completed(1, "VipsForeignLoad: file not found\n")

        with pytest.raises(VipsCommandError) as exc_info:
            run_vips(vips_context, "missing.png", "out.png", "pngsave")

        error = exc_info.value
        assert error.returncode == 1
        assert error.output == "VipsForeignLoad: file not found\n"
        assert str(error) == "code: 1 output: VipsForeignLoad: file not found\n"
        assert error.command[1] == "pngsave"

    def test_launch_failure(self, vips_context, mock_run: MagicMock) -> None:
        """Test an executable that cannot be started is a command error."""
        mock_run.side_effect = FileNotFoundError("No such file or directory")

        with pytest.raises(VipsCommandError) as exc_info:
            run_vips(vips_context, "in.png", "out.png", "pngsave")

        assert exc_info.value.returncode == LAUNCH_FAILURE_CODE
        assert "No such file or directory" in exc_info.value.output


class TestParseSize:
    """Tests for parse_size function."""

    def test_typical_output(self) -> None:
        """Test parsing a typical vipsheader line."""
        output = "photo.jpg: 640x480 uchar, 3 bands, srgb, jpegload\n"

        assert parse_size(output) == Size(640, 480)

    def test_first_match_wins(self) -> None:
        """Test only the first size field is used."""
        output = "a.tif: 100x200 uchar, 1 band\nb.tif: 300x400 uchar, 1 band\n"

        assert parse_size(output) == (100, 200)

    def test_no_match(self) -> None:
        """Test output without a size field raises a parse error."""
        with pytest.raises(SizeParseError):
            parse_size("photo.exr: 640x480 float, 4 bands, scrgb\n")

    def test_empty_digits_rejected(self) -> None:
        """Test a size field with missing digits is not accepted."""
        with pytest.raises(SizeParseError):
            parse_size("photo.jpg: x480 uchar\n")

    def test_oversized_output_rejected(self) -> None:
        """Test output beyond the size limit is rejected without scanning."""
        output = ": 10x10 uchar" + "x" * MAX_HEADER_OUTPUT

        with pytest.raises(SizeParseError) as exc_info:
            parse_size(output)

        # Message is truncated even though the output is huge
        assert len(str(exc_info.value)) < 400

    def test_overlong_number_rejected(self) -> None:
        """Test absurdly long dimensions do not match."""
        with pytest.raises(SizeParseError):
            parse_size("photo.jpg: 12345678901x480 uchar\n")


class TestGetSize:
    """Tests for get_size function."""

    def test_success(
        self, vips_context, mock_run: MagicMock, completed, input_image: Path
    ) -> None:
        """Test reading the size of an existing image."""
        mock_run.return_value = completed(0, f"{input_image}: 640x480 uchar, 3 bands\n")

        size = get_size(vips_context, input_image)

        assert size == Size(640, 480)
        assert size.width == 640
        assert size.height == 480
        assert mock_run.call_args[0][0] == ["/opt/vips/bin/vipsheader", str(input_image)]

    def test_nonexistent_input(
        self, vips_context, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        """Test a missing input fails without running vipsheader."""
        missing = tmp_path / "nope.jpg"

        with pytest.raises(InputNotFoundError) as exc_info:
            get_size(vips_context, missing)

        assert exc_info.value.path == missing
        assert isinstance(exc_info.value, FileNotFoundError)
        assert isinstance(exc_info.value, VipsError)
        mock_run.assert_not_called()

    def test_unparseable_output(
        self, vips_context, mock_run: MagicMock, completed, input_image: Path
    ) -> None:
        """Test output without a size raises a parse error, not a crash."""
        mock_run.return_value = completed(0, "something unexpected\n")

        with pytest.raises(SizeParseError) as exc_info:
            get_size(vips_context, input_image)

        assert exc_info.value.output == "something unexpected\n"

    def test_nonzero_exit(
        self, vips_context, mock_run: MagicMock, completed, input_image: Path
    ) -> None:
        """Test vipsheader failure embeds the exit code and output."""
        mock_run.return_value = completed(1, "vipsheader: unable to open file\n")

        with pytest.raises(VipsCommandError) as exc_info:
            get_size(vips_context, input_image)

        assert exc_info.value.returncode == 1
        assert "code: 1" in str(exc_info.value)
        assert "unable to open file" in str(exc_info.value)

    def test_accepts_string_path(
        self, vips_context, mock_run: MagicMock, completed, input_image: Path
    ) -> None:
        """Test string paths work as well as Path objects."""
        mock_run.return_value = completed(0, ": 1x2 uchar")

        assert get_size(vips_context, str(input_image)) == (1, 2)


def _script(path: Path, body: str) -> Path:
    """Write an executable shell script standing in for a vips tool."""
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
class TestNonUtf8Output:
    """Tests for tools printing bytes that are not valid UTF-8."""

    @pytest.fixture
    def script_context(self, tmp_path: Path) -> VipsContext:
        vips = _script(tmp_path / "vips", "printf 'bad \\377 byte'; exit 1")
        vipsheader = _script(
            tmp_path / "vipsheader", "printf 'caf\\351.jpg: 640x480 uchar, 3 bands'"
        )
        return VipsContext(vips=vips, vipsheader=vipsheader, work_dir=tmp_path)

    def test_decoding_is_lenient(self, vips_context, mock_run: MagicMock) -> None:
        """Test output is decoded as UTF-8 with replacement characters."""
        run_vips(vips_context, "in.png", "out.png", "pngsave")

        assert mock_run.call_args.kwargs["encoding"] == "utf-8"
        assert mock_run.call_args.kwargs["errors"] == "replace"

    def test_run_vips_failure_keeps_output(
        self, script_context: VipsContext
    ) -> None:
        """Test a failing command with undecodable output still raises VipsCommandError."""
        with pytest.raises(VipsCommandError) as exc_info:
            run_vips(script_context, "in.png", "out.png", "pngsave")

        assert exc_info.value.returncode == 1
        assert exc_info.value.output == "bad \ufffd byte"
        assert str(exc_info.value) == "code: 1 output: bad \ufffd byte"

    def test_get_size_with_latin1_name(
        self, script_context: VipsContext, input_image: Path
    ) -> None:
        """Test a size is still parsed when vipsheader echoes a Latin-1 name."""
        assert get_size(script_context, input_image) == Size(640, 480)
