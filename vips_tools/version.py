"""Version information for vips_tools."""

import subprocess
from pathlib import Path
from typing import Optional

__version__ = "0.1.0"


def get_git_hash() -> Optional[str]:
    """
    Get the short git commit hash of the source checkout.

    Returns:
        7-character commit hash, or None outside a git checkout
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=Path(__file__).parent,
            capture_output=True,
            text=True,
            check=True,
            timeout=2,
        )
        return result.stdout.strip() or None
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
        return None


def get_version_string() -> str:
    """Get the version, with the git hash appended when available."""
    git_hash = get_git_hash()
    if git_hash:
        return f"{__version__} (git:{git_hash})"
    return __version__
