"""Wrapper configuration."""

import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from VIPS_TOOLS_* environment variables."""

    # Executable names or paths, resolved through the search path
    vips_executable: str = "vips"
    vipsheader_executable: str = "vipsheader"

    # vips is always run from here
    work_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))

    model_config = SettingsConfigDict(
        env_prefix="VIPS_TOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
