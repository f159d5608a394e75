from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from muzzle.constants import DEFAULT_CAPTURE_TIMEOUT

__all__ = ["Config"]


class Config(BaseSettings):
    """Settings read from ``MUZZLE_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="MUZZLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fixture_directory: Path | None = None
    log_level: str = "INFO"
    capture_timeout: float = Field(default=DEFAULT_CAPTURE_TIMEOUT, gt=0)
