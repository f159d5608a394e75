import sys

from loguru import logger
from pydantic import ValidationError

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def _configured_level() -> str:
    from muzzle.models.config import Config

    try:
        return Config().log_level
    except ValidationError:
        # invalid settings are reported by `muzzle config show`
        return "INFO"


def configure_logging(level: str | None = None) -> None:
    """
    Route muzzle's log records to stderr.

    Args:
        level: Logging level. Defaults to ``MUZZLE_LOG_LEVEL``, or INFO when the
            settings cannot be loaded.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or _configured_level()).upper(),
        format=LOG_FORMAT,
        filter="muzzle",
    )
