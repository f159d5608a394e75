__all__ = [
    "ConfigError",
    "ExpectationQueueEmptyError",
    "FixtureCaptureError",
    "FixtureDirectoryError",
    "FixtureError",
    "FixtureNotFoundError",
    "MuzzleError",
]


class MuzzleError(Exception):
    """Base exception for all Muzzle errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ConfigError(MuzzleError):
    """Raised when there is a configuration error."""


class FixtureError(MuzzleError):
    """Raised when a fixture cannot be read or decoded."""


class FixtureNotFoundError(FixtureError):
    """Raised when a fixture file does not exist."""


class FixtureDirectoryError(FixtureError):
    """Raised when the fixture directory is missing or not configured."""


class FixtureCaptureError(FixtureError):
    """Raised when a live response cannot be captured as a fixture."""


class ExpectationQueueEmptyError(MuzzleError, AssertionError):
    """Raised when a request arrives and no expectation is queued for it."""
