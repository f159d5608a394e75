from pathlib import Path

import httpx
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from muzzle.constants import DEFAULT_CAPTURE_TIMEOUT, DEFAULT_CAPTURE_WAIT, DEFAULT_FIXTURE_ENCODING
from muzzle.exceptions import FixtureCaptureError, FixtureDirectoryError
from muzzle.messages.fixtures import Fixture, load_fixture

__all__ = ["FixtureRecorder"]


class FixtureRecorder:
    """Service that saves live responses as fixture files."""

    def __init__(self, directory: Path, timeout: float = DEFAULT_CAPTURE_TIMEOUT) -> None:
        """
        Initialize the FixtureRecorder.

        Args:
            directory: Fixture directory the files are written to. Must exist.
            timeout: Request timeout in seconds.

        Raises:
            FixtureDirectoryError: If the directory does not exist.
        """
        if not directory.is_dir():
            raise FixtureDirectoryError(f"Fixture directory does not exist: {directory}")
        self.directory = directory
        self.timeout = timeout

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_fixed(DEFAULT_CAPTURE_WAIT),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    def fetch(self, url: str) -> httpx.Response:
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return client.get(url)

    def capture(self, url: str, name: str, overwrite: bool = False) -> Fixture:
        """
        Fetch ``url`` and store its body as the fixture ``name``.

        Args:
            url: The URL to fetch.
            name: Fixture file name; its extension decides the fixture type.
            overwrite: Replace an existing fixture with the same name.

        Returns:
            The stored fixture.
        """
        path = self.directory / name
        if path.exists() and not overwrite:
            raise FixtureCaptureError(f"Fixture already exists: {path}")

        try:
            response = self.fetch(url)
        except httpx.HTTPError as e:
            raise FixtureCaptureError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise FixtureCaptureError(f"Request to {url} returned {response.status_code}")

        path.write_text(response.text, encoding=DEFAULT_FIXTURE_ENCODING)
        logger.info(f"Captured {url} into {path}")
        return load_fixture(path)
