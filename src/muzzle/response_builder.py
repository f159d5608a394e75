import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, Self

import httpx
from loguru import logger

from muzzle.constants import HttpStatus
from muzzle.exceptions import FixtureDirectoryError
from muzzle.messages.fixtures import Fixture, load_fixture
from muzzle.messages.response import AssertableResponse
from muzzle.models.config import Config

__all__ = ["ResponseBuilder"]


class ResponseBuilder:
    """
    Fluent builder for fabricated responses.

    Bodies can be set directly, serialised from Python data, or loaded from a
    fixture file in the shared fixture directory.
    """

    _fixture_directory: ClassVar[Path | None] = None

    def __init__(self) -> None:
        self.status: int = HttpStatus.OK
        self.headers = httpx.Headers()
        self.body: bytes = b""

    @classmethod
    def set_fixture_directory(cls, path: str | Path) -> None:
        """
        Set the directory fixtures are loaded from.

        Raises:
            FixtureDirectoryError: If the directory does not exist.
        """
        directory = Path(path)
        if not directory.is_dir():
            raise FixtureDirectoryError(f"Fixture directory does not exist: {directory}")
        ResponseBuilder._fixture_directory = directory

    @classmethod
    def get_fixture_directory(cls) -> Path:
        """Return the configured fixture directory, falling back to ``MUZZLE_FIXTURE_DIRECTORY``."""
        directory = ResponseBuilder._fixture_directory
        if directory is None:
            directory = Config().fixture_directory
        if directory is None:
            raise FixtureDirectoryError(
                "No fixture directory configured. Call ResponseBuilder.set_fixture_directory() "
                "or set MUZZLE_FIXTURE_DIRECTORY."
            )
        if not directory.is_dir():
            raise FixtureDirectoryError(f"Fixture directory does not exist: {directory}")
        return directory

    @classmethod
    def reset_fixture_directory(cls) -> None:
        ResponseBuilder._fixture_directory = None

    @classmethod
    def from_fixture(cls, name: str) -> Fixture:
        """Load ``name`` from the fixture directory as a typed fixture."""
        return load_fixture(cls.get_fixture_directory() / name)

    def set_status(self, status: int) -> Self:
        self.status = int(status)
        return self

    def set_headers(self, headers: Mapping[str, str]) -> Self:
        self.headers = httpx.Headers(headers)
        return self

    def set_header(self, name: str, value: str) -> Self:
        self.headers[name] = value
        return self

    def set_body(self, body: str | bytes) -> Self:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        return self

    def set_json(self, data: Any) -> Self:
        self.set_body(json.dumps(data))
        self.headers["Content-Type"] = "application/json"
        return self

    def set_body_from_fixture(self, name: str) -> Self:
        fixture = self.from_fixture(name)
        logger.debug(f"Using fixture {fixture.path} as response body")
        self.set_body(fixture.content)
        if "Content-Type" not in self.headers:
            self.headers["Content-Type"] = fixture.content_type
        return self

    def build(self) -> AssertableResponse:
        return AssertableResponse(self.status, headers=self.headers, content=self.body)
