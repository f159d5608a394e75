"""File-backed response payloads, typed by file extension."""

import json
from pathlib import Path
from typing import Any, ClassVar

from bs4 import BeautifulSoup
from loguru import logger

from muzzle.constants import (
    DEFAULT_FIXTURE_ENCODING,
    FIXTURE_CONTENT_TYPES,
    HTML_EXTENSIONS,
    JSON_EXTENSIONS,
)
from muzzle.exceptions import FixtureError, FixtureNotFoundError

__all__ = ["Fixture", "HtmlFixture", "JsonFixture", "fixture_class_for", "load_fixture"]


class Fixture:
    """A plain-text fixture file."""

    kind: ClassVar[str] = "text"

    def __init__(self, path: str | Path, content: str) -> None:
        self.path = Path(path)
        self.content = content

    @classmethod
    def from_file(cls, path: str | Path) -> "Fixture":
        file_path = Path(path)
        if not file_path.is_file():
            raise FixtureNotFoundError(f"Fixture not found: {file_path}")
        logger.debug(f"Loading {cls.kind} fixture {file_path}")
        return cls(file_path, file_path.read_text(encoding=DEFAULT_FIXTURE_ENCODING))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def content_type(self) -> str:
        return FIXTURE_CONTENT_TYPES[self.kind]

    def decode(self) -> Any:
        return self.content

    def __str__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class JsonFixture(Fixture):
    kind: ClassVar[str] = "json"

    def decode(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise FixtureError(f"Fixture {self.path} is not valid JSON: {e}") from e


class HtmlFixture(Fixture):
    kind: ClassVar[str] = "html"

    def decode(self) -> BeautifulSoup:
        return BeautifulSoup(self.content, "html.parser")


def fixture_class_for(path: str | Path) -> type[Fixture]:
    """Pick the fixture type from the file extension."""
    suffix = Path(path).suffix.lower()
    if suffix in JSON_EXTENSIONS:
        return JsonFixture
    if suffix in HTML_EXTENSIONS:
        return HtmlFixture
    return Fixture


def load_fixture(path: str | Path) -> Fixture:
    return fixture_class_for(path).from_file(path)
